"""Qwirkle board, placement and scoring engine."""
