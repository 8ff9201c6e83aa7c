"""Core enums for Qwirkle domain objects."""

from .color import ALL_COLORS, Color
from .direction import Direction
from .rejection_reason import RejectionReason
from .shape import ALL_SHAPES, ATTRIBUTE_CARDINALITY, Shape

__all__ = [
    "Color",
    "Shape",
    "Direction",
    "RejectionReason",
    "ALL_COLORS",
    "ALL_SHAPES",
    "ATTRIBUTE_CARDINALITY",
]
