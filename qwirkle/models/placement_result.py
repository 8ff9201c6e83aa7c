from __future__ import annotations

from pydantic import BaseModel, Field

from qwirkle.enums.rejection_reason import RejectionReason


class Rejection(BaseModel):
    """A refused placement: the reason, a message for the player and the offending cell if any."""

    reason: RejectionReason
    message: str
    cell: tuple[int, int] | None = None

    model_config = {
        "frozen": True,
    }


class PlacementError(ValueError):
    """Raised by `PlacementResult.unwrap` for callers that prefer exceptions."""

    def __init__(self, rejection: Rejection):
        super().__init__(rejection.message)
        self.rejection = rejection

    @property
    def reason(self) -> RejectionReason:
        return self.rejection.reason


class PlacementResult(BaseModel):
    """Outcome of one placement call: the points scored, or the rejection."""

    points: int = Field(default=0, ge=0)
    rejection: Rejection | None = None

    model_config = {
        "frozen": True,
    }

    @classmethod
    def accepted(cls, points: int) -> PlacementResult:
        return cls(points=points)

    @classmethod
    def rejected(
        cls, reason: RejectionReason, message: str, cell: tuple[int, int] | None = None
    ) -> PlacementResult:
        return cls(rejection=Rejection(reason=reason, message=message, cell=cell))

    @property
    def ok(self) -> bool:
        return self.rejection is None

    @property
    def reason(self) -> RejectionReason | None:
        return self.rejection.reason if self.rejection is not None else None

    def unwrap(self) -> int:
        """Return the points scored, raising `PlacementError` if the placement was refused."""
        if self.rejection is not None:
            raise PlacementError(self.rejection)
        return self.points
