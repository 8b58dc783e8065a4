"""Tagged outcome of a vehicle operation.

Operations on :class:`~vehicle_sim.core.vehicle.Vehicle` always return the
vehicle itself so calls can be chained.  Whether a call actually changed
anything is recorded separately as an :class:`Outcome` on
``Vehicle.last_outcome``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class IgnoreReason(enum.Enum):
    """Why a guarded operation left the vehicle unchanged."""

    ENGINE_OFF = "engine is not running"
    NO_FUEL = "fuel tank is empty"
    ALREADY_MOVING = "vehicle is already moving"
    ALREADY_RUNNING = "engine is already running"


@dataclass(frozen=True)
class Outcome:
    """Result tag of a single operation.

    Attributes:
        operation: Name of the operation that produced this outcome.
        applied: ``True`` if the guard passed and the transition ran.
        reason: Populated only when ``applied`` is ``False``.
        stalled: ``True`` if the transition emptied the tank and forced
            the engine off.
    """

    operation: str
    applied: bool
    reason: IgnoreReason | None = None
    stalled: bool = False

    def __post_init__(self) -> None:
        if self.applied and self.reason is not None:
            raise ValueError("An applied outcome cannot carry an ignore reason.")
        if not self.applied and self.reason is None:
            raise ValueError("An ignored outcome must carry a reason.")

    @classmethod
    def accepted(cls, operation: str, stalled: bool = False) -> Outcome:
        return cls(operation=operation, applied=True, stalled=stalled)

    @classmethod
    def ignored(cls, operation: str, reason: IgnoreReason) -> Outcome:
        return cls(operation=operation, applied=False, reason=reason)

    def describe(self) -> str:
        """Human-readable one-liner used by the dashboard status line."""
        if not self.applied:
            return f"{self.operation}: ignored ({self.reason.value})"
        if self.stalled:
            return f"{self.operation}: applied, engine stalled"
        return f"{self.operation}: applied"
