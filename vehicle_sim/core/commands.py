"""Discrete dashboard commands mapped onto vehicle operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from vehicle_sim.core.outcome import Outcome
from vehicle_sim.core.vehicle import Vehicle

HONK_NOTICE: str = "HONK!"
TANK_FULL_NOTICE: str = "Tank full!"
STALL_NOTICE: str = "Engine stalled: tank empty"

# Seconds a notice stays on screen.
NOTICE_SECONDS: dict[str, float] = {
    HONK_NOTICE: 1.2,
    TANK_FULL_NOTICE: 2.0,
    STALL_NOTICE: 2.0,
}


class Command(enum.Enum):
    TOGGLE_ENGINE = "toggle_engine"
    DRIVE_OFF = "drive_off"
    ACCELERATE = "accelerate"
    BRAKE = "brake"
    REFUEL = "refuel"
    HONK = "honk"


@dataclass(frozen=True)
class CommandStep:
    """Magnitudes used by the dashboard buttons.

    Attributes:
        accelerate: Speed added per ACCELERATE press.
        brake: Speed removed per BRAKE press.
        refuel: Fuel added per REFUEL press.
    """

    accelerate: float = 30.0
    brake: float = 20.0
    refuel: float = 10.0

    def __post_init__(self) -> None:
        for name in ("accelerate", "brake", "refuel"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} step must be >= 0.")


@dataclass(frozen=True)
class CommandResult:
    """What a button press did.

    Attributes:
        outcome: Tag recorded by the vehicle for the underlying operation.
        notice: Short transient message for the status area, if any.
    """

    outcome: Outcome
    notice: str | None = None

    @property
    def notice_seconds(self) -> float:
        """How long ``notice`` should be shown; 0.0 when there is none."""
        if self.notice is None:
            return 0.0
        return NOTICE_SECONDS[self.notice]


def apply_command(
    vehicle: Vehicle,
    command: Command,
    step: CommandStep | None = None,
) -> CommandResult:
    """Forward a user command to the matching vehicle operation.

    ``TOGGLE_ENGINE`` stops a running engine and starts a stopped one.

    Args:
        vehicle: Target vehicle.
        command: The button that was pressed.
        step: Button magnitudes. Defaults to :class:`CommandStep`.

    Returns:
        The recorded outcome plus an optional notice.
    """
    step = step if step is not None else CommandStep()
    notice: str | None = None

    if command is Command.TOGGLE_ENGINE:
        if vehicle.engine_running:
            vehicle.stop_engine()
        else:
            vehicle.start_engine()
    elif command is Command.DRIVE_OFF:
        vehicle.drive_off()
    elif command is Command.ACCELERATE:
        vehicle.accelerate(step.accelerate)
    elif command is Command.BRAKE:
        vehicle.brake(step.brake)
    elif command is Command.REFUEL:
        capacity = vehicle.fuel_capacity
        before = vehicle.fuel_level
        vehicle.refuel(step.refuel)
        if vehicle.fuel_level == capacity and before < capacity:
            notice = TANK_FULL_NOTICE
    elif command is Command.HONK:
        vehicle.honk()
        notice = HONK_NOTICE
    else:
        raise ValueError(f"Unknown command: {command!r}")

    outcome = vehicle.last_outcome
    if outcome.stalled:
        notice = STALL_NOTICE
    return CommandResult(outcome=outcome, notice=notice)
