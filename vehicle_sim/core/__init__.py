"""Core simulation modules for the vehicle state machine."""

from vehicle_sim.core.coasting import CoastingPolicy, apply_coasting, coast_ticks
from vehicle_sim.core.commands import (
    Command,
    CommandResult,
    CommandStep,
    apply_command,
)
from vehicle_sim.core.outcome import IgnoreReason, Outcome
from vehicle_sim.core.telemetry import (
    TelemetryLog,
    VehicleSnapshot,
    fuel_band,
    snapshot,
)
from vehicle_sim.core.vehicle import (
    DEFAULT_FUEL_CAPACITY,
    Vehicle,
    VehicleState,
)

__all__ = [
    "CoastingPolicy",
    "Command",
    "CommandResult",
    "CommandStep",
    "DEFAULT_FUEL_CAPACITY",
    "IgnoreReason",
    "Outcome",
    "TelemetryLog",
    "Vehicle",
    "VehicleSnapshot",
    "VehicleState",
    "apply_coasting",
    "apply_command",
    "coast_ticks",
    "fuel_band",
    "snapshot",
]
