"""Snapshots of vehicle state for display and history charts."""

from __future__ import annotations

from collections import deque
from dataclasses import asdict, dataclass

import pandas as pd

from vehicle_sim.core.vehicle import Vehicle

# (upper bound exclusive, band name, colour) ordered by ratio
_FUEL_BANDS: tuple[tuple[float, str, str], ...] = (
    (0.10, "empty", "#c0392b"),
    (0.25, "critical", "#e74c3c"),
    (0.50, "medium", "#f39c12"),
)
_FULL_BAND: tuple[str, str] = ("full", "#27ae60")

SNAPSHOT_COLUMNS: list[str] = [
    "tick",
    "speed",
    "fuel_level",
    "fuel_ratio",
    "engine_running",
    "fuel_critical",
    "state",
]


@dataclass(frozen=True)
class VehicleSnapshot:
    """Immutable copy of everything the dashboard reads from a vehicle."""

    tick: int
    speed: float
    fuel_level: float
    fuel_ratio: float
    engine_running: bool
    fuel_critical: bool
    state: str


def snapshot(vehicle: Vehicle, tick: int = 0) -> VehicleSnapshot:
    """Capture the current observable state of ``vehicle``."""
    return VehicleSnapshot(
        tick=tick,
        speed=vehicle.speed,
        fuel_level=vehicle.fuel_level,
        fuel_ratio=vehicle.fuel_ratio,
        engine_running=vehicle.engine_running,
        fuel_critical=vehicle.is_fuel_critical(),
        state=vehicle.state.value,
    )


def fuel_band(ratio: float) -> tuple[str, str]:
    """Classify a tank fill ratio into a named band and its display colour.

    Args:
        ratio: Fuel level divided by capacity (0.0 - 1.0).

    Returns:
        ``(band, colour_hex)``, e.g. ``("critical", "#e74c3c")``.

    Raises:
        ValueError: If ratio is outside [0.0, 1.0].
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError("ratio must be between 0.0 and 1.0.")
    for upper, name, colour in _FUEL_BANDS:
        if ratio < upper:
            return name, colour
    return _FULL_BAND


class TelemetryLog:
    """Bounded history of snapshots; the oldest entries drop off first.

    Attributes:
        max_length: Maximum number of snapshots retained.
    """

    __slots__ = ("max_length", "_entries")

    def __init__(self, max_length: int = 600) -> None:
        if max_length <= 0:
            raise ValueError("max_length must be > 0.")
        self.max_length: int = max_length
        self._entries: deque[VehicleSnapshot] = deque(maxlen=max_length)

    def record(self, vehicle: Vehicle, tick: int) -> VehicleSnapshot:
        """Snapshot ``vehicle`` and append it to the log."""
        snap = snapshot(vehicle, tick)
        self._entries.append(snap)
        return snap

    @property
    def latest(self) -> VehicleSnapshot | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def to_frame(self) -> pd.DataFrame:
        """Return the history as a DataFrame, one row per snapshot."""
        rows = [asdict(s) for s in self._entries]
        return pd.DataFrame(rows, columns=SNAPSHOT_COLUMNS)
