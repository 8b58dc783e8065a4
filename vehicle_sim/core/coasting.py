"""Ambient deceleration applied by the dashboard between user actions.

The vehicle itself never slows down on its own.  The dashboard refreshes at
a fixed cadence and, on each tick, lets a running vehicle coast down a
little while it is above a threshold speed.
"""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_sim.core.vehicle import Vehicle


@dataclass(frozen=True)
class CoastingPolicy:
    """Refresh cadence and coast-down parameters of the dashboard loop.

    Attributes:
        refresh_hz: Dashboard updates per second.
        threshold: Coasting only applies strictly above this speed.
        deceleration: Speed removed per tick via :meth:`Vehicle.brake`.
    """

    refresh_hz: float = 10.0
    threshold: float = 10.0
    deceleration: float = 0.2

    def __post_init__(self) -> None:
        if self.refresh_hz <= 0.0:
            raise ValueError("refresh_hz must be > 0.")
        if self.threshold < 0.0:
            raise ValueError("threshold must be >= 0.")
        if self.deceleration < 0.0:
            raise ValueError("deceleration must be >= 0.")

    @property
    def interval(self) -> float:
        """Seconds between two ticks."""
        return 1.0 / self.refresh_hz


def apply_coasting(vehicle: Vehicle, policy: CoastingPolicy) -> Vehicle:
    """Run one dashboard tick of coast-down on ``vehicle``.

    Args:
        vehicle: The vehicle shown on the dashboard.
        policy: Cadence and deceleration parameters.

    Returns:
        The same vehicle, for chaining.
    """
    if vehicle.engine_running and vehicle.speed > policy.threshold:
        vehicle.brake(policy.deceleration)
    return vehicle


def coast_ticks(vehicle: Vehicle, policy: CoastingPolicy, ticks: int) -> Vehicle:
    """Apply ``ticks`` consecutive coasting steps.

    Raises:
        ValueError: If ticks is negative.
    """
    if ticks < 0:
        raise ValueError("ticks must be >= 0.")
    for _ in range(ticks):
        apply_coasting(vehicle, policy)
    return vehicle
