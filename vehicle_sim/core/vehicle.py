"""Vehicle state machine: engine, fuel and speed under physical limits.

The vehicle owns all of its mutable state.  Every operation returns the
vehicle itself so that calls can be chained::

    car.refuel(20.0).start_engine().drive_off().accelerate(50.0)

Guarded operations never raise when their precondition does not hold;
they leave the state untouched and record an ignored
:class:`~vehicle_sim.core.outcome.Outcome` on ``last_outcome`` instead.
Negative or NaN magnitudes are a caller error and raise :class:`ValueError`.
"""

from __future__ import annotations

import enum
import logging

from vehicle_sim.core.outcome import IgnoreReason, Outcome

_logger = logging.getLogger(__name__)

DEFAULT_FUEL_CAPACITY: float = 50.0
CONSUMPTION_PER_SPEED_UNIT: float = 0.001
CRITICAL_FUEL_FRACTION: float = 0.1
DRIVE_OFF_SPEED: float = 1.0


class VehicleState(enum.Enum):
    """Derived operating state of a vehicle."""

    IDLE = "idle"
    RUNNING_STATIONARY = "running-stationary"
    RUNNING_MOVING = "running-moving"


class Vehicle:
    """A single vehicle with an engine, a fuel tank and a speedometer.

    Attributes:
        last_outcome: Tag of the most recent operation, or ``None``
            before the first one.
    """

    __slots__ = (
        "_model",
        "_fuel_capacity",
        "_max_speed",
        "_fuel_level",
        "_speed",
        "_engine_running",
        "last_outcome",
    )

    def __init__(
        self,
        model: str,
        initial_fuel: float,
        max_speed: int,
        fuel_capacity: float = DEFAULT_FUEL_CAPACITY,
    ) -> None:
        """Create a stationary vehicle with the engine off.

        Args:
            model: Display label, e.g. ``"VW Golf"``.
            initial_fuel: Starting fuel; clamped to ``fuel_capacity``.
            max_speed: Top speed, a positive integer.
            fuel_capacity: Tank size. Defaults to 50.0.

        Raises:
            ValueError: If any argument is out of range.
        """
        if not fuel_capacity > 0.0:
            raise ValueError("fuel_capacity must be > 0.")
        if isinstance(max_speed, bool) or not isinstance(max_speed, int):
            raise ValueError(
                f"max_speed must be an integer, got {type(max_speed).__name__}."
            )
        if max_speed <= 0:
            raise ValueError("max_speed must be > 0.")
        if not initial_fuel >= 0.0:
            raise ValueError("initial_fuel must be a number >= 0.")

        self._model: str = model
        self._fuel_capacity: float = float(fuel_capacity)
        self._max_speed: int = max_speed
        self._fuel_level: float = min(float(initial_fuel), self._fuel_capacity)
        self._speed: float = 0.0
        self._engine_running: bool = False
        self.last_outcome: Outcome | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def model(self) -> str:
        return self._model

    @property
    def fuel_level(self) -> float:
        return self._fuel_level

    @property
    def fuel_capacity(self) -> float:
        return self._fuel_capacity

    @property
    def fuel_ratio(self) -> float:
        """Remaining fuel as a fraction of capacity (0.0 - 1.0)."""
        return self._fuel_level / self._fuel_capacity

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def max_speed(self) -> int:
        return self._max_speed

    @property
    def engine_running(self) -> bool:
        return self._engine_running

    @property
    def state(self) -> VehicleState:
        if not self._engine_running:
            return VehicleState.IDLE
        if self._speed > 0.0:
            return VehicleState.RUNNING_MOVING
        return VehicleState.RUNNING_STATIONARY

    def is_fuel_critical(self) -> bool:
        """Return ``True`` when less than 10% of the tank remains."""
        return self._fuel_level < self._fuel_capacity * CRITICAL_FUEL_FRACTION

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def start_engine(self) -> Vehicle:
        """Start the engine if there is fuel in the tank."""
        if self._fuel_level <= 0.0:
            return self._ignore("start_engine", IgnoreReason.NO_FUEL)
        if self._engine_running:
            return self._ignore("start_engine", IgnoreReason.ALREADY_RUNNING)
        self._engine_running = True
        return self._accept("start_engine")

    def stop_engine(self) -> Vehicle:
        """Switch the engine off and bring the vehicle to a standstill."""
        self._engine_running = False
        self._speed = 0.0
        return self._accept("stop_engine")

    def refuel(self, amount: float) -> Vehicle:
        """Add fuel, capped at the tank capacity.

        Raises:
            ValueError: If amount is negative or NaN.
        """
        if not amount >= 0.0:
            raise ValueError("refuel amount must be a number >= 0.")
        self._fuel_level = min(self._fuel_capacity, self._fuel_level + amount)
        return self._accept("refuel")

    def accelerate(self, delta: float) -> Vehicle:
        """Increase speed by ``delta`` (capped at ``max_speed``) and burn fuel.

        Only effective with the engine running and fuel in the tank.

        Raises:
            ValueError: If delta is negative or NaN.
        """
        if not delta >= 0.0:
            raise ValueError("accelerate delta must be a number >= 0.")
        if not self._engine_running:
            return self._ignore("accelerate", IgnoreReason.ENGINE_OFF)
        if self._fuel_level <= 0.0:
            return self._ignore("accelerate", IgnoreReason.NO_FUEL)
        self._speed = min(float(self._max_speed), self._speed + delta)
        stalled = self._consume(delta)
        return self._accept("accelerate", stalled=stalled)

    def brake(self, delta: float) -> Vehicle:
        """Reduce speed by ``delta``, never below zero.

        Works regardless of engine state and burns no fuel.

        Raises:
            ValueError: If delta is negative or NaN.
        """
        if not delta >= 0.0:
            raise ValueError("brake delta must be a number >= 0.")
        self._speed = max(0.0, self._speed - delta)
        return self._accept("brake")

    def drive_off(self) -> Vehicle:
        """Pull away from a standstill at walking pace."""
        if not self._engine_running:
            return self._ignore("drive_off", IgnoreReason.ENGINE_OFF)
        if self._fuel_level <= 0.0:
            return self._ignore("drive_off", IgnoreReason.NO_FUEL)
        if self._speed != 0.0:
            return self._ignore("drive_off", IgnoreReason.ALREADY_MOVING)
        self._speed = DRIVE_OFF_SPEED
        stalled = self._consume(DRIVE_OFF_SPEED)
        return self._accept("drive_off", stalled=stalled)

    def honk(self) -> Vehicle:
        # Sound and visuals belong to the presentation layer.
        return self._accept("honk")

    def report_state(self) -> Vehicle:
        """Read-only checkpoint for observers; returns the vehicle unchanged."""
        _logger.debug("%r", self)
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _consume(self, delta: float) -> bool:
        """Burn fuel proportional to ``delta``; stall on an empty tank.

        Returns:
            ``True`` if the tank ran dry and the engine was forced off.
        """
        consumed: float = CONSUMPTION_PER_SPEED_UNIT * delta
        self._fuel_level = max(0.0, self._fuel_level - consumed)
        if self._fuel_level == 0.0:
            self._engine_running = False
            self._speed = 0.0
            _logger.debug("%s ran out of fuel, engine stalled", self._model)
            return True
        return False

    def _accept(self, operation: str, stalled: bool = False) -> Vehicle:
        self.last_outcome = Outcome.accepted(operation, stalled=stalled)
        return self

    def _ignore(self, operation: str, reason: IgnoreReason) -> Vehicle:
        _logger.debug("%s ignored for %s: %s", operation, self._model, reason.value)
        self.last_outcome = Outcome.ignored(operation, reason)
        return self

    def __repr__(self) -> str:
        return (
            f"Vehicle(model={self._model!r}, speed={self._speed:.1f}, "
            f"fuel={self._fuel_level:.3f}/{self._fuel_capacity:.1f}, "
            f"engine={'on' if self._engine_running else 'off'})"
        )
