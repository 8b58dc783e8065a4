"""Tests for the vehicle state machine."""

import pytest

from vehicle_sim.core.outcome import IgnoreReason
from vehicle_sim.core.vehicle import Vehicle, VehicleState

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample_vehicle(fuel: float = 20.0, max_speed: int = 200) -> Vehicle:
    return Vehicle("VW Golf", fuel, max_speed)


def _moving_vehicle(fuel: float = 20.0) -> Vehicle:
    return _sample_vehicle(fuel).start_engine().drive_off().accelerate(30.0)


def _observable(car: Vehicle) -> tuple:
    return (
        car.model,
        car.speed,
        car.fuel_level,
        car.fuel_capacity,
        car.max_speed,
        car.engine_running,
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_construction_defaults() -> None:
    """A new vehicle is stationary with the engine off."""
    car = Vehicle("BMW 3er", 15.0, 220)
    assert car.model == "BMW 3er"
    assert car.fuel_level == 15.0
    assert car.fuel_capacity == 50.0
    assert car.max_speed == 220
    assert car.speed == 0.0
    assert car.engine_running is False
    assert car.state is VehicleState.IDLE
    assert car.last_outcome is None


@pytest.mark.parametrize("initial", [0.0, 12.5, 50.0, 80.0, 1000.0])
def test_initial_fuel_clamped_to_capacity(initial: float) -> None:
    """Initial fuel is min(initial_fuel, fuel_capacity)."""
    car = Vehicle("Test", initial, 100)
    assert car.fuel_level == min(initial, 50.0)


def test_empty_model_label_allowed() -> None:
    """The label is display-only; any string is accepted."""
    car = Vehicle("", 10.0, 100)
    assert car.model == ""
    assert car.fuel_level == 10.0


def test_custom_capacity() -> None:
    car = Vehicle("Fiat 500", 40.0, 160, fuel_capacity=35.0)
    assert car.fuel_capacity == 35.0
    assert car.fuel_level == 35.0


def test_invalid_construction_rejected() -> None:
    with pytest.raises(ValueError, match="fuel_capacity"):
        Vehicle("Test", 10.0, 100, fuel_capacity=0.0)
    with pytest.raises(ValueError, match="max_speed"):
        Vehicle("Test", 10.0, 0)
    with pytest.raises(ValueError, match="integer"):
        Vehicle("Test", 10.0, 120.5)
    with pytest.raises(ValueError, match="initial_fuel"):
        Vehicle("Test", -1.0, 100)
    with pytest.raises(ValueError, match="initial_fuel"):
        Vehicle("Test", float("nan"), 100)


def test_immutable_attributes_are_read_only() -> None:
    car = _sample_vehicle()
    with pytest.raises(AttributeError):
        car.max_speed = 300
    with pytest.raises(AttributeError):
        car.fuel_capacity = 100.0


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


def test_start_engine_with_fuel() -> None:
    car = _sample_vehicle().start_engine()
    assert car.engine_running is True
    assert car.state is VehicleState.RUNNING_STATIONARY
    assert car.fuel_level == 20.0, "starting must not consume fuel"
    assert car.last_outcome.applied


def test_start_engine_empty_tank_is_noop() -> None:
    car = Vehicle("Test", 0.0, 200)
    car.start_engine()
    assert car.engine_running is False
    assert car.last_outcome.applied is False
    assert car.last_outcome.reason is IgnoreReason.NO_FUEL


def test_start_engine_twice_is_tagged_ignored() -> None:
    car = _sample_vehicle().start_engine().start_engine()
    assert car.engine_running is True
    assert car.last_outcome.reason is IgnoreReason.ALREADY_RUNNING


def test_stop_engine_zeroes_speed_and_is_idempotent() -> None:
    car = _moving_vehicle()
    assert car.speed > 0.0
    car.stop_engine()
    assert car.engine_running is False
    assert car.speed == 0.0
    car.stop_engine()
    assert car.engine_running is False
    assert car.speed == 0.0
    assert car.state is VehicleState.IDLE


def test_operations_return_same_instance() -> None:
    """Every operation returns the vehicle itself for chaining."""
    car = _sample_vehicle()
    assert car.start_engine() is car
    assert car.drive_off() is car
    assert car.accelerate(10.0) is car
    assert car.brake(5.0) is car
    assert car.refuel(1.0) is car
    assert car.honk() is car
    assert car.report_state() is car
    assert car.stop_engine() is car


# ---------------------------------------------------------------------------
# Fuel
# ---------------------------------------------------------------------------


def test_refuel_adds_fuel() -> None:
    car = _sample_vehicle(fuel=10.0).refuel(10.0)
    assert car.fuel_level == 20.0


@pytest.mark.parametrize("amount", [0.0, 5.0, 30.0, 45.0, 500.0])
def test_refuel_never_decreases_nor_exceeds_capacity(amount: float) -> None:
    car = _sample_vehicle(fuel=10.0)
    before = car.fuel_level
    car.refuel(amount)
    assert car.fuel_level >= before
    assert car.fuel_level <= car.fuel_capacity


def test_refuel_works_with_engine_running_and_moving() -> None:
    car = _moving_vehicle(fuel=10.0)
    speed = car.speed
    car.refuel(5.0)
    assert car.fuel_level > 10.0
    assert car.speed == speed


def test_fuel_critical_threshold() -> None:
    assert Vehicle("Test", 4.9, 100).is_fuel_critical() is True
    assert Vehicle("Test", 5.0, 100).is_fuel_critical() is False
    assert Vehicle("Test", 50.0, 100).is_fuel_critical() is False
    assert Vehicle("Test", 0.0, 100).is_fuel_critical() is True


def test_fuel_ratio() -> None:
    car = Vehicle("Test", 12.5, 100)
    assert car.fuel_ratio == pytest.approx(0.25)


# ---------------------------------------------------------------------------
# Driving
# ---------------------------------------------------------------------------


def test_drive_off_sets_walking_pace() -> None:
    car = _sample_vehicle().start_engine().drive_off()
    assert car.speed == 1.0
    assert car.fuel_level == pytest.approx(20.0 - 0.001)
    assert car.state is VehicleState.RUNNING_MOVING


def test_drive_off_without_engine_is_noop() -> None:
    car = _sample_vehicle().drive_off()
    assert car.speed == 0.0
    assert car.fuel_level == 20.0
    assert car.last_outcome.reason is IgnoreReason.ENGINE_OFF


def test_drive_off_while_moving_is_noop() -> None:
    car = _moving_vehicle()
    speed, fuel = car.speed, car.fuel_level
    car.drive_off()
    assert car.speed == speed
    assert car.fuel_level == fuel
    assert car.last_outcome.reason is IgnoreReason.ALREADY_MOVING


def test_accelerate_increases_speed_and_burns_fuel() -> None:
    car = _sample_vehicle().start_engine().drive_off()
    fuel_before = car.fuel_level
    car.accelerate(30.0)
    assert car.speed == pytest.approx(31.0)
    assert car.fuel_level == pytest.approx(fuel_before - 0.03)


def test_accelerate_without_engine_is_noop() -> None:
    car = _sample_vehicle().accelerate(50.0)
    assert car.speed == 0.0
    assert car.fuel_level == 20.0
    assert car.last_outcome.applied is False
    assert car.last_outcome.reason is IgnoreReason.ENGINE_OFF


def test_accelerate_capped_at_max_speed() -> None:
    car = _sample_vehicle().start_engine().accelerate(150.0).accelerate(150.0)
    assert car.speed == 200.0


@pytest.mark.parametrize("delta", [0.5, 10.0, 99.0, 250.0])
def test_accelerate_from_standstill_bounded(delta: float) -> None:
    car = _sample_vehicle(max_speed=100).start_engine().accelerate(delta)
    assert 0.0 < car.speed <= 100.0


def test_brake_reduces_speed() -> None:
    car = _moving_vehicle()
    before = car.speed
    car.brake(20.0)
    assert car.speed == pytest.approx(before - 20.0)


def test_brake_never_below_zero() -> None:
    car = _moving_vehicle().brake(500.0)
    assert car.speed == 0.0
    assert car.engine_running is True
    assert car.state is VehicleState.RUNNING_STATIONARY


def test_brake_consumes_no_fuel() -> None:
    car = _moving_vehicle()
    fuel = car.fuel_level
    car.brake(10.0)
    assert car.fuel_level == fuel


def test_honk_leaves_state_unchanged() -> None:
    """Honking is a pure hook: every observable field stays the same."""
    car = _moving_vehicle()
    before = _observable(car)
    car.honk().honk()
    assert _observable(car) == before
    assert car.last_outcome.applied is True
    assert car.last_outcome.operation == "honk"


# ---------------------------------------------------------------------------
# Negative magnitudes
# ---------------------------------------------------------------------------


def test_negative_magnitudes_rejected_without_state_change() -> None:
    car = _moving_vehicle()
    speed, fuel = car.speed, car.fuel_level
    with pytest.raises(ValueError, match="refuel amount must be a number >= 0"):
        car.refuel(-5.0)
    with pytest.raises(ValueError, match="accelerate delta must be a number >= 0"):
        car.accelerate(-5.0)
    with pytest.raises(ValueError, match="brake delta must be a number >= 0"):
        car.brake(-5.0)
    assert car.speed == speed
    assert car.fuel_level == fuel


@pytest.mark.parametrize("operation", ["refuel", "accelerate", "brake"])
@pytest.mark.parametrize("magnitude", [float("nan"), -float("inf")])
def test_non_numeric_magnitudes_rejected_without_state_change(
    operation: str, magnitude: float
) -> None:
    """NaN must not slip past the sign check and clamp state to a bound."""
    car = _moving_vehicle(fuel=1.0)
    before = _observable(car)
    with pytest.raises(ValueError, match="must be a number >= 0"):
        getattr(car, operation)(magnitude)
    assert _observable(car) == before


def test_negative_accelerate_rejected_even_with_engine_off() -> None:
    car = _sample_vehicle()
    with pytest.raises(ValueError):
        car.accelerate(-1.0)


# ---------------------------------------------------------------------------
# Auto-stall
# ---------------------------------------------------------------------------


def test_auto_stall_on_same_call_that_empties_tank() -> None:
    """The call that burns the last drop must also stop the engine."""
    car = Vehicle("Test", 0.01, 200).start_engine()
    calls = 0
    while car.engine_running:
        car.accelerate(10.0)
        calls += 1
        if car.fuel_level == 0.0:
            assert car.engine_running is False
            assert car.speed == 0.0
            assert car.last_outcome.stalled is True
        assert calls < 10
    assert car.fuel_level == 0.0


def test_auto_stall_via_drive_off() -> None:
    car = Vehicle("Test", 0.001, 200).start_engine().drive_off()
    assert car.fuel_level == 0.0
    assert car.engine_running is False
    assert car.speed == 0.0


def test_cannot_restart_after_stall_until_refuel() -> None:
    car = Vehicle("Test", 0.005, 200).start_engine().accelerate(10.0)
    car.start_engine()
    assert car.engine_running is False
    car.refuel(1.0).start_engine()
    assert car.engine_running is True


def test_empty_tank_never_observed_with_engine_running() -> None:
    car = Vehicle("Test", 0.05, 120)
    sequence = [
        lambda c: c.start_engine(),
        lambda c: c.drive_off(),
        lambda c: c.accelerate(7.0),
        lambda c: c.brake(3.0),
        lambda c: c.accelerate(11.0),
        lambda c: c.drive_off(),
        lambda c: c.honk(),
        lambda c: c.start_engine(),
    ]
    for _ in range(20):
        for op in sequence:
            op(car)
            if car.fuel_level == 0.0:
                assert car.engine_running is False
            assert 0.0 <= car.fuel_level <= car.fuel_capacity
            assert 0.0 <= car.speed <= car.max_speed


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_demonstration_chain() -> None:
    car = (
        Vehicle("VW Golf", 5.0, 200)
        .refuel(20.0)
        .start_engine()
        .drive_off()
        .accelerate(50.0)
        .brake(20.0)
    )
    assert car.engine_running is True
    assert car.speed == pytest.approx(31.0)
    assert car.fuel_level == pytest.approx(25.0 - 0.001 * 51)


def test_extreme_chain_ends_parked() -> None:
    car = Vehicle("VW Golf", 25.0, 200).start_engine().drive_off()
    car.accelerate(150.0).brake(180.0).stop_engine()
    assert car.speed == 0.0
    assert car.engine_running is False


def test_repr_mentions_model() -> None:
    assert "VW Golf" in repr(_sample_vehicle())
