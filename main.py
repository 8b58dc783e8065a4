"""CLI entrypoint: scripted drive of a single vehicle."""

from __future__ import annotations

import sys

from vehicle_sim import __version__
from vehicle_sim.core.vehicle import Vehicle


def _print_header() -> None:
    print(
        f"  {'Checkpoint':<18}  {'Engine':>6}  {'Speed':>7}  "
        f"{'Fuel':>8}  {'Critical':>8}"
    )
    print(f"  {'-' * 18}  {'-' * 6}  {'-' * 7}  {'-' * 8}  {'-' * 8}")


def _print_state(vehicle: Vehicle, label: str) -> None:
    vehicle.report_state()
    print(
        f"  {label:<18}  {'on' if vehicle.engine_running else 'off':>6}  "
        f"{vehicle.speed:7.1f}  {vehicle.fuel_level:8.3f}  "
        f"{'yes' if vehicle.is_fuel_critical() else 'no':>8}"
    )


def main() -> None:
    """Run the two demonstration chains against one vehicle."""
    print(f"Vehicle State Machine v{__version__}")
    print("=" * 56)

    car = Vehicle("VW Golf", 5.0, 200)
    print(f"\nModel : {car.model}")
    print(f"Tank  : {car.fuel_level:.1f} / {car.fuel_capacity:.1f}")
    print(f"Vmax  : {car.max_speed}")
    print("-" * 56)

    # -- Scenario 1: normal drive ---------------------------------------------
    print("\nScenario 1: refuel, start, drive off, accelerate, brake, honk\n")
    _print_header()
    _print_state(car, "initial")
    car.refuel(20.0).start_engine().drive_off().accelerate(50.0).brake(20.0).honk()
    _print_state(car, "after drive")

    # -- Scenario 2: limits ---------------------------------------------------
    print("\nScenario 2: near top speed, full brake, engine off\n")
    _print_header()
    car.accelerate(150.0)
    _print_state(car, "high speed")
    car.brake(180.0).stop_engine()
    _print_state(car, "parked")

    print("\nDemonstration complete.")


if __name__ == "__main__":
    sys.exit(main() or 0)
