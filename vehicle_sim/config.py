"""Configuration loader for vehicle presets and dashboard settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from vehicle_sim.core.coasting import CoastingPolicy
from vehicle_sim.core.commands import CommandStep
from vehicle_sim.core.vehicle import DEFAULT_FUEL_CAPACITY, Vehicle

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
PRESETS_PATH: Path = DATA_DIR / "vehicles.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "initial_fuel", "max_speed")

_DASHBOARD_FIELDS: tuple[str, ...] = (
    "refresh_hz",
    "coasting_threshold",
    "coasting_deceleration",
    "accelerate_step",
    "brake_step",
    "refuel_step",
)


@dataclass(frozen=True)
class VehiclePreset:
    """Named construction arguments for a :class:`Vehicle`."""

    name: str
    initial_fuel: float
    max_speed: int
    fuel_capacity: float = DEFAULT_FUEL_CAPACITY

    def build(self) -> Vehicle:
        """Construct a fresh vehicle from this preset."""
        return Vehicle(
            self.name,
            self.initial_fuel,
            self.max_speed,
            fuel_capacity=self.fuel_capacity,
        )


def _read_yaml(path: Path | None) -> dict[str, Any]:
    config_path = path or PRESETS_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Vehicle config file not found: {config_path}")
    with open(config_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Vehicle config {config_path} must be a mapping.")
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_presets(path: Path | None = None) -> list[VehiclePreset]:
    """Load vehicle presets from a YAML file.

    Args:
        path: Optional override for the config file path.

    Returns:
        List of :class:`VehiclePreset` in file order.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If an entry is missing fields or has values of the
            wrong type.
    """
    data = _read_yaml(path)
    entries: list[dict] = data.get("vehicles") or []
    presets: list[VehiclePreset] = []

    for idx, entry in enumerate(entries):
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Vehicle entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        for field in ("initial_fuel", "fuel_capacity"):
            if field in entry and not _is_number(entry[field]):
                raise ValueError(
                    f"Vehicle entry {idx} ({entry['name']}): "
                    f"'{field}' must be numeric, got {type(entry[field]).__name__}"
                )
        max_speed = entry["max_speed"]
        if isinstance(max_speed, bool) or not isinstance(max_speed, int):
            raise ValueError(
                f"Vehicle entry {idx} ({entry['name']}): "
                f"'max_speed' must be an integer, got {type(max_speed).__name__}"
            )

        presets.append(
            VehiclePreset(
                name=str(entry["name"]),
                initial_fuel=float(entry["initial_fuel"]),
                max_speed=max_speed,
                fuel_capacity=float(
                    entry.get("fuel_capacity", DEFAULT_FUEL_CAPACITY)
                ),
            )
        )

    return presets


def load_dashboard_settings(
    path: Path | None = None,
) -> tuple[CoastingPolicy, CommandStep]:
    """Load the dashboard's refresh/coasting policy and button magnitudes.

    Fields missing from the ``dashboard`` block fall back to the defaults
    of :class:`CoastingPolicy` and :class:`CommandStep`.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a value is not numeric or out of range.
    """
    data = _read_yaml(path)
    block: dict = data.get("dashboard") or {}

    for field in _DASHBOARD_FIELDS:
        if field in block and not _is_number(block[field]):
            raise ValueError(
                f"dashboard.{field} must be numeric, "
                f"got {type(block[field]).__name__}"
            )

    default_policy = CoastingPolicy()
    default_step = CommandStep()
    policy = CoastingPolicy(
        refresh_hz=float(block.get("refresh_hz", default_policy.refresh_hz)),
        threshold=float(block.get("coasting_threshold", default_policy.threshold)),
        deceleration=float(
            block.get("coasting_deceleration", default_policy.deceleration)
        ),
    )
    step = CommandStep(
        accelerate=float(block.get("accelerate_step", default_step.accelerate)),
        brake=float(block.get("brake_step", default_step.brake)),
        refuel=float(block.get("refuel_step", default_step.refuel)),
    )
    return policy, step


def find_preset(name: str, path: Path | None = None) -> VehiclePreset:
    """Return the preset called ``name``.

    Raises:
        ValueError: If no preset has that name.
    """
    for preset in load_presets(path):
        if preset.name == name:
            return preset
    raise ValueError(f"Unknown vehicle preset: {name!r}")
