"""YAML loading for fleet descriptions."""

import random
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml

from .car import Car
from .electric_car import ElectricCar
from .luxury_car import LuxuryCar
from .schema import check_fleet

VEHICLE_TYPES = {
    "car": Car,
    "luxury": LuxuryCar,
    "electric": ElectricCar,
}

# YAML key -> constructor keyword, per variant
_OPTIONAL_KEYS = {
    "car": {"color": "color", "mileage": "mileage"},
    "luxury": {
        "color": "color",
        "mileage": "mileage",
        "hasSunroof": "has_sunroof",
        "hasHeatedSeats": "has_heated_seats",
        "navigationSystem": "navigation_system",
    },
    "electric": {
        "color": "color",
        "mileage": "mileage",
        "batteryCapacity": "battery_capacity",
        "range": "range",
        "chargingTime": "charging_time",
    },
}


def _parse_vehicle(dct: Dict[str, Any], **kwargs) -> Car:
    """Build the right Car variant from one fleet entry."""
    kind = dct.get("type", "car")
    if kind not in VEHICLE_TYPES:
        raise ValueError(
            f"Unknown vehicle type '{kind}' "
            f"(expected one of: {', '.join(VEHICLE_TYPES)})"
        )

    # Only pass keys that are present so each variant keeps its own defaults
    for yaml_key, arg in _OPTIONAL_KEYS[kind].items():
        if dct.get(yaml_key) is not None:
            kwargs[arg] = dct[yaml_key]

    return VEHICLE_TYPES[kind](dct["make"], dct["model"], dct["year"], **kwargs)


def load_fleet(
    filename: Union[str, Path],
    sink=None,
    rng: Optional[random.Random] = None,
    today: Optional[Callable[[], date]] = None,
) -> List[Car]:
    """
    Load a fleet of cars from a YAML file.

    The file is checked against the fleet schema first; any violation raises
    FleetValidationError listing every problem with its path.

    A top-level 'seed' makes the generated VINs repeatable; an explicit rng
    takes precedence over it. Every car shares the same sink, rng and clock.
    """
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)

    # An empty file is an empty fleet
    if data is None:
        data = {"vehicles": []}
    check_fleet(data)

    if rng is None and data.get("seed") is not None:
        rng = random.Random(data["seed"])
    if rng is None:
        rng = random.Random()

    return [
        _parse_vehicle(entry, sink=sink, rng=rng, today=today)
        for entry in data["vehicles"]
    ]
