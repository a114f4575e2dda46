"""
Vehicle models.

This package provides a small hierarchy of cars behind a capability contract:
- Vehicle, Stoppable, Describable, HasDetails: what a vehicle can do
- LuxuryVehicle, ElectricVehicle: refined capability sets
- Car: base variant with start/stop/drive and mileage
- LuxuryCar: Car plus a fixed LuxuryPackage
- ElectricCar: Car plus a BatteryPack that driving draws down
- Event, EventLog, ConsoleSink: where status messages go
- load_fleet: build cars from a YAML fleet file
- fleet_errors, FleetValidationError: schema checks for fleet files
"""

from .events import Event, EventLevel, EventLog, ConsoleSink
from .contracts import (
    Vehicle,
    Stoppable,
    Describable,
    HasDetails,
    LuxuryVehicle,
    ElectricVehicle,
    can_stop,
    can_describe,
)
from .vin import VIN_ALPHABET, VIN_LENGTH, generate_vin, is_valid_vin
from .car import Car
from .luxury_car import LuxuryCar, LuxuryPackage
from .electric_car import ElectricCar, BatteryPack, MIN_START_LEVEL, FULL_CHARGE
from .formatting import format_miles, format_percent, format_number
from .schema import FleetValidationError, check_fleet, fleet_errors, load_schema
from .loader import load_fleet, VEHICLE_TYPES

__all__ = [
    "Event",
    "EventLevel",
    "EventLog",
    "ConsoleSink",
    "Vehicle",
    "Stoppable",
    "Describable",
    "HasDetails",
    "LuxuryVehicle",
    "ElectricVehicle",
    "can_stop",
    "can_describe",
    "VIN_ALPHABET",
    "VIN_LENGTH",
    "generate_vin",
    "is_valid_vin",
    "Car",
    "LuxuryCar",
    "LuxuryPackage",
    "ElectricCar",
    "BatteryPack",
    "MIN_START_LEVEL",
    "FULL_CHARGE",
    "format_miles",
    "format_percent",
    "format_number",
    "FleetValidationError",
    "check_fleet",
    "fleet_errors",
    "load_schema",
    "load_fleet",
    "VEHICLE_TYPES",
]
