"""
Capability contracts for vehicles.

Vehicle is the guaranteed part: make, model, year and start(). Everything a
vehicle may or may not offer lives in its own small protocol so callers check
for it explicitly instead of probing for None:

- Stoppable: stop()
- Describable: describe()
- HasDetails: color, mileage, is_running

LuxuryVehicle and ElectricVehicle refine Vehicle with their feature sets.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Vehicle(Protocol):
    """Minimal shape every vehicle satisfies."""

    make: str
    model: str
    year: int

    def start(self) -> Any: ...


@runtime_checkable
class Stoppable(Protocol):
    def stop(self) -> Any: ...


@runtime_checkable
class Describable(Protocol):
    def describe(self) -> str: ...


@runtime_checkable
class HasDetails(Protocol):
    color: str
    mileage: float
    is_running: bool


@runtime_checkable
class LuxuryVehicle(Vehicle, Protocol):
    """Vehicle with comfort features."""

    has_sunroof: bool
    has_heated_seats: bool
    navigation_system: str

    def activate_cruise_control(self) -> None: ...

    def adjust_suspension(self, height: float) -> None: ...


@runtime_checkable
class ElectricVehicle(Vehicle, Protocol):
    """Vehicle running on a rechargeable battery."""

    battery_capacity: float  # kWh
    range: float  # miles
    charging_time: float  # hours

    def charge(self) -> None: ...

    def get_battery_level(self) -> float: ...


def can_stop(vehicle: Vehicle) -> bool:
    """True if the vehicle offers stop()."""
    return isinstance(vehicle, Stoppable)


def can_describe(vehicle: Vehicle) -> bool:
    """True if the vehicle offers describe()."""
    return isinstance(vehicle, Describable)
