"""ElectricCar - a car whose driving draws down a battery."""

import math

from .car import Car
from .formatting import format_miles, format_number, format_percent

MIN_START_LEVEL = 10  # percent
FULL_CHARGE = 100  # percent


class BatteryPack:
    """
    Battery specification plus the current charge level.

    Usage is linear in distance: covering the full rated range takes the
    level from 100 to 0.
    """

    def __init__(
        self,
        capacity_kwh: float = 75,
        range_miles: float = 300,
        charging_time_hours: float = 8,
    ):
        self.capacity_kwh = capacity_kwh
        self.range_miles = range_miles
        self.charging_time_hours = charging_time_hours
        self.level: float = FULL_CHARGE

    def usage_for(self, distance: float) -> float:
        """Percentage points needed to cover distance."""
        if self.range_miles <= 0:
            # No usable range: any real trip is out of reach
            return 0.0 if distance == 0 else math.inf
        return (distance / self.range_miles) * 100

    def drain(self, percent: float) -> None:
        self.level = min(max(self.level - percent, 0.0), FULL_CHARGE)

    def recharge(self) -> None:
        self.level = FULL_CHARGE


class ElectricCar(Car):
    """Car that refuses to start on a near-empty battery and to overdraw it."""

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        color: str = "Blue",
        mileage: float = 0,
        battery_capacity: float = 75,
        range: float = 300,
        charging_time: float = 8,
        **kwargs,
    ):
        super().__init__(make, model, year, color, mileage, **kwargs)
        self.battery = BatteryPack(battery_capacity, range, charging_time)

    @property
    def battery_capacity(self) -> float:
        return self.battery.capacity_kwh

    @property
    def range(self) -> float:
        return self.battery.range_miles

    @property
    def charging_time(self) -> float:
        return self.battery.charging_time_hours

    def get_battery_level(self) -> float:
        return self.battery.level

    def start(self) -> bool:
        """
        Start the engine if the battery holds at least MIN_START_LEVEL percent.

        The battery check comes first, so a running car with a low battery
        reports the low battery rather than "already running".
        """
        if self.battery.level < MIN_START_LEVEL:
            self._warn("Battery too low! Please charge before starting.")
            return False

        started = super().start()
        self._info(f"   Battery level: {format_percent(self.battery.level)}%")
        self._info(f"   Range: {format_number(self.range)} miles")
        return started

    def drive(self, distance: float) -> bool:
        """Drive if running and the battery covers the whole distance; else change nothing."""
        if not self.is_running:
            self._warn("Please start the car before driving!")
            return False

        battery_used = self.battery.usage_for(distance)
        if battery_used > self.battery.level:
            self._warn(f"Not enough battery for {format_number(distance)} miles!")
            return False

        self.battery.drain(battery_used)
        self.mileage += distance

        self._info(
            f"{self.full_name} drove {format_number(distance)} miles "
            f"using {format_percent(battery_used)}% battery."
        )
        self._info(f"   Remaining battery: {format_percent(self.battery.level)}%")
        self._info(f"   Total mileage: {format_miles(self.mileage)} miles")
        return True

    def charge(self) -> None:
        """Fill the battery to exactly 100 percent, whatever the current level."""
        self._info(f"Charging {self.full_name}...")
        self.battery.recharge()
        self._info("   Battery fully charged!")

    def describe_electric(self) -> str:
        return (
            f"{self.describe()} | Battery: {format_number(self.battery_capacity)}kWh, "
            f"Range: {format_number(self.range)}mi, "
            f"Charge Time: {format_number(self.charging_time)}h"
        )
