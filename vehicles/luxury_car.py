"""LuxuryCar - a car with a fixed set of comfort features."""

from dataclasses import dataclass

from .car import Car
from .formatting import availability, format_number


@dataclass(frozen=True)
class LuxuryPackage:
    """Comfort features chosen when the car is built."""

    has_sunroof: bool = True
    has_heated_seats: bool = True
    navigation_system: str = "Premium GPS"


class LuxuryCar(Car):
    """Car with a luxury package. Driving and mileage behave as for Car."""

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        color: str = "Black",
        mileage: float = 0,
        has_sunroof: bool = True,
        has_heated_seats: bool = True,
        navigation_system: str = "Premium GPS",
        **kwargs,
    ):
        super().__init__(make, model, year, color, mileage, **kwargs)
        self.package = LuxuryPackage(has_sunroof, has_heated_seats, navigation_system)

    @property
    def has_sunroof(self) -> bool:
        return self.package.has_sunroof

    @property
    def has_heated_seats(self) -> bool:
        return self.package.has_heated_seats

    @property
    def navigation_system(self) -> str:
        return self.package.navigation_system

    def start(self) -> bool:
        """Start the engine and, on a fresh start, list the luxury features."""
        started = super().start()
        if started:
            self._info("   Luxury features activated:")
            self._info(f"   - Sunroof: {availability(self.has_sunroof)}")
            self._info(f"   - Heated Seats: {availability(self.has_heated_seats)}")
            self._info(f"   - Navigation: {self.navigation_system}")
        return started

    # Neither of these checks is_running
    def activate_cruise_control(self) -> None:
        self._info(f"Cruise control activated for {self.full_name}")

    def adjust_suspension(self, height: float) -> None:
        self._info(
            f"{self.full_name} suspension adjusted to {format_number(height)}cm"
        )

    def describe_luxury(self) -> str:
        return (
            f"{self.describe()} | Luxury Features: "
            f"Sunroof({str(self.has_sunroof).lower()}), "
            f"Heated Seats({str(self.has_heated_seats).lower()}), "
            f"Nav({self.navigation_system})"
        )
