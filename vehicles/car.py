"""Car class - the base vehicle variant."""

import random
from datetime import date
from typing import Callable, Optional

from .events import ConsoleSink, Event, EventLevel
from .formatting import format_miles, format_number
from .vin import generate_vin


class Car:
    """
    A car that can be started, stopped and driven.

    State is a running flag plus cumulative mileage. Mileage only grows, and
    only while the engine runs. Operations never raise on a bad precondition:
    they emit a warning event and leave the car as it was.

    Args:
        sink: Receives status events (default: print to stdout)
        rng: Random source for the VIN (seed it for repeatable VINs)
        today: Returns the current date, used by age
    """

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        color: str = "White",
        mileage: float = 0,
        *,
        sink=None,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.make = make
        self.model = model
        self.year = year
        self.color = color
        self.mileage = mileage
        self.is_running = False
        self.sink = sink if sink is not None else ConsoleSink()
        self._today = today if today is not None else date.today
        self._vin = generate_vin(rng)

    @classmethod
    def create(cls, make: str, model: str, year: int, **kwargs) -> "Car":
        """Build a car with the default color and zero mileage."""
        return cls(make, model, year, **kwargs)

    @property
    def vin(self) -> str:
        """Identifier assigned at construction."""
        return self._vin

    @property
    def full_name(self) -> str:
        return f"{self.make} {self.model}"

    @property
    def age(self) -> int:
        """Whole years between the model year and the current calendar year."""
        return self._today().year - self.year

    def start(self) -> bool:
        """Start the engine. Returns True if the car went from stopped to running."""
        if self.is_running:
            self._warn(f"{self.full_name} is already running!")
            return False

        self.is_running = True
        self._info(f"{self.full_name} engine started!")
        self._info(f"   VIN: {self._vin}")
        self._info(f"   Year: {self.year}")
        self._info(f"   Color: {self.color}")
        return True

    def stop(self) -> bool:
        """Stop the engine. Returns True if the car went from running to stopped."""
        if not self.is_running:
            self._warn(f"{self.full_name} is already stopped!")
            return False

        self.is_running = False
        self._info(f"{self.full_name} engine stopped.")
        return True

    def drive(self, distance: float) -> bool:
        """
        Add distance to the odometer. Refused unless the engine is running.

        The distance is not checked; a negative value winds the odometer back.
        """
        if not self.is_running:
            self._warn("Please start the car before driving!")
            return False

        self.mileage += distance
        self._info(f"{self.full_name} drove {format_number(distance)} miles.")
        self._info(f"   Total mileage: {format_miles(self.mileage)} miles")
        return True

    def describe(self) -> str:
        return (
            f"{self.year} {self.make} {self.model} ({self.color}) - "
            f"Mileage: {format_miles(self.mileage)} miles"
        )

    def _info(self, message: str) -> None:
        self.sink.emit(Event(EventLevel.INFO, message))

    def _warn(self, message: str) -> None:
        self.sink.emit(Event(EventLevel.WARNING, message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.make!r}, {self.model!r}, {self.year!r})"
