#!/usr/bin/env python3
"""
CLI for the vehicle showroom.

Commands:
  demo   - Walk through every car variant and capability in a fixed order
  fleet  - Load a fleet YAML file, tabulate it, then start and stop each car
"""

import argparse
import random
import sys
from pathlib import Path
import yaml
from tabulate import tabulate
from typing import List, Optional

from vehicles import (
    Car,
    ConsoleSink,
    ElectricCar,
    LuxuryCar,
    Vehicle,
    can_describe,
    can_stop,
    format_miles,
    format_number,
    format_percent,
    load_fleet,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def print_banner(title: str) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)


def print_section(number: int, title: str) -> None:
    print()
    print(f"{number}. {title}")
    print("-" * 40)


def vehicle_extras(car: Car) -> str:
    """Summarize variant-specific features for the fleet table."""
    if isinstance(car, LuxuryCar):
        features = []
        if car.has_sunroof:
            features.append("Sunroof")
        if car.has_heated_seats:
            features.append("Heated Seats")
        features.append(f"Nav: {car.navigation_system}")
        return ", ".join(features)
    if isinstance(car, ElectricCar):
        return (
            f"{format_number(car.battery_capacity)}kWh / "
            f"{format_number(car.range)}mi / "
            f"{format_number(car.charging_time)}h "
            f"({format_percent(car.get_battery_level())}%)"
        )
    return "-"


def make_fleet_table(cars: List[Car]) -> List[List[str]]:
    """Convert cars to table rows."""
    rows = []
    for car in cars:
        rows.append(
            [
                type(car).__name__,
                car.full_name,
                str(car.year),
                car.color,
                format_miles(car.mileage),
                str(car.age),
                car.vin,
                vehicle_extras(car),
            ]
        )
    return rows


# =============================================================================
# Demonstration
# =============================================================================


def run_collection(vehicles: List[Vehicle]) -> None:
    """Start every vehicle, and stop the ones that can be stopped."""
    print(f"Total vehicles: {len(vehicles)}")
    for index, vehicle in enumerate(vehicles, start=1):
        print(f"\nVehicle {index}:")
        print(f"  Type: {type(vehicle).__name__}")
        print(f"  Make/Model: {vehicle.make} {vehicle.model}")
        vehicle.start()
        if can_stop(vehicle):
            vehicle.stop()


def demonstrate_contracts(sink, rng: random.Random) -> None:
    """Show how a Car lines up with the Vehicle contract."""
    print("\nCONTRACT CHECKS")
    print("-" * 40)

    test_car = Car("Test", "Model", 2023, sink=sink, rng=rng)
    print(f"Is test_car an instance of Car? {isinstance(test_car, Car)}")
    print(f"Does test_car satisfy Vehicle? {isinstance(test_car, Vehicle)}")
    print(f"Type of make: {type(test_car.make).__name__}")
    print(f"Type of year: {type(test_car.year).__name__}")
    print(f"Has start method? {callable(getattr(test_car, 'start', None))}")


def run_demo(sink, rng: random.Random) -> None:
    """The fixed walkthrough of every variant."""
    print_banner("VEHICLE CONTRACT AND CAR CLASS DEMONSTRATION")

    print_section(1, "BASIC CAR INSTANCE")
    my_car = Car("Toyota", "Camry", 2022, "Silver", 15000, sink=sink, rng=rng)
    print(f"Created car: {my_car.describe()}")
    my_car.start()
    my_car.drive(50)
    print(f"Car age: {my_car.age} years")
    my_car.stop()

    print_section(2, "USING THE VEHICLE CONTRACT")
    vehicle: Vehicle = Car("Honda", "Civic", 2021, "Red", 25000, sink=sink, rng=rng)
    print(f"Vehicle: {vehicle.make} {vehicle.model} {vehicle.year}")
    vehicle.start()
    if can_describe(vehicle):
        print(vehicle.describe())

    print_section(3, "LUXURY CAR DEMONSTRATION")
    luxury_car = LuxuryCar(
        "Mercedes-Benz",
        "S-Class",
        2023,
        "Black",
        5000,
        True,
        True,
        "Mercedes MBUX",
        sink=sink,
        rng=rng,
    )
    print(luxury_car.describe_luxury())
    luxury_car.start()
    luxury_car.activate_cruise_control()
    luxury_car.adjust_suspension(15)
    luxury_car.drive(100)
    luxury_car.stop()

    print_section(4, "ELECTRIC CAR DEMONSTRATION")
    electric_car = ElectricCar(
        "Tesla",
        "Model 3",
        2023,
        "Midnight Silver",
        12000,
        82,
        358,
        10,
        sink=sink,
        rng=rng,
    )
    print(electric_car.describe_electric())
    electric_car.start()
    electric_car.drive(150)
    print(f"Battery level: {format_percent(electric_car.get_battery_level())}%")
    electric_car.charge()
    electric_car.stop()

    print_section(5, "VEHICLE COLLECTION")
    run_collection(
        [
            Car("Ford", "Mustang", 2020, "Yellow", 20000, sink=sink, rng=rng),
            LuxuryCar("BMW", "7 Series", 2022, "White", 8000, sink=sink, rng=rng),
            ElectricCar("Rivian", "R1T", 2023, "Forest Green", 5000, sink=sink, rng=rng),
        ]
    )

    print_section(6, "FACTORY METHOD DEMONSTRATION")
    factory_car = Car.create("Chevrolet", "Corvette", 2023, sink=sink, rng=rng)
    print(f"Created using Car.create: {factory_car.describe()}")
    factory_car.start()

    print()
    print_banner("DEMONSTRATION COMPLETE")

    demonstrate_contracts(sink, rng)


# =============================================================================
# Commands
# =============================================================================


def cmd_demo(args):
    """Run the fixed demonstration."""
    rng = random.Random(args.seed)
    try:
        run_demo(ConsoleSink(), rng)
    except Exception as e:
        print(f"Error occurred: {e}")
        return 1
    return 0


def cmd_fleet(args):
    """Tabulate a fleet file and run each car through start/stop."""
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        cars = load_fleet(args.fleet_file, sink=ConsoleSink(), rng=rng)
    except (yaml.YAMLError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Fleet: {args.fleet_file}")
    print(f"Vehicles: {len(cars)}")
    print()

    if not cars:
        print("No vehicles found.")
        return 0

    headers = ["Type", "Vehicle", "Year", "Color", "Mileage", "Age", "VIN", "Extras"]
    print(tabulate(make_fleet_table(cars), headers=headers, tablefmt="simple"))
    print()

    run_collection(cars)
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Vehicle showroom",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s demo --seed 42
  %(prog)s fleet fleets/demo.yaml
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser(
        "demo", help="Walk through every car variant in a fixed order"
    )
    demo_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for VIN generation (default: random)",
    )

    fleet_parser = subparsers.add_parser(
        "fleet", help="Tabulate a fleet file and start/stop each car"
    )
    fleet_parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    fleet_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for VIN generation (overrides the file's seed)",
    )

    args = parser.parse_args(argv)

    if args.command == "demo":
        return cmd_demo(args)
    elif args.command == "fleet":
        return cmd_fleet(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
