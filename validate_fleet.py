#!/usr/bin/env python3
"""
Check fleet YAML files before handing them to the showroom.

Each file is loaded exactly as `showroom.py fleet` would load it, so a file
reported OK here will also load there. Usable files get a one-line summary of
what they contain; unusable ones list every problem found.
"""
import sys
from collections import Counter
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from vehicles import Car, EventLog, FleetValidationError, load_fleet

FLEETS_DIR = Path(__file__).parent / "fleets"


def check_fleet_file(filepath: Path) -> Tuple[List[Car], List[str]]:
    """Load one fleet file. Returns (cars, errors); errors is empty when usable."""
    try:
        cars = load_fleet(filepath, sink=EventLog())
    except FleetValidationError as e:
        return [], [f"Schema validation error at {err}" for err in e.errors]
    except yaml.YAMLError as e:
        return [], [f"YAML parse error: {e}"]
    except OSError as e:
        return [], [f"Error: {e}"]
    return cars, []


def summarize_fleet(cars: List[Car]) -> str:
    """Count vehicles by variant, e.g. '3 vehicles (Car: 1, ElectricCar: 2)'."""
    noun = "vehicle" if len(cars) == 1 else "vehicles"
    if not cars:
        return f"0 {noun}"
    counts = Counter(type(car).__name__ for car in cars)
    breakdown = ", ".join(f"{name}: {count}" for name, count in counts.items())
    return f"{len(cars)} {noun} ({breakdown})"


def find_fleet_files(directory: Path) -> List[Path]:
    return sorted(list(directory.glob("*.yaml")) + list(directory.glob("*.yml")))


def main(argv: Optional[List[str]] = None):
    """Check the given fleet files, or every file in fleets/."""
    argv = sys.argv[1:] if argv is None else argv

    if argv:
        fleet_files = [Path(p) for p in argv]
    else:
        if not FLEETS_DIR.exists():
            print(f"Error: fleets directory not found: {FLEETS_DIR}")
            return 1
        fleet_files = find_fleet_files(FLEETS_DIR)
        if not fleet_files:
            print(f"Warning: No YAML files found in {FLEETS_DIR}")
            return 0

    failed = 0
    for filepath in fleet_files:
        cars, errors = check_fleet_file(filepath)
        if errors:
            failed += 1
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
        else:
            print(f"OK: {filepath.name} - {summarize_fleet(cars)}")

    if failed:
        print(f"\n{failed} of {len(fleet_files)} fleet files failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
