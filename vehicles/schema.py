"""Schema checks for fleet descriptions."""

from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional

import yaml
from jsonschema import Draft202012Validator

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


class FleetValidationError(ValueError):
    """A fleet description that does not match the schema."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid fleet: " + "; ".join(errors))


@lru_cache(maxsize=None)
def load_schema() -> dict:
    """Load the fleet JSON schema from schema.yaml."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def fleet_errors(data: Any, schema: Optional[dict] = None) -> List[str]:
    """
    Collect every schema violation in a parsed fleet.

    Each message leads with the dotted path of the offending value, e.g.
    "vehicles.0: 'year' is a required property". Returns [] for a valid fleet.
    """
    if schema is None:
        schema = load_schema()
    validator = Draft202012Validator(schema)
    errors = sorted(
        validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]
    )
    return [
        f"{'.'.join(str(p) for p in e.path) or '(root)'}: {e.message}"
        for e in errors
    ]


def check_fleet(data: Any) -> None:
    """Raise FleetValidationError unless data is a valid fleet."""
    errors = fleet_errors(data)
    if errors:
        raise FleetValidationError(errors)
