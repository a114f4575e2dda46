"""Cosmetic vehicle identification numbers.

These look like VINs but are not: no check digit, no position rules and no
uniqueness guarantee. They only give each car something to print.
"""

import random
from typing import Optional

# A-Z without I, O and Q, then the ten digits
VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"
VIN_LENGTH = 17


def generate_vin(rng: Optional[random.Random] = None) -> str:
    """Draw VIN_LENGTH characters uniformly from VIN_ALPHABET."""
    if rng is None:
        rng = random.Random()
    return "".join(rng.choice(VIN_ALPHABET) for _ in range(VIN_LENGTH))


def is_valid_vin(vin: str) -> bool:
    """Check that a string has the shape generate_vin produces."""
    return len(vin) == VIN_LENGTH and all(c in VIN_ALPHABET for c in vin)
