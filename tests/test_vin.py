#!/usr/bin/env python3
"""Tests for VIN generation."""

import random

from vehicles import VIN_ALPHABET, VIN_LENGTH, generate_vin, is_valid_vin


class TestVinAlphabet:
    """Tests for the VIN character set."""

    def test_excludes_confusable_letters(self):
        for c in "IOQ":
            assert c not in VIN_ALPHABET

    def test_contains_other_letters_and_all_digits(self):
        expected = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789") - set("IOQ")
        assert set(VIN_ALPHABET) == expected
        assert len(VIN_ALPHABET) == len(expected) == 33


class TestGenerateVin:
    """Tests for generate_vin."""

    def test_length_and_alphabet(self):
        rng = random.Random(7)
        for _ in range(50):
            vin = generate_vin(rng)
            assert len(vin) == VIN_LENGTH == 17
            assert all(c in VIN_ALPHABET for c in vin)

    def test_seeded_rng_is_deterministic(self):
        assert generate_vin(random.Random(3)) == generate_vin(random.Random(3))

    def test_without_rng(self):
        assert is_valid_vin(generate_vin())


class TestIsValidVin:
    """Tests for is_valid_vin."""

    def test_rejects_wrong_length(self):
        assert not is_valid_vin("ABC")

    def test_rejects_excluded_letters(self):
        assert not is_valid_vin("I" * 17)
