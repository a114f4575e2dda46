#!/usr/bin/env python3
"""Tests for showroom CLI helpers and commands."""

from datetime import date

import pytest

import showroom
from showroom import main, make_fleet_table, run_collection, vehicle_extras
from vehicles import Car, ElectricCar, EventLog, LuxuryCar


def fixed_today():
    return date(2025, 6, 1)


class TestVehicleExtras:
    """Tests for vehicle_extras."""

    def test_plain_car(self):
        assert vehicle_extras(Car("Ford", "Mustang", 2020, sink=EventLog())) == "-"

    def test_luxury_car(self):
        car = LuxuryCar("BMW", "7 Series", 2022, sink=EventLog())
        assert vehicle_extras(car) == "Sunroof, Heated Seats, Nav: Premium GPS"

    def test_luxury_car_without_extras(self):
        car = LuxuryCar("BMW", "7 Series", 2022, has_sunroof=False, has_heated_seats=False, sink=EventLog())
        assert vehicle_extras(car) == "Nav: Premium GPS"

    def test_electric_car(self):
        car = ElectricCar("Tesla", "Model 3", 2023, range=358, battery_capacity=82, charging_time=10, sink=EventLog())
        assert vehicle_extras(car) == "82kWh / 358mi / 10h (100.0%)"


class TestMakeFleetTable:
    """Tests for make_fleet_table."""

    def test_empty_list_returns_empty_rows(self):
        assert make_fleet_table([]) == []

    def test_single_car_row(self):
        car = Car("Toyota", "Camry", 2022, "Silver", 15000, sink=EventLog(), today=fixed_today)
        rows = make_fleet_table([car])
        assert rows == [
            ["Car", "Toyota Camry", "2022", "Silver", "15,000", "3", car.vin, "-"]
        ]

    def test_type_column_uses_variant_name(self):
        log = EventLog()
        rows = make_fleet_table(
            [LuxuryCar("BMW", "7 Series", 2022, sink=log), ElectricCar("Rivian", "R1T", 2023, sink=log)]
        )
        assert [r[0] for r in rows] == ["LuxuryCar", "ElectricCar"]


class TestRunCollection:
    """Tests for run_collection."""

    def test_starts_and_stops_each_vehicle(self, capsys):
        log = EventLog()
        cars = [
            Car("Ford", "Mustang", 2020, sink=log),
            ElectricCar("Rivian", "R1T", 2023, sink=log),
        ]
        run_collection(cars)
        assert all(not c.is_running for c in cars)
        assert "Ford Mustang engine stopped." in log.messages
        assert "Rivian R1T engine stopped." in log.messages
        out = capsys.readouterr().out
        assert "Total vehicles: 2" in out
        assert "  Type: ElectricCar" in out


class TestDemoCommand:
    """Tests for the demo command."""

    def test_runs_full_walkthrough(self, capsys):
        assert main(["demo", "--seed", "5"]) == 0
        out = capsys.readouterr().out
        assert "Toyota Camry drove 50 miles." in out
        assert "   Total mileage: 15,050 miles" in out
        assert "   - Navigation: Mercedes MBUX" in out
        assert "Cruise control activated for Mercedes-Benz S-Class" in out
        assert "Tesla Model 3 drove 150 miles using 41.9% battery." in out
        assert "Battery level: 58.1%" in out
        assert "Created using Car.create: 2023 Chevrolet Corvette (White) - Mileage: 0 miles" in out
        assert "Does test_car satisfy Vehicle? True" in out
        assert "Warning:" not in out

    def test_seed_makes_output_repeatable(self, capsys):
        main(["demo", "--seed", "5"])
        first = capsys.readouterr().out
        main(["demo", "--seed", "5"])
        assert capsys.readouterr().out == first

    def test_unexpected_error_is_reported(self, monkeypatch, capsys):
        def boom(sink, rng):
            raise RuntimeError("boom")

        monkeypatch.setattr(showroom, "run_demo", boom)
        assert main(["demo"]) == 1
        assert "Error occurred: boom" in capsys.readouterr().out


class TestFleetCommand:
    """Tests for the fleet command."""

    def test_missing_file(self, tmp_path, capsys):
        assert main(["fleet", str(tmp_path / "nope.yaml")]) == 1
        assert "Error: File not found" in capsys.readouterr().out

    def test_prints_table_and_runs_collection(self, tmp_path, capsys):
        path = tmp_path / "fleet.yaml"
        path.write_text("""
vehicles:
  - make: Ford
    model: Mustang
    year: 2020
  - type: electric
    make: Rivian
    model: R1T
    year: 2023
""")
        assert main(["fleet", str(path), "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Vehicles: 2" in out
        assert "Extras" in out
        assert "Ford Mustang engine started!" in out
        assert "Rivian R1T engine stopped." in out

    def test_empty_fleet(self, tmp_path, capsys):
        path = tmp_path / "fleet.yaml"
        path.write_text("vehicles: []\n")
        assert main(["fleet", str(path)]) == 0
        assert "No vehicles found." in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [[], ["fly"]])
    def test_bad_usage_exits(self, argv):
        with pytest.raises(SystemExit):
            main(argv)


class TestFleetCommandErrors:
    """Bad fleet files end in an error message, not a traceback."""

    def test_unknown_type(self, tmp_path, capsys):
        path = tmp_path / "fleet.yaml"
        path.write_text("""
vehicles:
  - type: hovercraft
    make: Acme
    model: Glide
    year: 2030
""")
        assert main(["fleet", str(path)]) == 1
        out = capsys.readouterr().out
        assert out.startswith("Error: Invalid fleet: vehicles.0.type:")
        assert "hovercraft" in out

    def test_malformed_yaml(self, tmp_path, capsys):
        path = tmp_path / "fleet.yaml"
        path.write_text("vehicles: [unclosed\n")
        assert main(["fleet", str(path)]) == 1
        assert capsys.readouterr().out.startswith("Error: ")
