"""Tests for the vehicle hierarchy demo."""

import io

import pytest
from rich.console import Console

from oopdemos.demos.vehicles import demo
from oopdemos.demos.vehicles.fleet import (
    Car,
    FuelType,
    Motorcycle,
    Truck,
    Vehicle,
    VehicleFleet,
)
from oopdemos.errors import InvalidAmountError


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle("Generic", "Thing", 2020)


def test_start_accelerate_stop(console):
    car = Car("Toyota", "Camry", 2023, 4, FuelType.HYBRID, console)
    car.accelerate(10)
    assert car.speed == 0  # not running yet
    car.start()
    car.accelerate(10)
    car.accelerate(15)
    assert car.speed == 25
    assert car.status == "Running"
    car.stop()
    assert car.speed == 0
    assert car.status == "Stopped"


def test_double_start_and_stop_are_harmless(console):
    car = Car("Tesla", "Model 3", 2023, 4, "electric", console)
    car.start()
    car.start()
    assert "Car is already running" in console.file.getvalue()
    car.stop()
    car.stop()
    assert "Car is already stopped" in console.file.getvalue()
    assert not car.is_running


def test_truck_accelerates_at_half_rate(console):
    truck = Truck("Volvo", "FH16", 2023, 25, console)
    truck.drive()
    assert truck.speed == 15


def test_negative_acceleration_rejected(console):
    car = Car("Toyota", "Camry", 2023, 4, FuelType.GASOLINE, console)
    car.start()
    with pytest.raises(InvalidAmountError):
        car.accelerate(-5)


def test_truck_cargo_limits(console):
    truck = Truck("Ford", "F-150", 2023, 1.5, console)
    assert truck.load_cargo(2) is False
    assert truck.current_cargo == 0
    assert truck.load_cargo(1.5) is True
    assert truck.unload_cargo(2) is False
    assert truck.unload_cargo(0.5) is True
    assert truck.current_cargo == 1.0
    with pytest.raises(InvalidAmountError):
        truck.load_cargo(-1)


def test_wheelie_needs_speed(console):
    bike = Motorcycle("Honda", "CBR600", 2023, 600, True, console)
    assert bike.wheelie() is False
    bike.drive()
    assert bike.wheelie() is True


@pytest.fixture
def fleet(console):
    f = VehicleFleet(console)
    f.add_vehicle(Car("Toyota", "Camry", 2023, 4, FuelType.HYBRID, console))
    f.add_vehicle(Motorcycle("Honda", "CBR600", 2023, 600, True, console))
    f.add_vehicle(Truck("Volvo", "FH16", 2023, 25, console))
    return f


def test_start_and_stop_all(fleet):
    fleet.start_all()
    assert fleet.running_count() == 3
    fleet.stop_all()
    assert fleet.running_count() == 0


def test_polymorphism_uses_each_override(fleet, console):
    fleet.demonstrate_polymorphism()
    out = console.file.getvalue()
    assert "Beep beep!" in out
    assert "Doing a wheelie!" in out
    assert fleet.total_cargo() == 2
    speeds = [v.speed for v in fleet.vehicles]
    assert speeds == [30, 30, 15]


def test_find_and_remove(fleet):
    assert [v.model for v in fleet.find_by_brand("honda")] == ["CBR600"]
    assert fleet.remove_vehicle("2023 Volvo FH16") is True
    assert fleet.remove_vehicle("2023 Volvo FH16") is False
    assert len(fleet.vehicles) == 2


def test_demo_runs(console):
    demo.run(console)
    out = console.file.getvalue()
    assert "Cannot load 2 tons - exceeds capacity" in out
    assert "Running: 6" in out
