"""Scripted vehicle fleet run."""

from __future__ import annotations

from rich.console import Console

from oopdemos.demos.vehicles.fleet import Car, FuelType, Motorcycle, Truck, VehicleFleet
from oopdemos.environment import default_console


def run(console: Console) -> None:
    console.print("[bold]=== VEHICLE HIERARCHY SYSTEM ===[/bold]\n")

    fleet = VehicleFleet(console)
    for vehicle in (
        Car("Toyota", "Camry", 2023, 4, FuelType.HYBRID, console),
        Car("Tesla", "Model 3", 2023, 4, FuelType.ELECTRIC, console),
        Motorcycle("Honda", "CBR600", 2023, 600, True, console),
        Motorcycle("Ducati", "Monster", 2023, 821, False, console),
        Truck("Ford", "F-150", 2023, 1.5, console),
        Truck("Volvo", "FH16", 2023, 25, console),
    ):
        fleet.add_vehicle(vehicle)

    fleet.fleet_info()
    fleet.demonstrate_polymorphism()

    fleet.start_all()
    fleet.fleet_info()
    console.print(f"\nRunning: {fleet.running_count()}, cargo on board: {fleet.total_cargo()} tons")

    fleet.stop_all()
    fleet.fleet_info()


if __name__ == "__main__":
    run(default_console())
