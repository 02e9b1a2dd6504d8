"""Vehicles and the fleet that runs them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from rich.console import Console

from oopdemos.environment import default_console
from oopdemos.errors import InvalidAmountError

logger = logging.getLogger(__name__)

DRIVE_SPEED = 30
WHEELIE_MIN_SPEED = 20


class Vehicle(ABC):
    """Base vehicle. Subclasses decide how starting, stopping and speeding up work."""

    def __init__(self, brand: str, model: str, year: int, console: Optional[Console] = None) -> None:
        self.brand = brand
        self.model = model
        self.year = year
        self.speed: float = 0
        self.is_running = False
        self._console = console or default_console()

    @abstractmethod
    def start(self) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        ...

    @abstractmethod
    def accelerate(self, speed: float) -> None:
        ...

    def info(self) -> str:
        return f"{self.year} {self.brand} {self.model}"

    @property
    def status(self) -> str:
        return "Running" if self.is_running else "Stopped"

    def drive(self) -> None:
        """Template method: the steps are fixed, each vehicle fills them in."""
        self._console.print(f"🚗 {self.info()} is ready to drive")
        self.start()
        self.accelerate(DRIVE_SPEED)
        self._console.print(f"Current speed: {self.speed} km/h")

    # Shared step implementations; subclasses supply the icon and wording.
    def _start(self, icon: str, noun: str, message: str) -> None:
        if self.is_running:
            self._console.print(f"{icon} {noun} is already running")
            return
        self.is_running = True
        logger.debug("%s started", self.info())
        self._console.print(f"{icon} {message}")

    def _stop(self, icon: str, noun: str) -> None:
        if not self.is_running:
            self._console.print(f"{icon} {noun} is already stopped")
            return
        self.is_running = False
        self.speed = 0
        logger.debug("%s stopped", self.info())
        self._console.print(f"{icon} {self.info()} stopped")

    def _accelerate(self, icon: str, noun: str, delta: float, suffix: str = "") -> None:
        if delta < 0:
            raise InvalidAmountError("Use stop() to slow down")
        if not self.is_running:
            self._console.print(f"{icon} Cannot accelerate - {noun.lower()} is not running")
            return
        self.speed += delta
        self._console.print(f"{icon} Accelerating to {self.speed} km/h{suffix}")


class FuelType(str, Enum):
    GASOLINE = "gasoline"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


class Car(Vehicle):
    def __init__(
        self,
        brand: str,
        model: str,
        year: int,
        doors: int,
        fuel_type: FuelType,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(brand, model, year, console)
        self.doors = doors
        self.fuel_type = FuelType(fuel_type)

    def start(self) -> None:
        self._start("🚗", "Car", f"{self.info()} started with {self.fuel_type.value} engine")

    def stop(self) -> None:
        self._stop("🚗", "Car")

    def accelerate(self, speed: float) -> None:
        self._accelerate("🚗", "Car", speed)

    def honk(self) -> None:
        self._console.print("🚗 Beep beep!")


class Motorcycle(Vehicle):
    def __init__(
        self,
        brand: str,
        model: str,
        year: int,
        engine_size: int,
        has_windshield: bool,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(brand, model, year, console)
        self.engine_size = engine_size  # cc
        self.has_windshield = has_windshield

    def start(self) -> None:
        self._start("🏍️", "Motorcycle", f"{self.info()} started with {self.engine_size}cc engine")

    def stop(self) -> None:
        self._stop("🏍️", "Motorcycle")

    def accelerate(self, speed: float) -> None:
        self._accelerate("🏍️", "Motorcycle", speed)

    def wheelie(self) -> bool:
        if self.speed < WHEELIE_MIN_SPEED:
            self._console.print("🏍️ Need more speed for a wheelie!")
            return False
        self._console.print("🏍️ Doing a wheelie! 🎪")
        return True


class Truck(Vehicle):
    """Heavy vehicle: gains speed at half the requested rate and carries cargo."""

    def __init__(
        self,
        brand: str,
        model: str,
        year: int,
        cargo_capacity: float,
        console: Optional[Console] = None,
    ) -> None:
        super().__init__(brand, model, year, console)
        self.cargo_capacity = cargo_capacity  # tons
        self.current_cargo: float = 0

    def start(self) -> None:
        self._start("🚛", "Truck", f"{self.info()} started - Heavy vehicle ready")

    def stop(self) -> None:
        self._stop("🚛", "Truck")

    def accelerate(self, speed: float) -> None:
        self._accelerate("🚛", "Truck", speed * 0.5, " (heavy vehicle)")

    def load_cargo(self, weight: float) -> bool:
        if weight < 0:
            raise InvalidAmountError("Cargo weight cannot be negative")
        if self.current_cargo + weight > self.cargo_capacity:
            self._console.print(f"🚛 Cannot load {weight} tons - exceeds capacity")
            return False
        self.current_cargo += weight
        self._console.print(
            f"🚛 Loaded {weight} tons. Current cargo: {self.current_cargo}/{self.cargo_capacity} tons"
        )
        return True

    def unload_cargo(self, weight: float) -> bool:
        if weight < 0:
            raise InvalidAmountError("Cargo weight cannot be negative")
        if self.current_cargo - weight < 0:
            self._console.print("🚛 Cannot unload more cargo than currently loaded")
            return False
        self.current_cargo -= weight
        self._console.print(
            f"🚛 Unloaded {weight} tons. Current cargo: {self.current_cargo}/{self.cargo_capacity} tons"
        )
        return True


class VehicleFleet:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._vehicles: list[Vehicle] = []
        self._console = console or default_console()

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self._vehicles.append(vehicle)
        self._console.print(f"✅ Added {vehicle.info()} to fleet")

    def remove_vehicle(self, info: str) -> bool:
        """Remove the first vehicle whose info() matches, e.g. "2023 Ford F-150"."""
        for vehicle in self._vehicles:
            if vehicle.info() == info:
                self._vehicles.remove(vehicle)
                self._console.print(f"✅ Removed {info} from fleet")
                return True
        self._console.print(f"❌ Vehicle '{info}' not found")
        return False

    def find_by_brand(self, brand: str) -> list[Vehicle]:
        b = brand.lower()
        return [v for v in self._vehicles if v.brand.lower() == b]

    def start_all(self) -> None:
        self._console.print("\n🚀 Starting all vehicles...")
        for vehicle in self._vehicles:
            vehicle.start()

    def stop_all(self) -> None:
        self._console.print("\n🛑 Stopping all vehicles...")
        for vehicle in self._vehicles:
            vehicle.stop()

    def fleet_info(self) -> None:
        self._console.print("\n📊 FLEET INFORMATION:")
        for i, vehicle in enumerate(self._vehicles, 1):
            self._console.print(f"{i}. {vehicle.info()} - Status: {vehicle.status}")

    def running_count(self) -> int:
        return sum(1 for v in self._vehicles if v.is_running)

    def total_cargo(self) -> float:
        return sum(v.current_cargo for v in self._vehicles if isinstance(v, Truck))

    def demonstrate_polymorphism(self) -> None:
        self._console.print("\n🎭 POLYMORPHISM DEMONSTRATION:")
        for vehicle in self._vehicles:
            self._console.print(f"\n--- {vehicle.info()} ---")
            vehicle.drive()

            if isinstance(vehicle, Car):
                vehicle.honk()
                self._console.print(f"Doors: {vehicle.doors}, Fuel: {vehicle.fuel_type.value}")
            elif isinstance(vehicle, Motorcycle):
                vehicle.wheelie()
                self._console.print(f"Engine: {vehicle.engine_size}cc")
            elif isinstance(vehicle, Truck):
                vehicle.load_cargo(2)
                self._console.print(
                    f"Cargo: {vehicle.current_cargo}/{vehicle.cargo_capacity} tons"
                )
