"""Builder: assemble cars and their manuals step by step, guided by a director."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_FUEL = 5.0
DEFAULT_ROUTE = "221b, Baker Street, London  to Scotland Yard, 8-10 Broadway, London"
_MAX_SEATS = 0xFFFF


class CarType(Enum):
    CITY_CAR = "CityCar"
    SPORTS_CAR = "SportsCar"
    SUV = "Suv"

    def __str__(self) -> str:
        return self.value


class Transmission(Enum):
    SINGLE_SPEED = "SingleSpeed"
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    SEMI_AUTOMATIC = "SemiAutomatic"

    def __str__(self) -> str:
        return self.value


class EngineNotStartedError(RuntimeError):
    """Raised when a stopped engine is asked to cover distance."""


class BuildError(ValueError):
    """Raised when a builder is missing a required part."""


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


@dataclass
class Engine:
    volume: float
    mileage: float
    started: bool = False

    def on(self) -> None:
        self.started = True

    def off(self) -> None:
        self.started = False

    def go(self, mileage: float) -> None:
        """Add distance to the mileage; the engine must be running."""
        if not self.started:
            raise EngineNotStartedError("Cannot go(), you must start engine first!")
        self.mileage += mileage


@dataclass
class GpsNavigator:
    route: str = DEFAULT_ROUTE


@dataclass
class Car:
    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    gps_navigator: GpsNavigator | None = None
    fuel: float = DEFAULT_FUEL


@dataclass
class Manual:
    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    gps_navigator: GpsNavigator | None = None

    def __str__(self) -> str:
        gps = "Functional" if self.gps_navigator is not None else "N/A"
        return (
            f"Type of car: {self.car_type}\n"
            f"Count of seats: {self.seats}\n"
            f"Engine: volume - {_format_number(self.engine.volume)}; "
            f"mileage - {_format_number(self.engine.mileage)}\n"
            f"Transmission: {self.transmission}\n"
            f"GPS Navigator: {gps}\n"
        )


@dataclass
class _Parts:
    car_type: CarType
    seats: int
    engine: Engine
    transmission: Transmission
    gps_navigator: GpsNavigator | None


class Builder(ABC):
    """Collects the parts of a car; subclasses decide what is built from them."""

    def __init__(self) -> None:
        self._car_type: CarType | None = None
        self._seats: int | None = None
        self._engine: Engine | None = None
        self._transmission: Transmission | None = None
        self._gps_navigator: GpsNavigator | None = None

    def set_car_type(self, car_type: CarType) -> None:
        self._car_type = car_type

    def set_seats(self, seats: int) -> None:
        if not 0 <= seats <= _MAX_SEATS:
            raise ValueError(f"seats must be between 0 and {_MAX_SEATS}, got {seats}")
        self._seats = seats

    def set_engine(self, engine: Engine) -> None:
        self._engine = engine

    def set_transmission(self, transmission: Transmission) -> None:
        self._transmission = transmission

    def set_gps_navigator(self, gps_navigator: GpsNavigator) -> None:
        self._gps_navigator = gps_navigator

    def _parts(self) -> _Parts:
        if self._car_type is None:
            raise BuildError("Please, set a car type")
        if self._seats is None:
            raise BuildError("Please, set a number of seats")
        if self._engine is None:
            raise BuildError("Please, set an engine configuration")
        if self._transmission is None:
            raise BuildError("Please, set up transmission")
        return _Parts(
            self._car_type,
            self._seats,
            self._engine,
            self._transmission,
            self._gps_navigator,
        )

    @abstractmethod
    def build(self):
        """Return the product assembled from the collected parts."""


class CarBuilder(Builder):
    def build(self) -> Car:
        parts = self._parts()
        return Car(
            parts.car_type,
            parts.seats,
            parts.engine,
            parts.transmission,
            parts.gps_navigator,
            DEFAULT_FUEL,
        )


class CarManualBuilder(Builder):
    def build(self) -> Manual:
        parts = self._parts()
        return Manual(
            parts.car_type,
            parts.seats,
            parts.engine,
            parts.transmission,
            parts.gps_navigator,
        )


def construct_sports_car(builder: Builder) -> None:
    builder.set_car_type(CarType.SPORTS_CAR)
    builder.set_seats(2)
    builder.set_engine(Engine(3.0, 0.0))
    builder.set_transmission(Transmission.SEMI_AUTOMATIC)
    builder.set_gps_navigator(GpsNavigator())


def construct_city_car(builder: Builder) -> None:
    builder.set_car_type(CarType.CITY_CAR)
    builder.set_seats(2)
    builder.set_engine(Engine(1.2, 0.0))
    builder.set_transmission(Transmission.AUTOMATIC)
    builder.set_gps_navigator(GpsNavigator())


def construct_suv(builder: Builder) -> None:
    builder.set_car_type(CarType.SUV)
    builder.set_seats(4)
    builder.set_engine(Engine(2.5, 0.0))
    builder.set_transmission(Transmission.MANUAL)
    builder.set_gps_navigator(GpsNavigator())


def main(argv: list[str] | None = None) -> int:
    """Build a sports car and a city-car manual and print them."""
    argparse.ArgumentParser(description="Build a car and a car manual.").parse_args(argv)

    car_builder = CarBuilder()
    construct_sports_car(car_builder)
    car = car_builder.build()
    print(f"Car built: {car.car_type}\n")

    manual_builder = CarManualBuilder()
    construct_city_car(manual_builder)
    manual = manual_builder.build()
    print(f"Car manual built:\n{manual}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())