from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..exceptions import InvalidRentalPeriodError, InvalidVehicleError
from ..utils.constants import ALLOWED_KINDS, VehicleKind


class Extra(NamedTuple):
    """Optional per-day add-on offered by a vehicle kind."""
    label: str
    per_day: float
    in_rental_cost: bool  # folded into calculate_rental_cost()


EXTRAS = {
    VehicleKind.CAR: Extra("AC", 5.0, True),
    VehicleKind.MOTORCYCLE: Extra("Helmet", 2.0, False),
}


@dataclass(eq=False)
class Vehicle:
    """
    Inventory entry. `kind` selects the pricing rule and the meaning of
    `has_extra` (air conditioning for cars, helmet rental for motorcycles).
    `renter` holds the username of the current renter, never the user object.
    """
    brand: str
    model: str
    kind: str  # "car" | "motorcycle"
    rate: float  # per day
    has_extra: bool = False
    renter: Optional[str] = None

    def __post_init__(self):
        if self.kind not in ALLOWED_KINDS:
            raise InvalidVehicleError(f"Error: unknown vehicle kind {self.kind!r}")
        self.rate = float(self.rate)
        if self.rate < 0:
            raise InvalidVehicleError(f"Error: daily rate cannot be negative, got {self.rate}")

    @classmethod
    def car(cls, model: str, brand: str, rate: float, has_ac: bool = False) -> "Vehicle":
        return cls(brand=brand, model=model, kind=VehicleKind.CAR, rate=rate, has_extra=has_ac)

    @classmethod
    def motorcycle(cls, model: str, brand: str, rate: float, has_helmet: bool = False) -> "Vehicle":
        return cls(brand=brand, model=model, kind=VehicleKind.MOTORCYCLE, rate=rate, has_extra=has_helmet)

    @property
    def is_available(self) -> bool:
        return self.renter is None

    @property
    def extra(self) -> Extra:
        return EXTRAS[self.kind]

    @property
    def label(self) -> str:
        return f"{self.brand} {self.model}"

    def __str__(self) -> str:
        return f"{self.label} (Rate: ${self.rate:.2f}/day)"


class Quote(NamedTuple):
    base: float
    extra: float
    total: float


def _check_days(days: int) -> None:
    if days < 1:
        raise InvalidRentalPeriodError(f"Error: rental period must be at least one day, got {days}")


def extra_charge(vehicle: Vehicle, days: int) -> float:
    """Charge for the vehicle's extra over `days`; 0 when not equipped."""
    _check_days(days)
    if not vehicle.has_extra:
        return 0.0
    return round(vehicle.extra.per_day * days, 2)


def calculate_rental_cost(vehicle: Vehicle, days: int) -> float:
    """
    Rental cost for `days`. A car's AC charge is part of this figure;
    a motorcycle's helmet charge is not and must be added from extra_charge().
    """
    _check_days(days)
    cost = vehicle.rate * days
    if vehicle.extra.in_rental_cost:
        cost += extra_charge(vehicle, days)
    return round(cost, 2)


def quote(vehicle: Vehicle, days: int) -> Quote:
    """Itemised price: base rate, extra and total, each extra counted once."""
    _check_days(days)
    base = round(vehicle.rate * days, 2)
    extra = extra_charge(vehicle, days)
    return Quote(base=base, extra=extra, total=round(base + extra, 2))
