import pytest

from vehicle_rental.exceptions import InvalidRentalPeriodError, InvalidVehicleError
from vehicle_rental.models.vehicle import Vehicle, calculate_rental_cost, extra_charge, quote


def test_car_with_ac_includes_surcharge():
    car = Vehicle.car("Civic", "Honda", 50.0, has_ac=True)
    assert calculate_rental_cost(car, 3) == 165
    assert extra_charge(car, 3) == 15


def test_car_without_ac():
    car = Vehicle.car("Corolla", "Toyota", 45.0, has_ac=False)
    assert calculate_rental_cost(car, 2) == 90
    assert extra_charge(car, 2) == 0


def test_motorcycle_helmet_reported_separately():
    bike = Vehicle.motorcycle("Ninja", "Kawasaki", 35.0, has_helmet=True)
    assert calculate_rental_cost(bike, 3) == 105
    assert extra_charge(bike, 3) == 6


def test_quote_counts_each_extra_once():
    car = Vehicle.car("Civic", "Honda", 50.0, has_ac=True)
    assert quote(car, 3) == (150, 15, 165)

    bike = Vehicle.motorcycle("Ninja", "Kawasaki", 35.0, has_helmet=True)
    assert quote(bike, 3) == (105, 6, 111)


def test_fractional_rate_rounded():
    car = Vehicle.car("Yaris", "Toyota", 19.99)
    assert calculate_rental_cost(car, 3) == 59.97


@pytest.mark.parametrize("days", [0, -1])
def test_non_positive_days_rejected(days):
    car = Vehicle.car("Civic", "Honda", 50.0, has_ac=True)
    with pytest.raises(InvalidRentalPeriodError):
        calculate_rental_cost(car, days)
    with pytest.raises(InvalidRentalPeriodError):
        quote(car, days)


@pytest.mark.parametrize("kind, rate", [("truck", 95.0), ("car", -5.0)])
def test_vehicle_rejects_unknown_kind_or_negative_rate(kind, rate):
    with pytest.raises(InvalidVehicleError):
        Vehicle(brand="Isuzu", model="N-Series", kind=kind, rate=rate)


def test_free_vehicle_allowed():
    bike = Vehicle.motorcycle("Loaner", "Honda", 0)
    assert calculate_rental_cost(bike, 2) == 0
