"""
Rent/return against the available subset, and the one-rental-per-user rule.
"""

import pytest


def _assert_invariants(system):
    for v in system.all_vehicles():
        assert v.is_available == (v.renter is None)
    for user in system.user_service.users.values():
        held = [v for v in system.all_vehicles() if v.renter == user.username]
        assert len(held) <= 1
        assert user.has_active_rental == (len(held) == 1)


def test_bootstrap_fleet_available_in_order(memory_system):
    labels = [v.label for v in memory_system.list_available()]
    assert labels == ["Honda Civic", "Toyota Corolla", "Kawasaki Ninja"]


def test_rent_hides_vehicle_and_return_restores_it(memory_system, alice):
    civic = memory_system.list_available()[0]

    assert memory_system.rent(0, 3, alice)
    assert civic not in memory_system.list_available()
    assert civic.renter == "alice"
    assert alice.has_active_rental
    _assert_invariants(memory_system)

    assert memory_system.return_vehicle(alice)
    assert memory_system.list_available()[0] is civic
    assert not alice.has_active_rental
    _assert_invariants(memory_system)


def test_second_rental_rejected(memory_system, alice):
    assert memory_system.rent(0, 2, alice)
    before = [v.renter for v in memory_system.all_vehicles()]

    assert not memory_system.rent(0, 2, alice)
    assert [v.renter for v in memory_system.all_vehicles()] == before
    _assert_invariants(memory_system)


@pytest.mark.parametrize("index", [-1, 3, 99])
def test_out_of_range_index_is_noop(memory_system, alice, index):
    assert not memory_system.rent(index, 2, alice)
    assert not alice.has_active_rental
    assert len(memory_system.list_available()) == 3


def test_zero_days_is_noop(memory_system, alice):
    assert not memory_system.rent(0, 0, alice)
    assert not alice.has_active_rental


def test_rent_without_user_fails(memory_system):
    assert not memory_system.rent(0, 1, None)


def test_index_is_into_current_available_subset(memory_system, alice):
    memory_system.register("bob", "pw")
    bob = memory_system.login("bob", "pw").user

    assert memory_system.rent(0, 1, alice)  # Civic
    assert memory_system.rent(0, 1, bob)    # now the Corolla
    assert memory_system.rented_vehicle(bob).label == "Toyota Corolla"
    _assert_invariants(memory_system)


def test_return_without_rental_is_noop(memory_system, alice):
    assert not memory_system.return_vehicle(alice)
    assert len(memory_system.list_available()) == 3


def test_receipt_itemises_extra(memory_system, alice):
    assert memory_system.rent(0, 3, alice)
    receipt = memory_system.receipt(alice, 3)
    assert receipt.vehicle == "Honda Civic"
    assert (receipt.base, receipt.extra, receipt.total) == (150, 15, 165)
    assert receipt.extra_label == "AC"


def test_receipt_requires_rental(memory_system, alice):
    from vehicle_rental.exceptions import VehicleNotFoundError
    with pytest.raises(VehicleNotFoundError):
        memory_system.receipt(alice, 3)
