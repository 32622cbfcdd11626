"""
Bootstrap data: the starting fleet and the default admin account.
"""

from .models.vehicle import Vehicle
from .services.common import vehicle_from_dict
from .services.user_service import UserService
from .utils.constants import VehicleKind

DEFAULT_FLEET = (
    {"brand": "Honda", "model": "Civic", "kind": VehicleKind.CAR, "rate": 50.0, "has_extra": True},
    {"brand": "Toyota", "model": "Corolla", "kind": VehicleKind.CAR, "rate": 45.0, "has_extra": True},
    {"brand": "Kawasaki", "model": "Ninja", "kind": VehicleKind.MOTORCYCLE, "rate": 35.0, "has_extra": True},
)


def seed_vehicles() -> list[Vehicle]:
    """Fresh copies of the starting fleet, in display order."""
    return [vehicle_from_dict(d) for d in DEFAULT_FLEET]


def ensure_admin(users: UserService, username: str, secret: str):
    """
    Make sure the admin account exists.
    - If the users file supplied it: keep the stored secret.
    - If not: create it with the default secret (not written to the file).
    """
    return users.ensure_user(username, secret)
