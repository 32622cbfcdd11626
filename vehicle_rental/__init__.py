import os
from typing import Optional

from .models.store import UserFile
from .seeds import ensure_admin, seed_vehicles
from .services.rental_system import RentalSystem
from .services.user_service import UserService
from .services.vehicle_service import VehicleService
from .utils.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_ADMIN_USERNAME

__all__ = ["create_system", "RentalSystem"]


def create_system(users_file: Optional[str | os.PathLike] = None,
                  admin_username: str = DEFAULT_ADMIN_USERNAME,
                  admin_password: str = DEFAULT_ADMIN_PASSWORD) -> RentalSystem:
    """
    Build a RentalSystem with the starting fleet, accounts loaded from
    `users_file` (in-memory only when None) and the admin account ensured.
    """
    users = UserService(
        UserFile(users_file) if users_file is not None else None,
        admin_usernames=(admin_username,),
    )
    users.load()  # unreadable file: warning logged, defaults only
    ensure_admin(users, admin_username, admin_password)
    return RentalSystem(VehicleService(seed_vehicles()), users)
