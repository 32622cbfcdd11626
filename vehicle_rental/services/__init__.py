from .rental_service import RentalService
from .rental_system import RentalSystem
from .user_service import UserService
from .vehicle_service import VehicleService

__all__ = [
    "RentalService",
    "RentalSystem",
    "VehicleService",
    "UserService",
]
