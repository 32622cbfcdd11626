from __future__ import annotations

from typing import Optional

from ..models.rental import Receipt
from ..models.user import Session, User
from ..models.vehicle import Quote, Vehicle, calculate_rental_cost, extra_charge, quote
from .rental_service import RentalService
from .user_service import UserService
from .vehicle_service import VehicleService


class RentalSystem:
    """
    Thin facade the console talks to:
    - inventory queries and admin changes (VehicleService)
    - rent/return and receipts (RentalService)
    - accounts and sessions (UserService)
    Pricing is delegated to the pure functions in models.vehicle.
    """

    def __init__(self, vehicles: Optional[VehicleService] = None, users: Optional[UserService] = None):
        self.vehicle_service = vehicles or VehicleService()
        self.user_service = users or UserService()
        self.rental_service = RentalService(self.vehicle_service)

    # --------------- Inventory ---------------
    def list_available(self) -> list[Vehicle]:
        return self.vehicle_service.list_available()

    def all_vehicles(self) -> list[Vehicle]:
        return self.vehicle_service.all_vehicles()

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.vehicle_service.add_vehicle(vehicle)

    def admin_create_vehicle(self, payload: dict):
        return self.vehicle_service.admin_create_vehicle(payload)

    def remove_vehicle(self, index: int) -> bool:
        return self.vehicle_service.remove_vehicle(index)

    # --------------- Rentals ---------------
    def can_rent(self, user: Optional[User]) -> bool:
        return self.rental_service.can_rent(user)

    def rent(self, index: int, days: int, user: Optional[User]) -> bool:
        return self.rental_service.rent(index, days, user)

    def return_vehicle(self, user: Optional[User]) -> bool:
        return self.rental_service.return_vehicle(user)

    def rented_vehicle(self, user: Optional[User]) -> Optional[Vehicle]:
        return self.rental_service.rented_vehicle(user)

    def receipt(self, user: User, days: int) -> Receipt:
        return self.rental_service.receipt(user, days)

    # --------------- Pricing ---------------
    @staticmethod
    def calculate_rental_cost(vehicle: Vehicle, days: int) -> float:
        return calculate_rental_cost(vehicle, days)

    @staticmethod
    def extra_charge(vehicle: Vehicle, days: int) -> float:
        return extra_charge(vehicle, days)

    @staticmethod
    def quote(vehicle: Vehicle, days: int) -> Quote:
        return quote(vehicle, days)

    # --------------- Accounts ---------------
    def user_exists(self, username: str) -> bool:
        return self.user_service.user_exists(username)

    def register(self, username: str, secret: str) -> bool:
        return self.user_service.register(username, secret)

    def login(self, username: str, secret: str) -> Optional[Session]:
        return self.user_service.login(username, secret)

    def logout(self, session: Optional[Session]) -> Session:
        return self.user_service.logout(session)

    def is_admin(self, session: Optional[Session]) -> bool:
        return self.user_service.is_admin(session)
