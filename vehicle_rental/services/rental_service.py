"""Rental-related service layer utilities."""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..exceptions import VehicleNotFoundError
from ..models.rental import Receipt
from ..models.user import User
from ..models.vehicle import Vehicle, quote
from .vehicle_service import VehicleService

logger = logging.getLogger(__name__)


class RentalService:
    """
    Rent and return against the vehicle inventory.
    A user holds at most one rented vehicle at a time.
    """

    def __init__(self, vehicles: VehicleService):
        self.vehicles = vehicles

    @staticmethod
    def can_rent(user: Optional[User]) -> bool:
        return user is not None and not user.has_active_rental

    def rent(self, index: int, days: int, user: Optional[User]) -> bool:
        """
        Rent the vehicle at `index` of the available subset to `user`.
        Fails without touching state if the index is out of range, `days`
        is below one, or the user already holds a rental.
        """
        if not self.can_rent(user) or days < 1:
            return False
        vehicle = self.vehicles.available_at(index)
        if vehicle is None:
            return False

        vehicle.renter = user.username
        user.has_active_rental = True
        logger.info("%s rented %s for %d day(s)", user.username, vehicle.label, days)
        return True

    def rented_vehicle(self, user: Optional[User]) -> Optional[Vehicle]:
        if user is None:
            return None
        return self.vehicles.rented_by(user.username)

    def return_vehicle(self, user: Optional[User]) -> bool:
        """Free the vehicle rented by `user`; no-op when they hold none."""
        vehicle = self.rented_vehicle(user)
        if vehicle is None:
            return False

        vehicle.renter = None
        user.has_active_rental = False
        logger.info("%s returned %s", user.username, vehicle.label)
        return True

    def receipt(self, user: User, days: int, issued_at: Optional[datetime] = None) -> Receipt:
        """Build the itemised receipt for the vehicle `user` currently holds."""
        vehicle = self.rented_vehicle(user)
        if vehicle is None:
            raise VehicleNotFoundError(f"Error: {user.username} has no rented vehicle")

        q = quote(vehicle, days)
        issued = issued_at or datetime.now(timezone.utc)
        return Receipt(
            vehicle=vehicle.label,
            days=days,
            rate=vehicle.rate,
            base=q.base,
            extra_label=vehicle.extra.label,
            extra=q.extra,
            total=q.total,
            issued_at=issued.isoformat(timespec="seconds"),
        )
