from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..models.vehicle import Vehicle
from .common import norm_kind, to_float_safe, vehicle_from_dict
from ..utils.constants import ALLOWED_KINDS

logger = logging.getLogger(__name__)


class VehicleService:
    """
    Vehicle inventory: ordered list of vehicles, add and remove.

    Index-based operations address the *available* subset as returned by
    list_available() at the time of the call.
    """

    def __init__(self, vehicles: Optional[Iterable[Vehicle]] = None):
        self.vehicles: list[Vehicle] = list(vehicles or [])

    # --------------- Queries ---------------
    def list_available(self) -> list[Vehicle]:
        return [v for v in self.vehicles if v.is_available]

    def all_vehicles(self) -> list[Vehicle]:
        return list(self.vehicles)

    def available_at(self, index: int) -> Optional[Vehicle]:
        """Vehicle at `index` of the available subset, or None if out of range."""
        available = self.list_available()
        if 0 <= index < len(available):
            return available[index]
        return None

    def rented_by(self, username: Optional[str]) -> Optional[Vehicle]:
        if username is None:
            return None
        for v in self.vehicles:
            if v.renter == username:
                return v
        return None

    # --------------- Admin ---------------
    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.vehicles.append(vehicle)
        logger.info("Vehicle added: %s", vehicle.label)

    def admin_create_vehicle(self, payload: dict):
        """
        Validate a vehicle payload from the admin console and append it.

        Returns:
            (ok: bool, message: str, vehicle: Optional[Vehicle])
        """
        brand = (payload.get("brand") or "").strip()
        model = (payload.get("model") or "").strip()
        if not brand or not model:
            return False, "Brand and model are required", None
        if norm_kind(payload.get("kind")) not in ALLOWED_KINDS:
            return False, "Invalid vehicle type", None
        rate = to_float_safe(payload.get("rate"))
        if rate is None or rate < 0:
            return False, "Daily rate must be a non-negative number", None

        vehicle = vehicle_from_dict(payload)
        self.add_vehicle(vehicle)
        return True, "Vehicle added successfully!", vehicle

    def remove_vehicle(self, index: int) -> bool:
        """
        Remove the vehicle at `index` of the available subset.
        Rented vehicles are never in that subset, so they cannot be removed.
        """
        vehicle = self.available_at(index)
        if vehicle is None:
            return False
        # Vehicle compares by identity, so an identical-looking entry is left alone
        self.vehicles.remove(vehicle)
        logger.info("Vehicle removed: %s", vehicle.label)
        return True
