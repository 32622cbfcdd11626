"""Shared service helpers and factories."""

from typing import Optional

from ..models.vehicle import Vehicle
from ..utils.constants import ALLOWED_KINDS


def norm_kind(value: Optional[str]) -> str:
    """Normalize vehicle kind to lowercase; return '' if None."""
    return (value or "").strip().lower()


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def vehicle_from_dict(d: Optional[dict]) -> Optional[Vehicle]:
    """
    Map a brand/model/kind/rate/extra dict to a Vehicle.
    Returns None for an unknown kind or a missing/negative rate.
    """
    if not d:
        return None
    kind = norm_kind(d.get("kind"))
    rate = to_float_safe(d.get("rate"))
    if kind not in ALLOWED_KINDS or rate is None or rate < 0:
        return None
    return Vehicle(
        brand=(d.get("brand") or "").strip(),
        model=(d.get("model") or "").strip(),
        kind=kind,
        rate=rate,
        has_extra=bool(d.get("has_extra")),
    )
