"""Console display helpers: money and local time formatting."""
from datetime import datetime, timezone

import pytz

from .constants import DEFAULT_TIMEZONE


def fmt_money(value) -> str:
    """Render an amount as dollars with two decimals, e.g. $165.00."""
    return f"${float(value or 0):.2f}"


def fmt_iso_local(value: str, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """
    Format an ISO date/datetime string in the given time zone.
    Supports:
      - 'YYYY-MM-DD'
      - 'YYYY-MM-DDTHH:MM:SS' or with a space instead of 'T'
      - Above with 'Z' or offsets like '+00:00'
    On parse error, returns the original value (so the receipt never goes blank).
    """
    if value is None:
        return ""

    s = str(value).strip()
    if not s:
        return ""

    s_norm = s.replace("T", " ")
    if s_norm.endswith("Z"):
        s_norm = s_norm[:-1] + "+00:00"

    if ":" not in s_norm:
        # Date-only: nothing to convert
        try:
            return datetime.strptime(s_norm, "%Y-%m-%d").strftime("%d/%m/%Y")
        except ValueError:
            return s

    try:
        dt = datetime.fromisoformat(s_norm)
    except ValueError:
        return s

    # If naive datetime, assume UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        zone = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        zone = pytz.utc
    local = dt.astimezone(zone)

    return local.strftime("%d/%m/%Y %H:%M")
