# vehicle_rental/utils/constants.py

"""
Global constants for roles, vehicle kinds and rental limits.
These constants are imported by models, services and the console.
"""


class Role:
    ADMIN = "admin"
    CUSTOMER = "customer"


class VehicleKind:
    CAR = "car"
    MOTORCYCLE = "motorcycle"


ALLOWED_KINDS = {VehicleKind.CAR, VehicleKind.MOTORCYCLE}

# Rental length accepted by the console
MIN_RENTAL_DAYS = 1
MAX_RENTAL_DAYS = 30

# --- Bootstrap defaults ---
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_USERS_FILE = "users.txt"
DEFAULT_TIMEZONE = "Pacific/Auckland"
