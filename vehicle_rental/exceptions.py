"""
Custom exception classes for the vehicle rental console.

Rental and login operations fail softly; these exceptions cover the few
places where a caller must handle a precise failure instead.
"""


class CredentialFileError(Exception):
    """Raised when the users file cannot be read or written."""

    def __init__(self, message: str = "Error: could not access users file") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidRentalPeriodError(Exception):
    """Raised when a rental length is not a positive number of days."""

    def __init__(self, message: str = "Error: rental period must be at least one day") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleNotFoundError(Exception):
    """Raised when a user has no rented vehicle where one is required."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidVehicleError(Exception):
    """Raised when a vehicle has an unknown kind or a negative daily rate."""

    def __init__(self, message: str = "Error: invalid vehicle") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
