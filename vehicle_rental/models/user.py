from dataclasses import dataclass
from typing import Optional

from ..utils.constants import Role


@dataclass
class User:
    """
    Account record. The secret is kept and compared as plain text, matching
    the users file format.
    """
    username: str
    secret: str
    role: str = Role.CUSTOMER  # "admin" | "customer"
    has_active_rental: bool = False

    def authenticate(self, secret: str) -> bool:
        return self.secret == secret

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass
class Session:
    """The logged-in user of one console session, if any."""
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def username(self) -> Optional[str]:
        return self.user.username if self.user else None

    def clear(self) -> None:
        self.user = None
