from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..exceptions import CredentialFileError
from ..models.store import UserFile
from ..models.user import Session, User
from ..utils.constants import DEFAULT_ADMIN_USERNAME, Role

logger = logging.getLogger(__name__)


class UserService:
    """
    Account store: registration, login/logout and the admin check.

    Roles are assigned from `admin_usernames` whenever an account is created,
    whether it comes from the users file, bootstrap or registration.
    """

    def __init__(self, user_file: Optional[UserFile] = None,
                 admin_usernames: Iterable[str] = (DEFAULT_ADMIN_USERNAME,)):
        self.user_file = user_file
        self.admin_usernames = frozenset(admin_usernames)
        self.users: dict[str, User] = {}

    def _new_user(self, username: str, secret: str) -> User:
        role = Role.ADMIN if username in self.admin_usernames else Role.CUSTOMER
        return User(username=username, secret=secret, role=role)

    # ---------- Persistence ----------
    def load(self) -> bool:
        """
        Seed accounts from the users file. An unreadable file is logged and
        leaves the store as it was; returns False in that case.
        """
        if self.user_file is None:
            return True
        try:
            pairs = self.user_file.load()
        except CredentialFileError as e:
            logger.warning("Could not load users file: %s", e)
            return False
        for username, secret in pairs:
            self.users[username] = self._new_user(username, secret)
        return True

    def save(self) -> bool:
        """Rewrite the users file with every known account."""
        if self.user_file is None:
            return True
        try:
            self.user_file.save((u.username, u.secret) for u in self.users.values())
        except CredentialFileError as e:
            logger.error("Could not save users to file: %s", e)
            return False
        return True

    def ensure_user(self, username: str, secret: str) -> User:
        """Create `username` in memory unless it already exists."""
        user = self.users.get(username)
        if user is None:
            user = self.users[username] = self._new_user(username, secret)
        return user

    # ---------- Accounts ----------
    def user_exists(self, username: str) -> bool:
        return username in self.users

    def register(self, username: str, secret: str) -> bool:
        """Create a customer account; existing usernames are left untouched."""
        if self.user_exists(username):
            return False
        self.users[username] = self._new_user(username, secret)
        self.save()
        logger.info("Registered user %s", username)
        return True

    # ---------- Sessions ----------
    def login(self, username: str, secret: str) -> Optional[Session]:
        """Return a session for valid credentials; None for any failure."""
        user = self.users.get(username)
        if user is None or not user.authenticate(secret):
            return None
        return Session(user=user)

    @staticmethod
    def logout(session: Optional[Session]) -> Session:
        if session is not None:
            session.clear()
        return Session()

    @staticmethod
    def is_admin(session: Optional[Session]) -> bool:
        return session is not None and session.user is not None and session.user.is_admin
