import logging
import os
from pathlib import Path
from typing import Iterable

from ..exceptions import CredentialFileError

logger = logging.getLogger(__name__)

SEPARATOR = ":"


class UserFile:
    """
    Flat-file persistence for credentials: one `username:secret` per line.
    Read once at startup and rewritten in full on every save.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = str(path)

    # ---------- Persistence ----------
    def load(self) -> list[tuple[str, str]]:
        """
        Return the (username, secret) pairs stored in the file.
        A missing file yields an empty list; malformed lines are skipped.
        Raises CredentialFileError when the file exists but cannot be read.
        """
        if not os.path.exists(self.path):
            logger.info("No users file at %s; starting with defaults.", self.path)
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialFileError(f"Error: could not read users file {self.path}: {e}") from e

        pairs = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            parts = line.split(SEPARATOR)
            if len(parts) != 2 or not parts[0] or not parts[1]:
                logger.warning("Skipping malformed line %d in %s", lineno, self.path)
                continue
            pairs.append((parts[0], parts[1]))
        logger.info("Loaded %d user(s) from %s", len(pairs), self.path)
        return pairs

    def save(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Rewrite the whole file (atomic replace). Raises CredentialFileError on failure."""
        tmp = self.path + ".tmp"
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                for username, secret in pairs:
                    f.write(f"{username}{SEPARATOR}{secret}\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            Path(tmp).unlink(missing_ok=True)
            raise CredentialFileError(f"Error: could not save users to {self.path}: {e}") from e
