"""
In-memory user registry and login session.

One registry and one session live for the lifetime of the menu shell and
are passed to commands explicitly. Passwords never leave memory and are
kept as salted SHA-256 digests.
"""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets

from loguru import logger

from mizan.core.exceptions import AuthenticationError, ValidationError

# At least 8 characters, one uppercase letter, one digit
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*\d).{8,}$")


def is_valid_password(password: str) -> bool:
    return PASSWORD_PATTERN.match(password) is not None


def _digest(password: str, salt: bytes) -> bytes:
    return hashlib.sha256(salt + password.encode("utf-8")).digest()


class UserRegistry:
    """Username -> credential store."""

    def __init__(self) -> None:
        self._users: dict[str, tuple[bytes, bytes]] = {}

    def user_exists(self, username: str) -> bool:
        return username in self._users

    def add_user(self, username: str, password: str) -> None:
        """Register a new user.

        Raises:
            ValidationError: Empty or taken username, or a password that
                does not meet ``PASSWORD_PATTERN``.
        """
        if not username:
            raise ValidationError("Username cannot be empty!")
        if self.user_exists(username):
            raise ValidationError("Username already exists!")
        if not is_valid_password(password):
            raise ValidationError("Invalid password format!")

        salt = secrets.token_bytes(16)
        self._users[username] = (salt, _digest(password, salt))
        logger.info(f"Registered user {username!r}")

    def authenticate(self, username: str, password: str) -> bool:
        """Check credentials. Unknown users simply fail."""
        record = self._users.get(username)
        if record is None:
            return False
        salt, expected = record
        return hmac.compare_digest(expected, _digest(password, salt))

    def __len__(self) -> int:
        return len(self._users)


class Session:
    """Login state for the single interactive user."""

    def __init__(self) -> None:
        self.username: str | None = None

    @property
    def logged_in(self) -> bool:
        return self.username is not None

    def login(self, registry: UserRegistry, username: str, password: str) -> bool:
        """Authenticate against the registry and start a session on success."""
        if not registry.authenticate(username, password):
            logger.info(f"Failed login for {username!r}")
            return False

        self.username = username
        logger.info(f"User {username!r} logged in")
        return True

    def require_login(self) -> str:
        """Return the logged-in username.

        Raises:
            AuthenticationError: No one is logged in.
        """
        if self.username is None:
            raise AuthenticationError("Please login first!")
        return self.username
