"""User accounts kept in a plain text login file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Union

from .validation import is_strong_password

OFFICER_USERNAME = "officer"
MAX_ATTEMPTS_SIGN_UP = 5
MAX_ATTEMPTS_SIGN_IN = 3


class AccountError(Exception):
    """Raised when an account cannot be created or the login file is unusable."""


def _has_whitespace(text: str) -> bool:
    return any(ch.isspace() for ch in text)


class UserStore:
    """Usernames and passwords stored one pair per line."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(path)

    def _entries(self) -> Iterator[tuple[str, str]]:
        tokens = self.path.read_text(encoding="utf-8").split()
        return zip(tokens[0::2], tokens[1::2])

    def exists(self, username: str) -> bool:
        """Return True if an account with this username is stored."""
        if not self.path.exists():
            return False
        return any(name == username for name, _ in self._entries())

    def register(self, username: str, password: str) -> None:
        """Store a new account, raising AccountError if it is not acceptable."""
        if not username or _has_whitespace(username):
            raise AccountError("Username must be non-empty and contain no spaces.")
        if self.exists(username):
            raise AccountError("Username already exists. Try another.")
        if _has_whitespace(password) or not is_strong_password(password):
            raise AccountError(
                "Invalid password: needs at least 8 characters with upper case, "
                "lower case, digit and special character."
            )
        with open(self.path, "a", encoding="utf-8") as fh:
            fh.write(f"{username} {password}\n")

    def authenticate(self, username: str, password: str) -> bool:
        """Return True if the username and password match a stored account."""
        if not self.path.exists():
            raise AccountError("Login file not found.")
        return any(
            name == username and stored == password
            for name, stored in self._entries()
        )