"""Username and password credentials."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Credentials:
    """A username / password pair."""

    username: str = ""
    password: str = ""

    def clear(self) -> None:
        """Reset both the username and the password to empty."""
        self.username = ""
        self.password = ""

    def has_credentials(self) -> bool:
        """Return True if either the username or the password is set."""
        return bool(self.username) or bool(self.password)

    def __str__(self) -> str:
        return f"{self.username}:{self.password}"