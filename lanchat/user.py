"""Chat user account."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A registered chat participant."""

    login: str = ""
    password: str = ""
    name: str = ""

    def matches(self, login: str) -> bool:
        """Return True when this user has the given login."""
        return self.login == login