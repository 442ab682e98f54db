"""Public chat room visible to every user."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO

from lanchat.local_message import Message
from lanchat.user import User


class GlobalMessage:
    """The shared chat; authors are looked up by login in ``users``."""

    def __init__(self, users: Mapping[str, User]) -> None:
        self._users = users
        self._messages: list[Message] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in the order they were sent."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def send_message(self, login: str, message: str) -> Message:
        """Post a message as the user with ``login``; unknown logins raise KeyError."""
        try:
            author = self._users[login]
        except KeyError:
            raise KeyError(f"unknown user: {login}") from None
        entry = Message(author.name, author.login, message)
        self._messages.append(entry)
        return entry

    def create_string_chat(self) -> str:
        """Return the whole chat, one ``name: text`` line per message."""
        return "".join(f"{m.format()}\n" for m in self._messages)

    def print_all(self, out: TextIO | None = None) -> None:
        """Write the chat to ``out``."""
        stream = sys.stdout if out is None else out
        for entry in self._messages:
            print(entry.format(), file=stream)