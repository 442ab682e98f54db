"""Private conversation between two users."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from lanchat.user import User

EMPTY_CHAT_NOTICE = "ERR: MESSAGE IS NOT INITIALIZE!"


@dataclass(frozen=True)
class Message:
    """A single chat line with the author's display name and login."""

    name: str
    login: str
    text: str

    def format(self) -> str:
        """Render the message as one chat line without a newline."""
        return f"{self.name}: {self.text}"


class LocalMessage:
    """The message history shared by exactly two users."""

    def __init__(self, user1: User, user2: User) -> None:
        self.user1 = user1
        self.user2 = user2
        self._messages: list[Message] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in the order they were sent."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def involves(self, login1: str, login2: str) -> bool:
        """Return True when the conversation is between these two logins."""
        pair = {self.user1.login, self.user2.login}
        return {login1, login2} == pair

    def send_message(self, login: str, message: str) -> Message:
        """Append a message; any login other than the first user's is the second user."""
        author = self.user1 if self.user1.login == login else self.user2
        entry = Message(author.name, author.login, message)
        self._messages.append(entry)
        return entry

    def all_messages(self) -> str:
        """Return the whole conversation, one ``name: text`` line per message."""
        return "".join(f"{m.format()}\n" for m in self._messages)

    def print_all(self, out: TextIO | None = None) -> None:
        """Write the conversation to ``out``, noting when it is empty."""
        stream = sys.stdout if out is None else out
        if not self._messages:
            print(EMPTY_CHAT_NOTICE, file=stream)
        for entry in self._messages:
            print(entry.format(), file=stream)