"""Request/response client for the chat server's line protocol."""

from __future__ import annotations

import socket

DEFAULT_HOST = "192.168.0.25"
DEFAULT_PORT = 8080
BUFFER_SIZE = 2048
SUCCESS = "0"
UNKNOWN_USER = "1"


class LoginError(Exception):
    """The server refused a login."""


class UnknownUserError(LoginError):
    """No user with that login exists on the server."""


class WrongPasswordError(LoginError):
    """The password does not match the login."""


def build_request(kind: str, *args: str) -> str:
    """Join a request tag and its fields with single spaces."""
    return " ".join((kind, *args))


def count_words(message: str) -> int:
    """Count words the way the server expects: one more than the spaces."""
    return message.count(" ") + 1


class ServerConnection:
    """Talks to the chat server, opening a fresh connection per request."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port

    def _exchange(self, request: str) -> str:
        with socket.create_connection((self.host, self.port)) as sock:
            sock.sendall(request.encode("utf-8"))
            reply = sock.recv(BUFFER_SIZE)
        return reply.decode("utf-8", errors="replace")

    def _succeeded(self, request: str) -> bool:
        return self._exchange(request).startswith(SUCCESS)

    def register_user(self, login: str, password: str, name: str) -> bool:
        """Create an account; return True if the server accepted it."""
        return self._succeeded(build_request("c", login, password, name))

    def login(self, login: str, password: str) -> str:
        """Log in and return the user's display name."""
        reply = self._exchange(build_request("i", login, password))
        if reply.startswith(SUCCESS):
            return reply[2:]
        if reply.startswith(UNKNOWN_USER):
            raise UnknownUserError(f"no such user: {login}")
        raise WrongPasswordError(f"wrong password for user: {login}")

    def send_local(self, message: str, login_sender: str, login_recipient: str) -> bool:
        """Send a private message; return True if it was delivered."""
        request = build_request(
            "l", str(count_words(message)), login_sender, login_recipient, message
        )
        return self._succeeded(request)

    def send_global(self, message: str, login_sender: str) -> bool:
        """Post to the public chat; return True if it was accepted."""
        request = build_request("g", str(count_words(message)), login_sender, message)
        return self._succeeded(request)

    def get_local(self, login1: str, login2: str) -> str:
        """Fetch the private conversation between two users."""
        return self._exchange(build_request("p", login1, login2))

    def get_global(self) -> str:
        """Fetch the whole public chat."""
        return self._exchange(build_request("P"))