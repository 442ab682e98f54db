"""Interactive console client for the chat server."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable

from lanchat.connection import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ServerConnection,
    UnknownUserError,
    WrongPasswordError,
)

Reader = Callable[[], str]
Writer = Callable[[str], None]

AUTH_MENU = "1 - регистрация\n2 - вход\n3 - выход из приложения\nваш ответ: "
CHAT_MENU = (
    "\n1 - написать в глобальные сообщение\n2 - написать в личные сообщения"
    "\n3 - вывести глобальные сообщения\n4 - вывести личное сообщение"
    "\n5 - выйти из аккаунта\nваш выбор: "
)
RETRY_PROMPT = "Может просто опечатка\nПопробуй еще? (1 - да  0 - нет): "


def _read_choice(read: Reader) -> int | None:
    try:
        return int(read())
    except ValueError:
        return None


def _register(connection: ServerConnection, read: Reader, write: Writer) -> tuple[str, str]:
    while True:
        write("Введите имя нового пользователя: ")
        name = read()
        write("Введите логин нового пользователя: ")
        login = read()
        write("Введите пароль нового пользователя: ")
        password = read()
        write("\n")
        if connection.register_user(login, password, name):
            write("Вы зарегестрировались!\n")
            return login, name
        write("Мы не смогли вас зарегестрировать :(\nПопробуйте изменить логин\n")


def _log_in(
    connection: ServerConnection, read: Reader, write: Writer
) -> tuple[str, str] | None:
    while True:
        write("Введите логин: ")
        login = read()
        write("Введите пароль: ")
        password = read()
        try:
            name = connection.login(login, password)
        except UnknownUserError:
            write("Мы не нашли такого пользователя :(\n" + RETRY_PROMPT)
        except WrongPasswordError:
            write("Неверный пароль :(\n" + RETRY_PROMPT)
        else:
            write("Вы вошли!\n")
            return login, name
        if read() != "1":
            return None


def authenticate(
    connection: ServerConnection, read: Reader, write: Writer
) -> tuple[str, str] | None:
    """Register or log in; return (login, name), or None when the user quits."""
    while True:
        write(AUTH_MENU)
        choice = _read_choice(read)
        if choice == 1:
            return _register(connection, read, write)
        if choice == 2:
            account = _log_in(connection, read, write)
            if account is not None:
                return account
        elif choice == 3:
            return None
        else:
            write("Ты уверен что там такой выбор есть?\n")


def chat_session(
    connection: ServerConnection, login: str, read: Reader, write: Writer
) -> None:
    """Run the chat menu for a logged-in user until they log out."""
    while True:
        write(CHAT_MENU)
        choice = _read_choice(read)
        if choice == 1:
            write(connection.get_global() + "\n")
            write("ваше сообщение: ")
            connection.send_global(read(), login)
        elif choice == 2:
            write("login получателя: ")
            recipient = read()
            write("ваше сообщение: ")
            message = read()
            write(f"Введено: {message}\n")
            if connection.send_local(message, login, recipient):
                write("Сообщение улетело ;)\n")
            else:
                write("Что-то не так :(\n")
            write("\n")
        elif choice == 3:
            write("\n" + connection.get_global())
        elif choice == 4:
            write("login этого пользователя: ")
            other = read()
            write("\n")
            write(connection.get_local(login, other) + "\n")
        elif choice == 5:
            write("\n")
            return
        else:
            write("Давай без опечаток, еще разок ;)\n")
        write("\n")


def _token_reader(stream: Iterable[str]) -> Reader:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    return read


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive client."""
    parser = argparse.ArgumentParser(description="Console chat client.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    connection = ServerConnection(args.host, args.port)
    read = _token_reader(sys.stdin)
    try:
        while True:
            account = authenticate(connection, read, _write)
            if account is None:
                return 0
            login, _name = account
            chat_session(connection, login, read, _write)
    except EOFError:
        return 0
    except OSError as exc:
        print(f"connection failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())