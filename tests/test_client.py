import io

import pytest

from lanchat.client import authenticate, chat_session, main
from lanchat.connection import UnknownUserError, WrongPasswordError


class FakeConnection:
    def __init__(self, register=(), logins=(), local_ok=True, global_text="", local_text=""):
        self.register_results = list(register)
        self.login_results = list(logins)
        self.local_ok = local_ok
        self.global_text = global_text
        self.local_text = local_text
        self.registered = []
        self.global_sent = []
        self.local_sent = []
        self.local_requests = []

    def register_user(self, login, password, name):
        self.registered.append((login, password, name))
        return self.register_results.pop(0)

    def login(self, login, password):
        result = self.login_results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def send_global(self, message, login_sender):
        self.global_sent.append((message, login_sender))
        return True

    def send_local(self, message, login_sender, login_recipient):
        self.local_sent.append((message, login_sender, login_recipient))
        return self.local_ok

    def get_global(self):
        return self.global_text

    def get_local(self, login1, login2):
        self.local_requests.append((login1, login2))
        return self.local_text


def _reader(tokens):
    it = iter(tokens)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def output():
    chunks = []
    return chunks


def _text(chunks):
    return "".join(chunks)


def test_authenticate_exit(output):
    conn = FakeConnection()
    assert authenticate(conn, _reader(["3"]), output.append) is None
    assert "1 - регистрация" in _text(output)


def test_authenticate_register(output):
    conn = FakeConnection(register=[True])
    result = authenticate(conn, _reader(["1", "Alice", "alice", "password"]), output.append)
    assert result == ("alice", "Alice")
    assert conn.registered == [("alice", "password", "Alice")]
    assert "Вы зарегестрировались!" in _text(output)


def test_authenticate_register_retries_until_accepted(output):
    conn = FakeConnection(register=[False, True])
    tokens = ["1", "Alice", "alice", "password", "Alice", "alice2", "password"]
    result = authenticate(conn, _reader(tokens), output.append)
    assert result == ("alice2", "Alice")
    assert len(conn.registered) == 2
    assert "Попробуйте изменить логин" in _text(output)


def test_authenticate_login(output):
    conn = FakeConnection(logins=["Alice"])
    result = authenticate(conn, _reader(["2", "alice", "password"]), output.append)
    assert result == ("alice", "Alice")
    assert "Вы вошли!" in _text(output)


def test_authenticate_unknown_user_gives_up(output):
    conn = FakeConnection(logins=[UnknownUserError("bob")])
    result = authenticate(conn, _reader(["2", "bob", "password", "0", "3"]), output.append)
    assert result is None
    assert "Мы не нашли такого пользователя" in _text(output)


def test_authenticate_wrong_password_then_retry(output):
    conn = FakeConnection(logins=[WrongPasswordError("alice"), "Alice"])
    tokens = ["2", "alice", "bad", "1", "alice", "password"]
    result = authenticate(conn, _reader(tokens), output.append)
    assert result == ("alice", "Alice")
    assert "Неверный пароль :(" in _text(output)


def test_authenticate_invalid_choice(output):
    conn = FakeConnection()
    assert authenticate(conn, _reader(["9", "x", "3"]), output.append) is None
    assert _text(output).count("Ты уверен что там такой выбор есть?") == 2


def test_chat_session_logout(output):
    conn = FakeConnection()
    read = _reader(["5", "leftover"])
    chat_session(conn, "alice", read, output.append)
    assert read() == "leftover"
    assert conn.global_sent == []


def test_chat_session_send_global(output):
    conn = FakeConnection(global_text="Bob: hi\n")
    chat_session(conn, "alice", _reader(["1", "hello", "5"]), output.append)
    assert conn.global_sent == [("hello", "alice")]
    assert "Bob: hi\n" in _text(output)


def test_chat_session_send_local_success(output):
    conn = FakeConnection(local_ok=True)
    chat_session(conn, "alice", _reader(["2", "bob", "hi", "5"]), output.append)
    assert conn.local_sent == [("hi", "alice", "bob")]
    assert "Сообщение улетело ;)" in _text(output)
    assert "Введено: hi" in _text(output)


def test_chat_session_send_local_failure(output):
    conn = FakeConnection(local_ok=False)
    chat_session(conn, "alice", _reader(["2", "bob", "hi", "5"]), output.append)
    assert "Что-то не так :(" in _text(output)


def test_chat_session_show_global(output):
    conn = FakeConnection(global_text="Alice: hello\n")
    chat_session(conn, "alice", _reader(["3", "5"]), output.append)
    assert "\nAlice: hello\n" in _text(output)


def test_chat_session_show_local(output):
    conn = FakeConnection(local_text="Bob: hey\n")
    chat_session(conn, "alice", _reader(["4", "bob", "5"]), output.append)
    assert conn.local_requests == [("alice", "bob")]
    assert "Bob: hey\n" in _text(output)


def test_chat_session_invalid_choice(output):
    conn = FakeConnection()
    chat_session(conn, "alice", _reader(["7", "5"]), output.append)
    assert "Давай без опечаток, еще разок ;)" in _text(output)


def test_main_exit_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--host", "127.0.0.1", "--port", "1"]) == 0
    assert "1 - регистрация" in capsys.readouterr().out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "ваш ответ: " in capsys.readouterr().out