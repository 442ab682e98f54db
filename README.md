# lanchat

A console client for a small chat on a local network. Everyone on the server
shares one global chat, and any two users can also write to each other
privately. The package also holds in-memory records of users, private
conversations and the global chat.

## Contents

- `lanchat.client`: the interactive console client (`main`, `authenticate`,
  `chat_session`).
- `lanchat.connection`: `ServerConnection`, which talks to the chat server
  over TCP, opening a new connection for each request, plus the helpers
  `build_request` and `count_words` and the exceptions `LoginError`,
  `UnknownUserError` and `WrongPasswordError`.
- `lanchat.user`: the `User` dataclass (`login`, `password`, `name`).
- `lanchat.local_message`: `Message` and `LocalMessage`, the history of a
  private conversation between two users.
- `lanchat.global_message`: `GlobalMessage`, the public chat, which looks up
  authors by login in a mapping of logins to `User` objects.

## Installation

```
pip install .
```

## Running the client

```
lanchat --host 127.0.0.1 --port 8080
```

`--host` defaults to `192.168.0.25` and `--port` to `8080`. Input is read
as whitespace-separated words, so a message typed at a prompt is a single
word.

The client opens with a menu:

1. register a new account (name, login, password),
2. log in to an existing account,
3. quit.

After you log in, the next menu lets you:

1. show the global chat and write to it,
2. send a private message to another login,
3. show the global chat,
4. show your conversation with another login,
5. log out.

The client exits with status 0 when you quit or input ends, and with status 1
if the server cannot be reached.

## Using the connection from Python

```python
from lanchat.connection import ServerConnection, UnknownUserError, WrongPasswordError

conn = ServerConnection("127.0.0.1", 8080)
password = "password"
if conn.register_user("alice", password, "Alice"):
    print("registered")

try:
    name = conn.login("alice", password)
except UnknownUserError:
    print("no such user")
except WrongPasswordError:
    print("wrong password")
else:
    conn.send_global("hello everyone", "alice")
    print(conn.get_global())
```

`register_user`, `send_local` and `send_global` return `True` when the server
answers with success and `False` otherwise. `login` returns the user's display
name; a refused login raises `UnknownUserError` or `WrongPasswordError`, both
subclasses of `LoginError`. `get_local` and `get_global` return the chat text
as the server sends it.

## Using the message stores

```python
from lanchat.user import User
from lanchat.local_message import LocalMessage
from lanchat.global_message import GlobalMessage

alice = User("alice", "password", "Alice")
bob = User("bob", "password", "Bob")

chat = LocalMessage(alice, bob)
chat.send_message("alice", "hi")
print(chat.all_messages())          # "Alice: hi\n"

room = GlobalMessage({"alice": alice, "bob": bob})
room.send_message("bob", "hello")
print(room.create_string_chat())    # "Bob: hello\n"
```

`GlobalMessage.send_message` raises `KeyError` for an unknown login.

## What this package does not do

It contains no chat server. The client and `ServerConnection` need a running
server that speaks the same request format; nothing here listens for
connections, keeps accounts between runs, or stores messages on disk. The
message stores live only in memory.

## Tests

```
pip install .[test]
pytest
```