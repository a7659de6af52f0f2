# messagerie

A small chat for a local network. One machine runs the server, which relays
every message it receives to all the other connected clients. Each user runs
a client, types the server's address and talks.

Both sides come with a window (drawn with pygame).

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
messagerie-server [--port PORT]
```

The server starts listening on all interfaces as soon as it starts (port 8080
unless `--port` says otherwise) and prints the address it announces. That
address is the IPv4 address of the machine, taken from its network interfaces
while skipping the loopback (`lo`) and `docker*` interfaces.

The window shows the status (OFFLINE or ONLINE), the port and that address.
Click **LAUNCH** to start serving clients and relaying their messages, and
**CLOSE** to pause; while paused, connected clients stay connected but nothing
is read or relayed. Up to 20 clients can be connected at once; further
connections are closed right away. Closing the window disconnects every client
and stops the server.

If the server cannot bind its port or the window cannot be opened, the command
exits with status 84.

## Running a client

```
messagerie-client [--port PORT]
```

Type the server's address in the field (only digits and dots are accepted,
Backspace deletes) and click **CONNECT**. If the address is not a valid IPv4
address, or the connection is refused at once, the client stays on the
connection screen.

Once connected, type a message (printable ASCII characters) and press Enter to
send it. Your own messages and those of the others appear in the chat area,
newest at the bottom; the oldest scroll away once more than 16 are shown.
Messages that arrive empty are not shown.

## Wire format

Every message travels as one frame of exactly 8192 bytes: the UTF-8 text,
padded with NUL bytes. The receiver takes the text up to the first NUL. A
message must therefore be shorter than 8192 bytes and contain no NUL.

## Using the pieces from Python

The building blocks can be used without any window:

- `messagerie.relay.RelayServer(host, port, max_clients)` accepts clients and
  forwards each frame to every other client. `start()` binds and listens,
  `poll()` handles whatever is ready without waiting and returns the texts it
  relayed, `close()` disconnects everyone; as a context manager it starts and
  closes itself.
- `messagerie.connection.ChatConnection(port)` is a non-blocking client:
  `connect(address)`, `send(text)`, `receive()` (returns the non-empty messages
  of the complete frames received so far) and `close()`.
  `encode_message` and `decode_message` give the frame format.
- `messagerie.chat_log.MessageLog` keeps the messages shown on screen with
  their positions; `push(text)` adds one at the bottom.
- `messagerie.input_fields.IpField` and `MessageField` are the two editable
  text fields.
- `messagerie.network.local_ipv4()` finds the address the server announces;
  `choose_address(pairs)` makes the same choice from (name, address) pairs.
- `messagerie.client_app.ClientApp` and `messagerie.server_app.ServerApp` hold
  the state of the two windows and take pygame events through `handle_event`.

## What it does not do

There are no user names, no authentication or encryption, and no message
history: what a client shows is lost when its window closes, and a client
cannot reconnect without being restarted.