# lsnp

A small toolkit for the Local Social Networking Protocol (LSNP). Peers on a
local network announce profiles, posts and direct messages as plain-text
`KEY: value` lines sent over UDP on port 50999.

A profile message looks like this:

```
TYPE: PROFILE
USER_ID: alice@192.168.1.10
DISPLAY_NAME: Alice
STATUS: Available
```

and may also carry `AVATAR_TYPE`, `AVATAR_ENCODING` and `AVATAR_DATA` lines.

## Installing

```
pip install .
```

Only the standard library is needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `lsnp-server`

Binds to UDP port 50999 on all interfaces and, for every datagram, prints
the sender's address. A `PROFILE` message is then shown in simple form
(display name, status, and a note if there is an avatar) followed by the
verbose form (every field). A `DM` message is parsed but nothing more is
printed for it. Anything else is printed as received under
"Unknown or unsupported message:".

```
lsnp-server
```

### `lsnp-cli`

An interactive prompt. It understands three commands:

- `help` prints the list of commands;
- `PROFILE` asks for a user ID, display name, status and, optionally, an
  avatar type, encoding and data, then broadcasts the resulting `PROFILE`
  message to `255.255.255.255:50999`;
- `exit` leaves the prompt (so does end of input).

Empty lines are ignored; any other input is reported as an unknown command.

```
lsnp-cli
```

## Using the library

```python
from lsnp.parse import parse_profile, parse_dm
from lsnp.dm import format_dm_simple

alice = parse_profile(
    "TYPE: PROFILE\nUSER_ID: alice@192.168.1.10\n"
    "DISPLAY_NAME: Alice\nSTATUS: Exploring\n"
)
bob = parse_profile(
    "TYPE: PROFILE\nUSER_ID: bob@192.168.1.11\n"
    "DISPLAY_NAME: Bob\nSTATUS: Online\n"
)
print(alice.simple())
print(alice.verbose())

dm = parse_dm(
    "TYPE: DM\nFROM: alice@192.168.1.10\nTO: bob@192.168.1.11\n"
    "CONTENT: Hi Bob\nTIMESTAMP: 1728938500\nMESSAGE_ID: f83d2b1c\n"
    "TOKEN: token\n"
)
print(format_dm_simple([alice, bob], dm))
```

Things to know about parsing:

- `lsnp.parse.get_field_value(buffer, key)` finds the first occurrence of
  `key` anywhere in the text, skips one character after it, and returns the
  rest up to the next newline. The value therefore keeps the space that
  follows the colon (`" alice@192.168.1.10"` above), and a field whose value
  is not ended by a newline reads as missing (`None`).
- `lsnp.profile.create_profile` and `lsnp.dm.create_dm` truncate fields to
  fixed lengths; a profile keeps its avatar only when type, encoding and
  data are all present.
- `lsnp.dm.format_dm_simple` prints "Unknown user(s) in DM." unless both the
  sender and the recipient are among the given profiles, matched by exact
  user ID.

`lsnp.client.ClientState` holds a client's user ID, display name and socket,
the list of known peers (`Peer`) and received messages (`Message`), each
capped at 100. `parse_message` reads `TYPE`, `USER_ID`, `DISPLAY_NAME` and
`CONTENT` lines, records the peer and the message, and returns the fields;
`send_profile` and `send_post` send `PROFILE` and `POST` messages to
`server_addr`; `receive_loop` receives and parses datagrams until a socket
error or a given count. `format_known_peers` and `format_messages` return
the lists as text.

`lsnp.net` holds the socket helpers: `create_socket` (UDP with broadcast
enabled), `bind_socket`, `send_message` and `listen_loop`, which prints
every datagram it receives and returns their texts.

## What it does not do

- `help` in `lsnp-cli` also lists `verbose`, `simple`, `POST` and `DM`, but
  the prompt does not carry them out; they are reported as unknown commands.
  Posts can be sent only through `ClientState.send_post`, and there is no
  way to send a direct message.
- `lsnp-server` keeps no list of profiles, so it does not display direct
  messages, and nothing it receives is stored.
- Tokens, timestamps and message IDs are read and printed but never checked.