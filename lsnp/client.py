"""Client-side state: known peers, received messages and outgoing messages."""

from __future__ import annotations

import socket
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

SERVER_PORT = 50999
BUF_SIZE = 4096
MAX_PEERS = 100
MAX_MESSAGES = 100

_MAX_LINES = 20
_LINE_SIZE = 256
_USER_ID_SIZE = 64
_DISPLAY_NAME_SIZE = 64
_CONTENT_SIZE = 1024
_MESSAGE_TYPE_SIZE = 16

# Field prefix, the key used in the parsed result, and the room for its value.
_PARSED_FIELDS = (
    ("TYPE:", "TYPE", 32),
    ("USER_ID:", "USER_ID", _USER_ID_SIZE),
    ("DISPLAY_NAME:", "DISPLAY_NAME", _DISPLAY_NAME_SIZE),
    ("CONTENT:", "CONTENT", _CONTENT_SIZE),
)


def _clip(value: str, size: int) -> str:
    return value[: size - 1]


@dataclass(frozen=True)
class Peer:
    """A peer that has announced itself."""

    user_id: str
    display_name: str


@dataclass(frozen=True)
class Message:
    """A message received from a peer."""

    sender: str
    content: str
    kind: str


@dataclass
class ClientState:
    """Everything a client knows and the socket it talks through."""

    user_id: str = ""
    display_name: str = ""
    sock: socket.socket | None = None
    server_addr: tuple[str, int] = ("255.255.255.255", SERVER_PORT)
    verbose: bool = True
    out: TextIO | None = None
    poll_interval: float = 0.1
    peers: list[Peer] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    @property
    def _out(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def log_debug(self, msg: str) -> None:
        """Write a debug line when verbose output is on."""
        if self.verbose:
            self._out.write(f"[DEBUG] {msg}\n")

    def add_peer(self, user_id: str, display_name: str) -> bool:
        """Remember a peer unless it is already known or the list is full.

        Returns True if the peer was added.
        """
        if any(peer.user_id == user_id for peer in self.peers):
            return False
        if len(self.peers) >= MAX_PEERS:
            return False
        self.peers.append(
            Peer(_clip(user_id, _USER_ID_SIZE), _clip(display_name, _DISPLAY_NAME_SIZE))
        )
        return True

    def add_message(self, sender: str, content: str, kind: str) -> bool:
        """Store a message unless the list is full; True if it was stored."""
        if len(self.messages) >= MAX_MESSAGES:
            return False
        self.messages.append(
            Message(
                _clip(sender, _USER_ID_SIZE),
                _clip(content, _CONTENT_SIZE),
                _clip(kind, _MESSAGE_TYPE_SIZE),
            )
        )
        return True

    def format_known_peers(self) -> str:
        """List the known peers, one per line."""
        lines = ["Known Peers:"]
        lines += [f"- {p.display_name} ({p.user_id})" for p in self.peers]
        return "".join(line + "\n" for line in lines)

    def format_messages(self) -> str:
        """List the stored messages, one per line."""
        lines = ["Messages:"]
        lines += [f"[{m.kind}] {m.sender}: {m.content}" for m in self.messages]
        return "".join(line + "\n" for line in lines)

    def parse_message(self, buffer: str) -> dict[str, str]:
        """Read TYPE, USER_ID, DISPLAY_NAME and CONTENT from a message.

        A peer is recorded when both a user id and a display name are present,
        and a message when both a user id and content are present. Returns the
        fields that were read, empty where absent.
        """
        text = buffer[: BUF_SIZE - 1]
        lines = [line for line in text.split("\n") if line][:_MAX_LINES]
        fields = {key: "" for _, key, _ in _PARSED_FIELDS}

        for raw in lines:
            line = raw[: _LINE_SIZE - 1]
            for prefix, key, size in _PARSED_FIELDS:
                if line.startswith(prefix):
                    value = line[len(prefix):].lstrip()
                    if value:
                        fields[key] = _clip(value, size)
                    break

        user_id = fields["USER_ID"]
        if user_id and fields["DISPLAY_NAME"]:
            self.add_peer(user_id, fields["DISPLAY_NAME"])
        if user_id and fields["CONTENT"]:
            self.add_message(user_id, fields["CONTENT"], fields["TYPE"])

        self.log_debug(
            "Parsed message: TYPE={TYPE} USER_ID={USER_ID} "
            "DISPLAY_NAME={DISPLAY_NAME} CONTENT={CONTENT}".format(**fields)
        )
        return fields

    def _send(self, message: str) -> None:
        if self.sock is None:
            raise ValueError("client has no socket")
        self.sock.sendto(message.encode("utf-8")[: BUF_SIZE - 1], self.server_addr)

    def send_profile(self) -> str:
        """Send this client's PROFILE message; return the text sent."""
        message = (
            f"TYPE: PROFILE\nUSER_ID: {self.user_id}\n"
            f"DISPLAY_NAME: {self.display_name}\nSTATUS: Available\n\n"
        )
        self._send(message)
        self.log_debug("Sent PROFILE.")
        return message

    def send_post(self, content: str) -> str:
        """Send a POST message with the given content; return the text sent."""
        message = f"TYPE: POST\nUSER_ID: {self.user_id}\nCONTENT: {content}\n\n"
        self._send(message)
        self.log_debug("Sent POST.")
        return message

    def receive_loop(self, limit: int | None = None) -> int:
        """Receive and parse messages until a socket error or ``limit`` arrive.

        Returns the number of messages parsed.
        """
        if self.sock is None:
            raise ValueError("client has no socket")
        count = 0
        while limit is None or count < limit:
            try:
                data, _ = self.sock.recvfrom(BUF_SIZE - 1)
            except OSError:
                break
            if data:
                self.log_debug("Received message.")
                self.parse_message(data.decode("utf-8", errors="replace"))
                count += 1
            if self.poll_interval:
                time.sleep(self.poll_interval)
        return count