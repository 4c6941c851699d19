"""Interactive command line for announcing a profile on the local network."""

from __future__ import annotations

import re
import socket
import sys
from collections.abc import Callable
from typing import TextIO

from lsnp.net import PORT, create_socket

PROMPT = "C:\\User\\User\\Desktop\\CLI> "
BROADCAST_ADDRESS = "255.255.255.255"

HELP_TEXT = (
    "Available commands:\n"
    "help - Show this menu\n"
    "exit - Exit the CLI\n"
    "verbose - Show verbose information\n"
    "simple - Show simple information\n"
    "PROFILE - Create a profile\n"
    "POST - Post a message\n"
    "DM - Send a direct message\n"
)

ReadLine = Callable[[], "str | None"]


def _strip_line(line: str | None) -> str:
    """Cut a line at its first carriage return or newline."""
    return re.split(r"[\r\n]", line or "", maxsplit=1)[0]


def create_profile_message(
    user_id: str,
    display_name: str,
    status: str,
    avatar_type: str | None = None,
    avatar_encoding: str | None = None,
    avatar_data: str | None = None,
) -> str:
    """Compose a PROFILE message; avatar lines appear only if all three are given."""
    message = (
        "TYPE: PROFILE\n"
        f"USER_ID: {user_id}\n"
        f"DISPLAY_NAME: {display_name}\n"
        f"STATUS: {status}\n"
    )
    if avatar_type is not None and avatar_encoding is not None and avatar_data is not None:
        message += (
            f"AVATAR_TYPE: {avatar_type}\n"
            f"AVATAR_ENCODING: {avatar_encoding}\n"
            f"AVATAR_DATA: {avatar_data}\n"
        )
    return message


def _ask(prompt: str, read_line: ReadLine, out: TextIO) -> str:
    out.write(prompt)
    return _strip_line(read_line())


def handle_profile_choice(
    read_line: ReadLine, out: TextIO, sock: socket.socket | None = None
) -> str | None:
    """Ask for profile details and broadcast them as a PROFILE message.

    Opens its own socket when none is given. Returns the message sent, or
    None if no socket could be opened.
    """
    owned = sock is None
    socket_error: OSError | None = None
    if owned:
        try:
            sock = create_socket()
        except OSError as exc:
            socket_error = exc
            sock = None

    try:
        user_id = _ask("Enter your USER_ID: ", read_line, out)
        display_name = _ask("Enter your DISPLAY_NAME: ", read_line, out)
        status = _ask("Enter your STATUS: ", read_line, out)
        avatar_type = _ask(
            "Enter your AVATAR_TYPE (press enter if none): ", read_line, out
        )
        if avatar_type:
            avatar_encoding = _ask(
                "Enter your AVATAR_ENCODING (press enter if none): ", read_line, out
            )
            avatar_data = _ask(
                "Enter your AVATAR_DATA (press enter if none): ", read_line, out
            )
            message = create_profile_message(
                user_id, display_name, status, avatar_type, avatar_encoding, avatar_data
            )
        else:
            message = create_profile_message(user_id, display_name, status)

        if sock is None:
            print(f"socket: {socket_error}", file=sys.stderr)
            return None

        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        try:
            sock.sendto(message.encode("utf-8"), (BROADCAST_ADDRESS, PORT))
        except OSError as exc:
            print(f"sendto: {exc}", file=sys.stderr)
        out.write("PROFILE message sent.\n")
        return message
    finally:
        if owned and sock is not None:
            sock.close()


def handle_command(line: str | None, read_line: ReadLine, out: TextIO) -> bool:
    """Carry out one command line; return True when the CLI should exit."""
    command = _strip_line(line)
    if not command:
        return False
    if command == "help":
        out.write(HELP_TEXT)
    elif command == "PROFILE":
        out.write("Connecting to server...\n")
        handle_profile_choice(read_line, out)
    elif command == "exit":
        out.write("Exiting CLI...\n")
        return True
    else:
        out.write(f"Unknown command: {command}\n")
    return False


def _stdin_line() -> str | None:
    line = sys.stdin.readline()
    return line if line else None


def main(argv: list[str] | None = None) -> int:
    """Run the prompt loop until ``exit`` or end of input."""
    out = sys.stdout
    while True:
        out.write(PROMPT)
        out.flush()
        line = _stdin_line()
        if line is None:
            return 0
        if handle_command(line, _stdin_line, out):
            return 0