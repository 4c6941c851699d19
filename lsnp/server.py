"""A UDP server that prints the LSNP messages it receives."""

from __future__ import annotations

import socket
import sys
from typing import TextIO

from lsnp.net import PORT
from lsnp.parse import parse_dm, parse_profile

BUFFER_SIZE = 2048


def handle_datagram(buffer: str, sender: tuple[str, int]) -> str:
    """Describe one received message as the server prints it."""
    host, port = sender
    text = f"\nReceived from {host}:{port}\n"
    if "TYPE: PROFILE" in buffer:
        profile = parse_profile(buffer)
        text += profile.simple() + profile.verbose()
    elif "TYPE: DM" in buffer:
        parse_dm(buffer)
    else:
        text += f"Unknown or unsupported message:\n{buffer}\n"
    return text


def start_server(
    port: int = PORT, out: TextIO | None = None, limit: int | None = None
) -> int:
    """Listen on ``port`` and print each message until an error or ``limit``.

    Returns the number of messages handled; 0 if the port could not be bound.
    """
    out = out if out is not None else sys.stdout
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.bind(("", port))
        except OSError as exc:
            print(f"Bind failed: {exc}", file=sys.stderr)
            return 0

        out.write(f"LSNP Server listening on port {port}...\n")
        handled = 0
        while limit is None or handled < limit:
            try:
                data, sender = sock.recvfrom(BUFFER_SIZE - 1)
            except OSError as exc:
                print(f"recvfrom failed: {exc}", file=sys.stderr)
                break
            out.write(handle_datagram(data.decode("utf-8", errors="replace"), sender))
            handled += 1
        return handled


def main(argv: list[str] | None = None) -> int:
    """Run the server on the standard port."""
    start_server()
    return 0