"""UDP sockets for sending and receiving LSNP messages."""

from __future__ import annotations

import socket
import sys
from typing import TextIO

PORT = 50999
MAXBUF = 65536
_RECV_SIZE = 2048 - 1


def create_socket() -> socket.socket:
    """Open a UDP socket with broadcasting enabled."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
    except OSError:
        sock.close()
        raise
    return sock


def bind_socket(sock: socket.socket, port: int = PORT) -> None:
    """Bind the socket to all interfaces; close it and re-raise on failure."""
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise


def send_message(
    sock: socket.socket, message: str, target_ip: str, port: int = PORT
) -> int:
    """Send a text message to ``target_ip``; return the number of bytes sent."""
    return sock.sendto(message.encode("utf-8"), (target_ip, port))


def listen_loop(
    sock: socket.socket, out: TextIO | None = None, limit: int | None = None
) -> list[str]:
    """Receive and print messages until an error, or until ``limit`` arrive.

    Returns the messages received.
    """
    out = out if out is not None else sys.stdout
    out.write(f"Listening for LSNP messages on port {PORT}...\n")
    received: list[str] = []
    while limit is None or len(received) < limit:
        try:
            data, (host, port) = sock.recvfrom(_RECV_SIZE)
        except OSError as exc:
            out.write("waiting for data...")
            print(f"recvfrom failed: {exc}", file=sys.stderr)
            break
        out.write("waiting for data...")
        text = data.decode("utf-8", errors="replace")
        out.write(f"Received message from {host}:{port}\n")
        out.write(f"Message:\n{text}\n")
        received.append(text)
    return received