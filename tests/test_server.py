import io
import socket
import threading

from lsnp.parse import parse_profile
from lsnp.server import handle_datagram, start_server

PROFILE = "TYPE: PROFILE\nUSER_ID: alice\nDISPLAY_NAME: Alice\nSTATUS: Online\n"


def test_handle_profile_prints_simple_then_verbose():
    text = handle_datagram(PROFILE, ("127.0.0.1", 5000))
    profile = parse_profile(PROFILE)
    assert text == "\nReceived from 127.0.0.1:5000\n" + profile.simple() + profile.verbose()


def test_handle_dm_prints_only_source():
    buffer = "TYPE: DM\nFROM: a\nTO: b\nCONTENT: hi\n"
    assert handle_datagram(buffer, ("10.0.0.2", 6000)) == "\nReceived from 10.0.0.2:6000\n"


def test_handle_unknown_message():
    text = handle_datagram("TYPE: PING\n", ("127.0.0.1", 7000))
    assert text.endswith("Unknown or unsupported message:\nTYPE: PING\n\n")


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_start_server_handles_datagram():
    port = _free_port()
    out = io.StringIO()
    result = {}
    thread = threading.Thread(
        target=lambda: result.update(count=start_server(port, out, limit=1))
    )
    thread.start()
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        for _ in range(100):
            sender.sendto(PROFILE.encode(), ("127.0.0.1", port))
            thread.join(0.05)
            if not thread.is_alive():
                break
    thread.join(2)
    assert result["count"] == 1
    text = out.getvalue()
    assert text.startswith(f"LSNP Server listening on port {port}...\n")
    assert parse_profile(PROFILE).verbose() in text


def test_start_server_bind_failure_returns_zero():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as holder:
        holder.bind(("", 0))
        port = holder.getsockname()[1]
        out = io.StringIO()
        assert start_server(port, out, limit=1) == 0
        assert out.getvalue() == ""