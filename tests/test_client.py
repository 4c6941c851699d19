import io
import socket

import pytest

from lsnp.client import (
    MAX_MESSAGES,
    MAX_PEERS,
    ClientState,
    Message,
    Peer,
)


def _state(**kwargs):
    return ClientState(out=io.StringIO(), **kwargs)


def test_add_peer_ignores_duplicates():
    state = _state()
    assert state.add_peer("alice@host", "Alice")
    assert not state.add_peer("alice@host", "Other")
    assert state.peers == [Peer("alice@host", "Alice")]


def test_add_peer_stops_at_limit():
    state = _state()
    for i in range(MAX_PEERS + 5):
        state.add_peer(f"user{i}", f"Name {i}")
    assert len(state.peers) == MAX_PEERS
    assert state.peers[-1].user_id == f"user{MAX_PEERS - 1}"


def test_add_message_stops_at_limit():
    state = _state()
    for i in range(MAX_MESSAGES + 3):
        state.add_message("bob", f"hello {i}", "POST")
    assert len(state.messages) == MAX_MESSAGES
    assert not state.add_message("bob", "late", "POST")


def test_format_known_peers():
    state = _state()
    state.add_peer("alice@host", "Alice")
    assert state.format_known_peers() == "Known Peers:\n- Alice (alice@host)\n"


def test_format_messages():
    state = _state()
    state.add_message("bob", "hi there", "POST")
    assert state.format_messages() == "Messages:\n[POST] bob: hi there\n"


def test_parse_message_records_peer_and_message():
    state = _state()
    fields = state.parse_message(
        "TYPE: POST\nUSER_ID: carol\nDISPLAY_NAME: Carol\nCONTENT: good morning\n\n"
    )
    assert fields["TYPE"] == "POST"
    assert state.peers == [Peer("carol", "Carol")]
    assert state.messages == [Message("carol", "good morning", "POST")]


def test_parse_message_without_user_id_records_nothing():
    state = _state()
    state.parse_message("TYPE: POST\nCONTENT: orphan\n")
    assert state.peers == []
    assert state.messages == []


def test_parse_message_logs_debug_line():
    out = io.StringIO()
    state = ClientState(out=out)
    state.parse_message("TYPE: PROFILE\nUSER_ID: dan\nDISPLAY_NAME: Dan\n")
    assert out.getvalue() == (
        "[DEBUG] Parsed message: TYPE=PROFILE USER_ID=dan "
        "DISPLAY_NAME=Dan CONTENT=\n"
    )


def test_log_debug_silent_when_not_verbose():
    out = io.StringIO()
    state = ClientState(out=out, verbose=False)
    state.log_debug("anything")
    assert out.getvalue() == ""


def test_send_without_socket_raises():
    state = _state(user_id="eve")
    with pytest.raises(ValueError):
        state.send_post("hello")


@pytest.fixture
def udp_pair():
    receiver = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    receiver.bind(("127.0.0.1", 0))
    receiver.settimeout(2)
    sender = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    yield sender, receiver
    sender.close()
    receiver.close()


def test_send_profile_wire_format(udp_pair):
    sender, receiver = udp_pair
    state = _state(
        user_id="frank",
        display_name="Frank",
        sock=sender,
        server_addr=receiver.getsockname(),
    )
    sent = state.send_profile()
    data, _ = receiver.recvfrom(4096)
    assert data.decode() == sent
    assert sent == (
        "TYPE: PROFILE\nUSER_ID: frank\nDISPLAY_NAME: Frank\nSTATUS: Available\n\n"
    )


def test_post_round_trip_through_receive_loop(udp_pair):
    sender, receiver = udp_pair
    author = _state(user_id="gina", sock=sender, server_addr=receiver.getsockname())
    author.send_post("see you")
    reader = _state(sock=receiver, poll_interval=0)
    assert reader.receive_loop(limit=1) == 1
    assert reader.messages == [Message("gina", "see you", "POST")]