"""DM messages: direct messages between two peers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lsnp.profile import AVATAR_NOTICE, Profile

MAX_STRING_SIZE = 256
MAX_PROFILES = 10

UNKNOWN_USERS = "Unknown user(s) in DM."


def _clip(value: str | None) -> str:
    return (value or "")[: MAX_STRING_SIZE - 1]


@dataclass(frozen=True)
class Dm:
    """A direct message from one user to another."""

    sender: str
    to: str
    content: str
    timestamp: str
    message_id: str
    token: str
    type: str = "DM"

    def verbose(self) -> str:
        """Every field of the message, one ``KEY: value`` line each."""
        lines = [
            f"TYPE: {self.type}",
            f"FROM: {self.sender}",
            f"TO: {self.to}",
            f"CONTENT: {self.content}",
            f"TIMESTAMP: {self.timestamp}",
            f"MESSAGE_ID: {self.message_id}",
            f"TOKEN: {self.token}",
        ]
        return "".join(line + "\n" for line in lines)


def create_dm(
    sender: str | None,
    to: str | None,
    content: str | None,
    timestamp: str | None,
    message_id: str | None,
    token: str | None,
) -> Dm:
    """Build a DM, truncating each field to its fixed limit."""
    return Dm(
        sender=_clip(sender),
        to=_clip(to),
        content=_clip(content),
        timestamp=_clip(timestamp),
        message_id=_clip(message_id),
        token=_clip(token),
    )


def find_profile(profiles: Iterable[Profile], user_id: str) -> Profile | None:
    """Return the first profile with the given user id, or None."""
    return next((p for p in profiles if p.user_id == user_id), None)


def format_dm_simple(profiles: Iterable[Profile], dm: Dm) -> str:
    """Show a DM by its sender's display name, if both users are known."""
    profiles = list(profiles)
    sender = find_profile(profiles, dm.sender)
    recipient = find_profile(profiles, dm.to)
    if sender is None or recipient is None:
        return UNKNOWN_USERS + "\n"

    name = sender.display_name or sender.user_id
    text = f"FROM: {name}\nCONTENT: {dm.content}\n"
    if sender.has_avatar:
        text += AVATAR_NOTICE + "\n"
    return text