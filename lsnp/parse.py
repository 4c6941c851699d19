"""Reading fields out of raw ``KEY: value`` message text."""

from __future__ import annotations

from lsnp.dm import Dm, create_dm
from lsnp.profile import Profile, create_profile


def get_field_value(buffer: str, key: str) -> str | None:
    """Return the text after ``key`` and one separator character, up to a newline.

    The key is found at its first occurrence anywhere in the buffer; the value
    keeps whatever follows the separator, including a leading space. Returns
    None if the key is absent or no newline ends its value.
    """
    start = buffer.find(key)
    if start < 0:
        return None
    start += len(key) + 1
    end = buffer.find("\n", start)
    if end < 0:
        return None
    return buffer[start:end]


def parse_profile(buffer: str) -> Profile:
    """Build a profile from a PROFILE message."""
    return create_profile(
        get_field_value(buffer, "USER_ID"),
        get_field_value(buffer, "DISPLAY_NAME"),
        get_field_value(buffer, "STATUS"),
        get_field_value(buffer, "AVATAR_TYPE"),
        get_field_value(buffer, "AVATAR_ENCODING"),
        get_field_value(buffer, "AVATAR_DATA"),
    )


def parse_dm(buffer: str) -> Dm:
    """Build a DM from a DM message."""
    return create_dm(
        get_field_value(buffer, "FROM"),
        get_field_value(buffer, "TO"),
        get_field_value(buffer, "CONTENT"),
        get_field_value(buffer, "TIMESTAMP"),
        get_field_value(buffer, "MESSAGE_ID"),
        get_field_value(buffer, "TOKEN"),
    )