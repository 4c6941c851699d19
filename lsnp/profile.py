"""PROFILE messages: the record a peer announces about itself."""

from __future__ import annotations

from dataclasses import dataclass

MAXSTRING = 256
CONSTANT = 50
MAX = 2048

AVATAR_NOTICE = "(User has an avatar but cannot be displayed as of the moment.)"


def _clip(value: str | None, size: int) -> str:
    """Keep at most ``size - 1`` characters, treating a missing value as empty."""
    return (value or "")[: size - 1]


@dataclass(frozen=True)
class Profile:
    """A peer's profile, optionally with an avatar."""

    user_id: str
    display_name: str
    status: str
    avatar_type: str = ""
    avatar_encoding: str = ""
    avatar_data: str = ""
    has_avatar: bool = False
    type: str = "PROFILE"

    def verbose(self) -> str:
        """Every field of the profile, one ``KEY: value`` line each."""
        lines = [
            f"TYPE: {self.type}",
            f"USER_ID: {self.user_id}",
            f"DISPLAY_NAME: {self.display_name}",
            f"STATUS: {self.status}",
        ]
        if self.has_avatar:
            lines += [
                f"AVATAR_TYPE: {self.avatar_type}",
                f"AVATAR_ENCODING: {self.avatar_encoding}",
                f"AVATAR_DATA: {self.avatar_data}",
            ]
        return "".join(line + "\n" for line in lines)

    def simple(self) -> str:
        """The display name and status, plus a note if there is an avatar."""
        text = f"DISPLAY_NAME: {self.display_name}\nSTATUS: {self.status}\n"
        if self.has_avatar:
            text += AVATAR_NOTICE + "\n"
        return text


def create_profile(
    user_id: str | None,
    display_name: str | None,
    status: str | None,
    avatar_type: str | None = None,
    avatar_encoding: str | None = None,
    avatar_data: str | None = None,
) -> Profile:
    """Build a profile, truncating fields to their fixed limits.

    The avatar is kept only when its type, encoding and data are all given.
    """
    has_avatar = (
        avatar_type is not None
        and avatar_encoding is not None
        and avatar_data is not None
    )
    return Profile(
        user_id=_clip(user_id, CONSTANT),
        display_name=_clip(display_name, CONSTANT),
        status=_clip(status, CONSTANT),
        avatar_type=_clip(avatar_type, CONSTANT) if has_avatar else "",
        avatar_encoding=_clip(avatar_encoding, CONSTANT) if has_avatar else "",
        avatar_data=_clip(avatar_data, MAX) if has_avatar else "",
        has_avatar=has_avatar,
    )