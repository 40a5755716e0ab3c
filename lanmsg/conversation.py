"""Status line, window title and notification texts of a one-to-one conversation."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Iterable


class InfoFlag(IntFlag):
    """Conditions that the conversation's information line can report."""

    OK = 0
    DISCONNECTED = 1
    OFFLINE = 2
    AWAY = 4
    BUSY = 8


class StatusType(Enum):
    """Broad kind of a user's presence status."""

    ONLINE = "online"
    BUSY = "busy"
    AWAY = "away"
    OFFLINE = "offline"


_GREY = "rgb(96,96,96)"
_ORANGE = "rgb(255,115,0)"
_RED = "rgb(192,0,0)"

_INCOMING_TITLES = {
    "message": "{} says...",
    "broadcast": "Broadcast from {}",
    "file": "{} sends a file...",
    "folder": "{} sends a folder...",
}


def _span(colour: str, text: str) -> str:
    return f"<span style='color:{colour};'>{text}</span>"


def update_flags(flags: InfoFlag, flag: InfoFlag, add: bool) -> InfoFlag:
    """Return flags with flag set when add is true, or cleared otherwise."""
    flags = InfoFlag(flags)
    return flags | flag if add else flags & ~InfoFlag(flag)


def flags_for_status(flags: InfoFlag, status_type: StatusType) -> InfoFlag:
    """Return flags with the offline, busy and away flags matching status_type."""
    status_type = StatusType(status_type)
    flags = update_flags(flags, InfoFlag.OFFLINE, status_type is StatusType.OFFLINE)
    flags = update_flags(flags, InfoFlag.BUSY, status_type is StatusType.BUSY)
    return update_flags(flags, InfoFlag.AWAY, status_type is StatusType.AWAY)


def status_message(flags: InfoFlag, peer_name: str, group_mode: bool = False) -> str | None:
    """Return the information line for flags, or None when nothing is shown.

    Disconnection takes precedence; then, outside group mode, offline, away
    and busy, in that order.
    """
    flags = InfoFlag(flags)
    if flags & InfoFlag.DISCONNECTED:
        return _span(_GREY, "You are no longer connected.")
    if group_mode:
        return None
    if flags & InfoFlag.OFFLINE:
        return _span(_GREY, f"{peer_name} is offline.")
    if flags & InfoFlag.AWAY:
        return _span(_ORANGE, f"{peer_name} is away.")
    if flags & InfoFlag.BUSY:
        return _span(_RED, f"{peer_name} is busy. You may be interrupting.")
    return None


def window_title(peer_names: Iterable[str]) -> str:
    """Return the conversation window title naming every peer."""
    return ", ".join(peer_names) + " - Conversation"


def incoming_title(kind: str, sender_name: str) -> str:
    """Return the window title announcing something new from sender_name.

    kind is one of "message", "broadcast", "file" or "folder".
    """
    try:
        template = _INCOMING_TITLES[kind]
    except KeyError:
        raise ValueError(f"unknown kind of incoming item {kind!r}") from None
    return template.format(sender_name)