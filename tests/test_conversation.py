import pytest

from lanmsg.conversation import (
    InfoFlag,
    StatusType,
    flags_for_status,
    incoming_title,
    status_message,
    update_flags,
    window_title,
)


def test_update_flags_add_and_remove_round_trip():
    flags = update_flags(InfoFlag.OK, InfoFlag.AWAY, True)
    assert flags & InfoFlag.AWAY
    flags = update_flags(flags, InfoFlag.BUSY, True)
    assert flags == InfoFlag.AWAY | InfoFlag.BUSY
    flags = update_flags(flags, InfoFlag.AWAY, False)
    assert flags == InfoFlag.BUSY


def test_update_flags_ok_flag_changes_nothing():
    flags = InfoFlag.DISCONNECTED | InfoFlag.OFFLINE
    assert update_flags(flags, InfoFlag.OK, True) == flags


def test_flags_for_status_sets_only_matching_flag():
    flags = InfoFlag.AWAY | InfoFlag.BUSY | InfoFlag.OFFLINE
    assert flags_for_status(flags, StatusType.OFFLINE) == InfoFlag.OFFLINE
    assert flags_for_status(flags, StatusType.BUSY) == InfoFlag.BUSY
    assert flags_for_status(flags, StatusType.AWAY) == InfoFlag.AWAY
    assert flags_for_status(flags, StatusType.ONLINE) == InfoFlag.OK


def test_flags_for_status_keeps_disconnected():
    flags = flags_for_status(InfoFlag.DISCONNECTED, StatusType.AWAY)
    assert flags == InfoFlag.DISCONNECTED | InfoFlag.AWAY


def test_status_message_disconnected_takes_precedence():
    flags = InfoFlag.DISCONNECTED | InfoFlag.BUSY
    message = status_message(flags, "Alice")
    assert "You are no longer connected." in message
    assert "Alice" not in message


@pytest.mark.parametrize(
    "flag, text",
    [
        (InfoFlag.OFFLINE, "Alice is offline."),
        (InfoFlag.AWAY, "Alice is away."),
        (InfoFlag.BUSY, "Alice is busy. You may be interrupting."),
    ],
)
def test_status_message_peer_states(flag, text):
    assert text in status_message(flag, "Alice")


def test_status_message_offline_before_away():
    message = status_message(InfoFlag.OFFLINE | InfoFlag.AWAY, "Bob")
    assert "Bob is offline." in message


def test_status_message_group_mode_ignores_peer_states():
    assert status_message(InfoFlag.AWAY | InfoFlag.BUSY, "Bob", True) is None
    assert "no longer connected" in status_message(InfoFlag.DISCONNECTED, "Bob", True)


def test_status_message_ok_shows_nothing():
    assert status_message(InfoFlag.OK, "Bob") is None


def test_window_title():
    assert window_title(["Alice", "Bob"]) == "Alice, Bob - Conversation"
    assert window_title(["Alice"]) == "Alice - Conversation"
    assert window_title([]) == " - Conversation"


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("message", "Carol says..."),
        ("broadcast", "Broadcast from Carol"),
        ("file", "Carol sends a file..."),
        ("folder", "Carol sends a folder..."),
    ],
)
def test_incoming_title(kind, expected):
    assert incoming_title(kind, "Carol") == expected


def test_incoming_title_unknown_kind():
    with pytest.raises(ValueError):
        incoming_title("avatar", "Carol")