import pytest

from lanmsg.chatstate import PAUSE_TIME, ChatState, ChatStateTracker


@pytest.fixture
def recorder():
    sent = []
    scheduled = []
    tracker = ChatStateTracker(notify=sent.append, schedule=scheduled.append)
    return tracker, sent, scheduled


def test_starts_blank(recorder):
    tracker, sent, scheduled = recorder
    assert tracker.state is ChatState.BLANK
    assert sent == []
    assert scheduled == []


def test_key_press_composes_and_schedules(recorder):
    tracker, sent, scheduled = recorder
    tracker.key_pressed()
    assert tracker.state is ChatState.COMPOSING
    assert sent == [ChatState.COMPOSING]
    assert scheduled == [PAUSE_TIME]
    assert PAUSE_TIME == 5.0


def test_repeated_key_presses_notify_once(recorder):
    tracker, sent, scheduled = recorder
    for _ in range(4):
        tracker.key_pressed()
    assert tracker.key_strokes == 4
    assert sent == [ChatState.COMPOSING]
    assert len(scheduled) == 1


def test_check_after_pause_with_text_pauses(recorder):
    tracker, sent, _ = recorder
    tracker.key_pressed()
    assert tracker.check(text_empty=False) is ChatState.PAUSED
    assert sent == [ChatState.COMPOSING, ChatState.PAUSED]


def test_check_after_pause_with_empty_text_activates(recorder):
    tracker, sent, _ = recorder
    tracker.key_pressed()
    assert tracker.check(text_empty=True) is ChatState.ACTIVE
    assert sent[-1] is ChatState.ACTIVE


def test_check_with_new_keystrokes_reschedules(recorder):
    tracker, sent, scheduled = recorder
    tracker.key_pressed()
    tracker.key_pressed()
    assert tracker.check(text_empty=False) is ChatState.COMPOSING
    assert len(scheduled) == 2
    assert sent == [ChatState.COMPOSING]
    assert tracker.check(text_empty=False) is ChatState.PAUSED


def test_same_state_is_not_sent_again(recorder):
    tracker, sent, _ = recorder
    assert tracker.set_state(ChatState.ACTIVE) is True
    assert tracker.set_state(ChatState.ACTIVE) is False
    assert sent == [ChatState.ACTIVE]


def test_paused_not_allowed_from_inactive(recorder):
    tracker, sent, _ = recorder
    tracker.set_state(ChatState.INACTIVE)
    assert tracker.set_state(ChatState.PAUSED) is False
    assert tracker.state is ChatState.INACTIVE
    assert sent == [ChatState.INACTIVE]


def test_disconnected_changes_state_without_sending():
    sent = []
    tracker = ChatStateTracker(notify=sent.append, connected=False)
    assert tracker.set_state(ChatState.ACTIVE) is False
    assert tracker.state is ChatState.ACTIVE
    assert sent == []


def test_blank_is_not_a_target_state(recorder):
    tracker, sent, _ = recorder
    tracker.set_state(ChatState.ACTIVE)
    assert tracker.set_state(ChatState.BLANK) is False
    assert tracker.state is ChatState.ACTIVE
    assert sent == [ChatState.ACTIVE]


def test_invalid_state_raises(recorder):
    tracker, _, _ = recorder
    with pytest.raises(ValueError):
        tracker.set_state("typing")


def test_custom_pause_time():
    scheduled = []
    tracker = ChatStateTracker(schedule=scheduled.append, pause_time=1.5)
    tracker.key_pressed()
    assert scheduled == [1.5]