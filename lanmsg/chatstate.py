"""Typing-state tracking for a conversation.

The state moves to composing on each key press and is checked again after a
pause. If no key was pressed since the last look it becomes paused, or active
when the message box is empty. Every state change is sent to the peers while
connected.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

PAUSE_TIME = 5.0


class ChatState(Enum):
    BLANK = "blank"
    ACTIVE = "active"
    COMPOSING = "composing"
    PAUSED = "paused"
    INACTIVE = "inactive"


class ChatStateTracker:
    """Follows key presses and reports changes of the local chat state.

    notify is called with the new state whenever it should be sent to peers.
    schedule is called with a delay in seconds whenever check() should be
    called again once that delay has passed.
    """

    def __init__(
        self,
        notify: Callable[[ChatState], None] | None = None,
        schedule: Callable[[float], None] | None = None,
        connected: bool = True,
        pause_time: float = PAUSE_TIME,
    ) -> None:
        self.notify = notify
        self.schedule = schedule
        self.connected = connected
        self.pause_time = pause_time
        self.state = ChatState.BLANK
        self.key_strokes = 0
        self._snap_key_strokes = 0

    def _schedule_check(self) -> None:
        if self.schedule is not None:
            self.schedule(self.pause_time)

    def set_state(self, state: ChatState) -> bool:
        """Move to state; return True when the change was sent to the peers."""
        state = ChatState(state)
        if state is self.state:
            return False

        if state in (ChatState.ACTIVE, ChatState.INACTIVE):
            self.state = state
        elif state is ChatState.COMPOSING:
            self.state = state
            self._snap_key_strokes = self.key_strokes
            self._schedule_check()
        elif state is ChatState.PAUSED:
            if self.state is ChatState.INACTIVE:
                return False
            self.state = state
        else:
            return False

        if not self.connected:
            return False
        if self.notify is not None:
            self.notify(self.state)
        return True

    def key_pressed(self) -> None:
        """Record a key press in the message box."""
        self.key_strokes += 1
        self.set_state(ChatState.COMPOSING)

    def check(self, text_empty: bool) -> ChatState:
        """Re-examine the state after a pause and return it."""
        if self.key_strokes > self._snap_key_strokes:
            self._snap_key_strokes = self.key_strokes
            self._schedule_check()
            return self.state
        self.set_state(ChatState.ACTIVE if text_empty else ChatState.PAUSED)
        return self.state