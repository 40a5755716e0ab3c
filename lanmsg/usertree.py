"""Two-level tree of groups and users with linked check boxes.

Checking or unchecking a group sets every user in it to the same state.
Checking or unchecking a user checks its group when all of the group's
users are checked and unchecks it otherwise; that change of the group does
not spread back to the users.
"""

from __future__ import annotations

from typing import Iterable, Iterator


class CheckableUserTree:
    """Groups of users, each group and user carrying a checked state."""

    def __init__(self) -> None:
        self._groups: dict[str, list[str]] = {}
        self._group_checked: dict[str, bool] = {}
        self._user_checked: dict[str, bool] = {}
        self._user_group: dict[str, str] = {}

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def users(self, group_id: str) -> list[str]:
        """Return the users of group_id in the order they were added."""
        try:
            return list(self._groups[group_id])
        except KeyError:
            raise KeyError(f"unknown group {group_id!r}") from None

    def add_group(self, group_id: str, user_ids: Iterable[str]) -> None:
        """Add a group holding user_ids; the group and its users start unchecked."""
        if group_id in self._groups:
            raise ValueError(f"group {group_id!r} already exists")
        members = list(user_ids)
        if len(set(members)) != len(members):
            raise ValueError(f"group {group_id!r} lists a user more than once")
        for user_id in members:
            if user_id in self._user_group:
                raise ValueError(f"user {user_id!r} is already in a group")
        self._groups[group_id] = members
        self._group_checked[group_id] = False
        for user_id in members:
            self._user_group[user_id] = group_id
            self._user_checked[user_id] = False

    def clear(self) -> None:
        """Remove every group and user."""
        self._groups.clear()
        self._group_checked.clear()
        self._user_checked.clear()
        self._user_group.clear()

    def set_group_checked(self, group_id: str, checked: bool) -> None:
        """Set a group's state and the state of all of its users."""
        if group_id not in self._groups:
            raise KeyError(f"unknown group {group_id!r}")
        checked = bool(checked)
        if self._group_checked[group_id] == checked:
            return
        self._group_checked[group_id] = checked
        for user_id in self._groups[group_id]:
            self._user_checked[user_id] = checked

    def set_user_checked(self, user_id: str, checked: bool) -> None:
        """Set a user's state and bring its group's state in line with its users."""
        if user_id not in self._user_group:
            raise KeyError(f"unknown user {user_id!r}")
        checked = bool(checked)
        if self._user_checked[user_id] == checked:
            return
        self._user_checked[user_id] = checked
        group_id = self._user_group[user_id]
        self._group_checked[group_id] = all(
            self._user_checked[member] for member in self._groups[group_id]
        )

    def is_group_checked(self, group_id: str) -> bool:
        try:
            return self._group_checked[group_id]
        except KeyError:
            raise KeyError(f"unknown group {group_id!r}") from None

    def is_user_checked(self, user_id: str) -> bool:
        try:
            return self._user_checked[user_id]
        except KeyError:
            raise KeyError(f"unknown user {user_id!r}") from None

    def select_all(self) -> None:
        """Check every group and so every user."""
        for group_id in self._groups:
            self.set_group_checked(group_id, True)

    def select_none(self) -> None:
        """Uncheck every group and so every user."""
        for group_id in self._groups:
            self.set_group_checked(group_id, False)

    def checked_users(self) -> list[str]:
        """Return the checked users, group by group, in the order they were added."""
        return [
            user_id
            for members in self._groups.values()
            for user_id in members
            if self._user_checked[user_id]
        ]