"""File transfer list: one view per transfer, with persistence."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from .datastream import DataReader, DataWriter


class TransferMode(IntEnum):
    SEND = 0
    RECEIVE = 1


class TransferState(IntEnum):
    WAIT = 0
    CONFIRM = 1
    SEND = 2
    RECEIVE = 3
    COMPLETE = 4
    DECLINE = 5
    CANCEL = 6
    ABORT = 7


@dataclass
class FileView:
    """Display state of one file transfer. icon holds raw image data."""

    id: str = ""
    type: int = 0
    file_path: str = ""
    file_name: str = ""
    file_size: int = 0
    user_id: str = ""
    user_name: str = ""
    position: int = 0
    speed: int = 0
    file_display: str = ""
    size_display: str = ""
    pos_display: str = "0 bytes"
    speed_display: str = "0 bytes/sec"
    time_display: str = "Calculating time"
    mode: TransferMode = TransferMode.SEND
    state: TransferState = TransferState.WAIT
    icon: bytes = b""
    start_time: datetime | None = None

    def state_text(self) -> str:
        """Text describing the transfer's state."""
        if self.state in (TransferState.SEND, TransferState.RECEIVE):
            return (
                f"{self.time_display} left - {self.pos_display} of "
                f"{self.size_display} ({self.speed_display})"
            )
        return {
            TransferState.COMPLETE: "Completed",
            TransferState.CANCEL: "Canceled",
            TransferState.ABORT: "Interrupted",
        }.get(self.state, "")

    def progress_angle(self) -> int:
        """Degrees of a full circle that the transferred part covers."""
        if self.file_size <= 0:
            return 0
        return int(self.position / self.file_size * 360)


def write_file_view(writer: DataWriter, view: FileView) -> None:
    """Write the persistent fields of view."""
    writer.write_qstring(view.id)
    writer.write_int32(int(view.mode))
    writer.write_qstring(view.file_path)
    writer.write_qstring(view.user_name)
    writer.write_qstring(view.file_display)
    writer.write_int32(int(view.state))
    writer.write_bytes(view.icon)


def read_file_view(reader: DataReader) -> FileView:
    """Read a view written by write_file_view."""
    file_id = reader.read_qstring() or ""
    mode = TransferMode(reader.read_int32())
    file_path = reader.read_qstring() or ""
    user_name = reader.read_qstring() or ""
    file_display = reader.read_qstring() or ""
    state = TransferState(reader.read_int32())
    icon = reader.read_bytes() or b""
    return FileView(
        id=file_id,
        mode=mode,
        file_path=file_path,
        user_name=user_name,
        file_display=file_display,
        state=state,
        icon=icon,
    )


class FileModel:
    """Ordered list of file transfer views."""

    def __init__(self) -> None:
        self._views: list[FileView] = []

    def __len__(self) -> int:
        return len(self._views)

    def __iter__(self) -> Iterator[FileView]:
        return iter(self._views)

    def row_count(self) -> int:
        return len(self._views)

    def insert_item(self, position: int, view: FileView) -> None:
        """Insert a copy of view at position."""
        self._views.insert(position, dataclasses.replace(view))

    def remove_item(self, position: int) -> None:
        del self._views[position]

    def item(self, position: int) -> FileView | None:
        """Return the view at position, or None when out of range."""
        if 0 <= position < len(self._views):
            return self._views[position]
        return None

    def find(self, file_id: str, mode: TransferMode | None = None) -> FileView | None:
        """Return the first view with file_id, and mode if one is given."""
        index = self.item_index(file_id, mode)
        return None if index is None else self._views[index]

    def item_index(self, file_id: str, mode: TransferMode | None = None) -> int | None:
        """Return the position of the first matching view, or None."""
        for index, view in enumerate(self._views):
            if view.id == file_id and (mode is None or view.mode == mode):
                return index
        return None

    def load_data(self, path: str | os.PathLike[str]) -> None:
        """Replace the list with the views saved at path, if the file exists."""
        self._views.clear()
        try:
            stream = open(path, "rb")
        except OSError:
            return
        with stream:
            reader = DataReader(stream)
            count = reader.read_int32()
            self._views = [read_file_view(reader) for _ in range(count)]

    def save_data(self, path: str | os.PathLike[str]) -> None:
        """Save the views to path; nothing is written when the list is empty."""
        if not self._views:
            return
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as stream:
            writer = DataWriter(stream)
            writer.write_int32(len(self._views))
            for view in self._views:
                write_file_view(writer, view)