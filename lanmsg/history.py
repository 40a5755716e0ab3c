"""Message history database stored in a single data stream file.

The file starts with a header holding a marker, a version, the header size,
the number of conversations and the offsets of the first and last index
records. Each saved conversation adds a data record (the UTF-8 text) and an
index record (next index offset, data offset, timestamp and user name); the
index records form a singly linked list in order of saving.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import BinaryIO

from .datastream import DataReader, DataWriter

HISTORY_FILENAME = "messenger.db"
HEADER_SIZE = 28
VERSION = 1
DB_MARKER = "DB"
INDEX_MARKER = "ID"
DATA_MARKER = "DT"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


class HistoryError(Exception):
    """Raised when the history file is not a valid history database."""


@dataclass
class DBHeader:
    """Header at the start of the history file."""

    marker: str = DB_MARKER
    version: int = VERSION
    header_size: int = HEADER_SIZE
    count: int = 0
    first: int = 0
    last: int = 0


@dataclass(frozen=True)
class MsgInfo:
    """One saved conversation: who it was with, when, and where its data is."""

    name: str
    date: datetime
    offset: int


def _to_msecs(date: datetime) -> int:
    if date.tzinfo is None:
        date = date.astimezone()
    return (date - _EPOCH) // _MILLISECOND


def _from_msecs(msecs: int) -> datetime:
    return (_EPOCH + timedelta(milliseconds=msecs)).astimezone()


def _write_header(stream: BinaryIO, header: DBHeader) -> None:
    stream.seek(0)
    writer = DataWriter(stream)
    writer.write_qstring(header.marker)
    writer.write_int32(header.version)
    writer.write_int16(header.header_size)
    writer.write_int32(header.count)
    writer.write_int64(header.first)
    writer.write_int64(header.last)


def _read_header(stream: BinaryIO) -> DBHeader:
    stream.seek(0)
    reader = DataReader(stream)
    try:
        header = DBHeader(
            marker=reader.read_qstring() or "",
            version=reader.read_int32(),
            header_size=reader.read_int16(),
            count=reader.read_int32(),
            first=reader.read_int64(),
            last=reader.read_int64(),
        )
    except (EOFError, ValueError) as exc:
        raise HistoryError("history file header is damaged") from exc
    if header.marker != DB_MARKER:
        raise HistoryError("file is not a history database")
    return header


class History:
    """Reads and writes the conversation history file at path."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _create(self) -> None:
        with open(self.path, "wb") as stream:
            _write_header(stream, DBHeader())

    def save(self, user: str, date: datetime, data: str) -> None:
        """Append a conversation with user at date holding data."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._create()

        with open(self.path, "r+b") as stream:
            header = _read_header(stream)
            writer = DataWriter(stream)

            stream.seek(0, os.SEEK_END)
            data_pos = stream.tell()
            encoded = data.encode("utf-8")
            writer.write_qstring(DATA_MARKER)
            writer.write_int32(len(encoded))
            writer.write_bytes(encoded)

            stream.seek(0, os.SEEK_END)
            new_index = stream.tell()
            writer.write_qstring(INDEX_MARKER)
            writer.write_int64(0)
            writer.write_int64(data_pos)
            writer.write_int64(_to_msecs(date))
            writer.write_qstring(user)

            if header.last:
                stream.seek(header.last)
                writer.write_qstring(INDEX_MARKER)
                writer.write_int64(new_index)

            header.count += 1
            header.first = header.first or new_index
            header.last = new_index
            _write_header(stream, header)

    def get_list(self) -> list[MsgInfo]:
        """Return every saved conversation in the order it was saved."""
        if not self.path.exists():
            return []

        entries: list[MsgInfo] = []
        with open(self.path, "rb") as stream:
            header = _read_header(stream)
            reader = DataReader(stream)
            seen: set[int] = set()
            position = header.first
            while position:
                if position in seen:
                    raise HistoryError("history index contains a cycle")
                seen.add(position)
                stream.seek(position)
                try:
                    reader.read_qstring()
                    position = reader.read_int64()
                    offset = reader.read_int64()
                    msecs = reader.read_int64()
                    name = reader.read_qstring() or ""
                except (EOFError, ValueError) as exc:
                    raise HistoryError("history index is damaged") from exc
                entries.append(MsgInfo(name, _from_msecs(msecs), offset))
        return entries

    def get_message(self, offset: int) -> str:
        """Return the conversation text stored at offset."""
        if not self.path.exists():
            return ""

        with open(self.path, "rb") as stream:
            stream.seek(offset)
            reader = DataReader(stream)
            try:
                reader.read_qstring()
                reader.read_int32()
                buffer = reader.read_bytes()
            except (EOFError, ValueError) as exc:
                raise HistoryError(f"no message record at offset {offset}") from exc
        return (buffer or b"").decode("utf-8", errors="replace")

    def clear(self) -> None:
        """Delete the whole history."""
        self.path.unlink(missing_ok=True)