"""Big-endian binary serialisation compatible with the Qt data stream format.

Strings are written as a 32-bit byte count followed by UTF-16BE code units;
a null string is written as the count 0xFFFFFFFF. Byte arrays use the same
length prefix followed by the raw bytes. Integers are signed and big-endian.
"""

from __future__ import annotations

import io
from typing import BinaryIO

_NULL_LENGTH = 0xFFFFFFFF


class DataWriter:
    """Writes values to a binary stream in data stream format."""

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self.stream: BinaryIO = stream if stream is not None else io.BytesIO()

    def getvalue(self) -> bytes:
        """Return everything written so far when the stream is in memory."""
        if not isinstance(self.stream, io.BytesIO):
            raise TypeError("getvalue() needs an in-memory stream")
        return self.stream.getvalue()

    def _write_int(self, value: int, size: int) -> None:
        self.stream.write(int(value).to_bytes(size, "big", signed=True))

    def _write_length(self, length: int) -> None:
        if length >= _NULL_LENGTH:
            raise OverflowError("value too long for a 32-bit length prefix")
        self.stream.write(length.to_bytes(4, "big"))

    def write_qstring(self, value: str | None) -> None:
        """Write a string; None is written as a null string."""
        if value is None:
            self.stream.write(_NULL_LENGTH.to_bytes(4, "big"))
            return
        encoded = value.encode("utf-16-be", errors="surrogatepass")
        self._write_length(len(encoded))
        self.stream.write(encoded)

    def write_int16(self, value: int) -> None:
        self._write_int(value, 2)

    def write_int32(self, value: int) -> None:
        self._write_int(value, 4)

    def write_int64(self, value: int) -> None:
        self._write_int(value, 8)

    def write_bytes(self, data: bytes | None) -> None:
        """Write a byte array; None is written as a null array."""
        if data is None:
            self.stream.write(_NULL_LENGTH.to_bytes(4, "big"))
            return
        self._write_length(len(data))
        self.stream.write(bytes(data))


class DataReader:
    """Reads values written by DataWriter from bytes or a binary stream."""

    def __init__(self, source: bytes | bytearray | BinaryIO) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self.stream: BinaryIO = io.BytesIO(bytes(source))
        else:
            self.stream = source

    def _read_exact(self, size: int) -> bytes:
        data = self.stream.read(size)
        if data is None or len(data) != size:
            raise EOFError(f"expected {size} bytes, stream ended early")
        return data

    def _read_int(self, size: int) -> int:
        return int.from_bytes(self._read_exact(size), "big", signed=True)

    def _read_length(self) -> int | None:
        length = int.from_bytes(self._read_exact(4), "big")
        return None if length == _NULL_LENGTH else length

    def read_qstring(self) -> str | None:
        """Read a string; a null string comes back as None."""
        length = self._read_length()
        if length is None:
            return None
        if length % 2:
            raise ValueError("string byte count must be even")
        return self._read_exact(length).decode("utf-16-be", errors="surrogatepass")

    def read_int16(self) -> int:
        return self._read_int(2)

    def read_int32(self) -> int:
        return self._read_int(4)

    def read_int64(self) -> int:
        return self._read_int(8)

    def read_bytes(self) -> bytes | None:
        """Read a byte array; a null array comes back as None."""
        length = self._read_length()
        if length is None:
            return None
        return self._read_exact(length)