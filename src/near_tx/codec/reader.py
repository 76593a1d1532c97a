"""
Binary Reader

Consumes the little-endian Borsh layout produced by BinaryWriter, left to
right, and fails with a typed DecodeError as soon as the input stops matching.
"""

import builtins
import struct
from typing import Callable, List, Optional, TypeVar

from ..runtime.errors import MalformedInput, TrailingBytes, TruncatedInput

T = TypeVar("T")


class BinaryReader:
    """
    Binary reader over an immutable byte buffer.

    The offset only moves forward; every read checks the remaining length
    before touching the buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = builtins.bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._off

    def _take(self, n: int, what: str) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise TruncatedInput(
                f"Need {n} bytes for {what} at offset {self._off}, only {self.remaining} left",
                details={"offset": self._off, "needed": n, "remaining": self.remaining},
            )
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> int:
        """Read unsigned 8-bit integer."""
        return self._take(1, "u8")[0]

    def u32le(self) -> int:
        """Read unsigned 32-bit integer in little-endian format."""
        return struct.unpack("<I", self._take(4, "u32"))[0]

    def u64le(self) -> int:
        """Read unsigned 64-bit integer in little-endian format."""
        return struct.unpack("<Q", self._take(8, "u64"))[0]

    def u128le(self) -> int:
        """Read unsigned 128-bit integer in little-endian format."""
        return int.from_bytes(self._take(16, "u128"), "little")

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length

        Raises:
            TruncatedInput: If fewer than n bytes remain
        """
        return self._take(n, f"[{n}]")

    def len_prefixed_bytes(self) -> builtins.bytes:
        """
        Read bytes with a u32 little-endian length prefix.

        Returns:
            Bytes with length read from the prefix
        """
        n = self.u32le()
        return self._take(n, "length-prefixed bytes")

    def string(self) -> str:
        """
        Read a length-prefixed UTF-8 string.

        Raises:
            MalformedInput: If the bytes are not valid UTF-8
        """
        start = self._off
        raw = self.len_prefixed_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInput(
                f"Invalid UTF-8 string at offset {start}", details={"offset": start}, cause=e
            )

    def option(self, read: Callable[[], T]) -> Optional[T]:
        """
        Read a presence flag and, when set, the value.

        Args:
            read: Reader callback for the present value

        Raises:
            MalformedInput: If the flag byte is neither 0 nor 1
        """
        start = self._off
        flag = self.u8()
        if flag == 0:
            return None
        if flag != 1:
            raise MalformedInput(
                f"Invalid option flag {flag} at offset {start}",
                details={"offset": start, "flag": flag},
            )
        return read()

    def sequence(self, read: Callable[[], T]) -> List[T]:
        """
        Read a u32 element count followed by each element.

        Args:
            read: Reader callback for a single element
        """
        n = self.u32le()
        return [read() for _ in range(n)]

    def ensure_consumed(self) -> None:
        """
        Check that the whole buffer has been read.

        Raises:
            TrailingBytes: If unread bytes remain
        """
        if not self.eof:
            raise TrailingBytes(
                f"{self.remaining} trailing bytes after offset {self._off}",
                details={"offset": self._off, "remaining": self.remaining},
            )
