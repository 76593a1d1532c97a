"""
Binary Writer

Implements the little-endian Borsh layout used on the wire: fixed-width
unsigned integers, u32 length prefixes for strings and sequences, a one byte
presence flag for optionals and raw fixed-size byte arrays.
"""

import builtins
import struct
from typing import Callable, Iterable, Optional, TypeVar

from ..runtime.errors import ValueOutOfRange

T = TypeVar("T")

U8_MAX = 0xFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF
U128_MAX = (1 << 128) - 1


def _check_range(v: int, limit: int, width: str) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueOutOfRange(
            f"{width} value must be an integer, got {type(v).__name__}",
            details={"width": width},
        )
    if v < 0 or v > limit:
        raise ValueOutOfRange(
            f"Value {v} does not fit in {width}",
            details={"width": width, "value": str(v)},
        )


class BinaryWriter:
    """
    Binary writer accumulating the canonical encoding of an entity.

    Every primitive is range-checked before it is written, so a writer never
    silently truncates a caller's value.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)

        Raises:
            ValueOutOfRange: If the value does not fit in 8 bits
        """
        _check_range(v, U8_MAX, "u8")
        self._bb.append(v)

    def u32le(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        _check_range(v, U32_MAX, "u32")
        self._bb.extend(struct.pack('<I', v))

    def u64le(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        _check_range(v, U64_MAX, "u64")
        self._bb.extend(struct.pack('<Q', v))

    def u128le(self, v: int) -> None:
        """
        Write unsigned 128-bit integer in little-endian format.

        Args:
            v: Integer value to write as 128-bit little-endian
        """
        _check_range(v, U128_MAX, "u128")
        self._bb.extend(v.to_bytes(16, 'little'))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def fixed_bytes(self, v: builtins.bytes, size: int) -> None:
        """
        Write a fixed-size byte array.

        Args:
            v: Bytes to write, must be exactly ``size`` long
            size: Declared width of the array

        Raises:
            ValueOutOfRange: If the length differs from the declared width
        """
        if len(v) != size:
            raise ValueOutOfRange(
                f"Expected {size} bytes, got {len(v)}",
                details={"width": f"[{size}]"},
            )
        self._bb.extend(v)

    def len_prefixed_bytes(self, v: builtins.bytes) -> None:
        """
        Write bytes with a u32 little-endian length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.u32le(len(v))
        self.bytes(v)

    def string(self, s: str) -> None:
        """
        Write UTF-8 string with a u32 length prefix.

        Args:
            s: String to write
        """
        self.len_prefixed_bytes(s.encode('utf-8'))

    def option(self, v: Optional[T], write: Callable[[T], None]) -> None:
        """
        Write an optional value as a presence flag followed by the value.

        Args:
            v: Value or None
            write: Writer callback for the present value
        """
        if v is None:
            self.u8(0)
        else:
            self.u8(1)
            write(v)

    def sequence(self, items: Iterable[T], write: Callable[[T], None]) -> None:
        """
        Write a u32 element count followed by each element.

        Args:
            items: Elements to write
            write: Writer callback for a single element
        """
        items = list(items)
        self.u32le(len(items))
        for item in items:
            write(item)

    def to_bytes(self) -> builtins.bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return builtins.bytes(self._bb)
