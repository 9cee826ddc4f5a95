"""Bit cursor: the working state of a single encode or decode call.

The cursor is a residual bit buffer held in a Python integer. Bytes are
appended most-significant-bit first at the low end, and slices are read from
the high end, so the buffer behaves like a FIFO of bits.

Example:
    >>> cursor = BitCursor()
    >>> cursor.push(b"\\x9f")
    >>> cursor.peek(4)
    9
    >>> cursor.skip(4)
    >>> cursor.peek(4), cursor.count
    (15, 4)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BitCursor:
    """Residual bits plus accounting counters.

    Not shared between calls; each encode, decode or generate call owns one.

    Attributes:
        value: Residual bits, the oldest bit being the most significant
        count: Number of valid bits in ``value``
        consumed: Total bits removed through ``skip``
        discarded: Bits removed as part of a rejected slice
    """

    value: int = 0
    count: int = 0
    consumed: int = 0
    discarded: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.value < 0 or self.value >> self.count:
            raise ValueError(f"value does not fit in {self.count} bits")

    def push(self, data: bytes) -> None:
        """Append whole bytes below the residual bits."""
        if not data:
            return
        self.value = (self.value << (8 * len(data))) | int.from_bytes(data, "big")
        self.count += 8 * len(data)

    def pad(self, width: int) -> None:
        """Append ``width`` zero bits."""
        self.value <<= width
        self.count += width

    def append(self, bits: int, width: int) -> None:
        """Append the low ``width`` bits of ``bits``."""
        self.value = (self.value << width) | (bits & ((1 << width) - 1))
        self.count += width

    def peek(self, width: int) -> int:
        """Return the top ``width`` bits without consuming them."""
        if width > self.count:
            raise ValueError(f"Cannot peek {width} bits, only {self.count} held")
        return self.value >> (self.count - width)

    def skip(self, width: int, rejected: bool = False) -> None:
        """Drop the top ``width`` bits."""
        if width > self.count:
            raise ValueError(f"Cannot skip {width} bits, only {self.count} held")
        self.count -= width
        self.value &= (1 << self.count) - 1
        self.consumed += width
        if rejected:
            self.discarded += width

    def take(self, width: int) -> int:
        """Return and drop the top ``width`` bits."""
        bits = self.peek(width)
        self.skip(width)
        return bits
