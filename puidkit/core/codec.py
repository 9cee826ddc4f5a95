"""Bit-slice codec.

Turns a stream of random bytes into alphabet symbols using
``bits_per_symbol`` bits per attempt, and turns symbols of a power-of-two
alphabet back into bytes.

Slicing with bit-saving:
  - read the top ``b`` bits of the cursor as candidate ``v``
  - ``v < n``: emit ``symbols[v]`` and consume ``b`` bits
  - ``v >= n``: consume only ``shift_table[v]`` bits, the shortest prefix
    that already rules ``v`` out; the rest of the slice is reused as the
    high bits of the next attempt

Every attempt consumes at least one bit, so a call always terminates once
the source has supplied enough bytes.

Example:
    >>> from puidkit.core.chars import preset
    >>> from puidkit.core.source import FixedBytes
    >>> slice_symbols(preset("hex"), 4, FixedBytes(b"\\x9f\\x3a"))
    '9f3a'
"""

from __future__ import annotations

from typing import Callable

from puidkit.components.alphabet import AlphabetSpec
from puidkit.core.cursor import BitCursor
from puidkit.core.errors import NonPowerOfTwoAlphabet, UnknownSymbol

Fetch = Callable[[int], bytes]


def bytes_needed(n_symbols: int, width: int, held: int = 0) -> int:
    """Whole bytes required to cover ``n_symbols`` slices beyond ``held`` bits."""
    return max(0, -(-(n_symbols * width - held) // 8))


def slice_symbols(
    alphabet: AlphabetSpec,
    count: int,
    fetch: Fetch,
    cursor: BitCursor | None = None,
) -> str:
    """Emit ``count`` symbols sliced from bytes supplied by ``fetch``.

    Args:
        alphabet: Target alphabet
        count: Number of symbols to emit
        fetch: Called as ``fetch(n)`` whenever the cursor runs short; must
            return bytes (length is not checked here)
        cursor: Optional cursor to start from and leave residual bits in

    Returns:
        String of ``count`` symbols

    Raises:
        ValueError: If ``fetch`` returns no bytes while more are needed
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if cursor is None:
        cursor = BitCursor()

    width = alphabet.bits_per_symbol
    n = alphabet.n
    symbols = alphabet.symbols
    shifts = alphabet.shift_table
    out: list[str] = []
    # Fetched bytes enter the cursor one at a time so the residual buffer
    # stays a few bytes wide however many symbols are requested
    pending = b""
    pos = 0

    while len(out) < count:
        while cursor.count < width:
            if pos == len(pending):
                wanted = max(1, bytes_needed(count - len(out), width, cursor.count))
                pending = fetch(wanted)
                pos = 0
                if not pending:
                    raise ValueError("Byte source exhausted")
            cursor.append(pending[pos], 8)
            pos += 1
        value = cursor.peek(width)
        if value < n:
            out.append(symbols[value])
            cursor.skip(width)
        else:
            cursor.skip(shifts[value], rejected=True)

    return "".join(out)


def _require_pow2(alphabet: AlphabetSpec, operation: str) -> None:
    if not alphabet.is_pow2:
        raise NonPowerOfTwoAlphabet(
            f"Cannot {operation} with a {alphabet.n}-symbol alphabet; "
            f"symbol count must be a power of two"
        )


def encode(alphabet: AlphabetSpec, data: bytes) -> str:
    """Encode bytes as symbols of a power-of-two alphabet.

    A final partial slice is padded with zero bits, so the output has
    ``ceil(8 * len(data) / bits_per_symbol)`` symbols.

    Raises:
        NonPowerOfTwoAlphabet: If the alphabet size is not a power of two
    """
    _require_pow2(alphabet, "encode")
    width = alphabet.bits_per_symbol
    symbols = alphabet.symbols
    cursor = BitCursor()
    out = []

    for byte in bytes(data):
        cursor.append(byte, 8)
        while cursor.count >= width:
            out.append(symbols[cursor.take(width)])

    if cursor.count:
        cursor.pad(width - cursor.count)
        out.append(symbols[cursor.take(width)])
    return "".join(out)


def decode(alphabet: AlphabetSpec, text: str) -> bytes:
    """Decode symbols of a power-of-two alphabet back to bytes.

    Bits that do not complete a final byte are dropped.

    Raises:
        NonPowerOfTwoAlphabet: If the alphabet size is not a power of two
        UnknownSymbol: If ``text`` contains a character outside the alphabet
    """
    _require_pow2(alphabet, "decode")
    width = alphabet.bits_per_symbol
    index = alphabet.index
    cursor = BitCursor()
    out = bytearray()

    for position, symbol in enumerate(text):
        try:
            cursor.append(index[symbol], width)
        except KeyError:
            raise UnknownSymbol(symbol, position) from None
        while cursor.count >= 8:
            out.append(cursor.take(8))

    return bytes(out)
