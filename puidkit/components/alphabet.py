"""Alphabet value type shared by the codec and the generator.

An ``AlphabetSpec`` is validated once on construction and is immutable
afterwards, so a single instance can be shared across threads.

Example:
    >>> spec = AlphabetSpec(symbols=tuple("0123456789"), name="decimal")
    >>> spec.bits_per_symbol
    4
    >>> spec.shift_table[9], spec.shift_table[10], spec.shift_table[12]
    (4, 3, 2)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from puidkit.core.entropy import slice_width
from puidkit.core.errors import (
    DuplicateCharacter,
    EmptyAlphabet,
    InvalidAlphabet,
    InvalidCharacter,
    TooManySymbols,
)

MAX_SYMBOLS = 256
CUSTOM = "custom"


def rejection_shifts(n_chars: int, width: int) -> tuple[int, ...]:
    """Bits to consume for every ``width``-bit candidate value.

    In-range candidates (``v < n_chars``) consume the full slice. An
    out-of-range candidate consumes only the shortest prefix ``k`` whose
    every completion is out of range, i.e. the smallest ``k`` with
    ``(v >> (width - k)) << (width - k) >= n_chars``. The remaining
    ``width - k`` bits were never looked at by the rejection and are reused.

    Args:
        n_chars: Alphabet size
        width: Slice width, ``ceil(log2(n_chars))``

    Returns:
        Tuple of length ``2**width`` indexed by candidate value
    """
    shifts: list[int] = []
    for value in range(1 << width):
        if value < n_chars:
            shifts.append(width)
            continue
        for k in range(1, width + 1):
            low = width - k
            if (value >> low) << low >= n_chars:
                shifts.append(k)
                break
    return tuple(shifts)


@dataclass(frozen=True)
class AlphabetSpec:
    """Validated, immutable symbol set.

    Attributes:
        symbols: Ordered unique single-character symbols (2..256)
        name: Preset name, or ``"custom"``
        n: Symbol count
        bits_per_symbol: Slice width, ``ceil(log2(n))``
        entropy_bits_per_char: Exact entropy per symbol, ``log2(n)``
        ere: Representation efficiency, ``log2(n) / bits_per_symbol``
        ete: Transform efficiency, ``log2(n)`` over expected bits consumed per symbol
        shift_table: Bits consumed per candidate slice value
        index: Symbol to index lookup
    """

    symbols: tuple[str, ...]
    name: str = CUSTOM
    n: int = field(init=False)
    bits_per_symbol: int = field(init=False)
    entropy_bits_per_char: float = field(init=False, repr=False)
    ere: float = field(init=False, repr=False)
    ete: float = field(init=False, repr=False)
    shift_table: tuple[int, ...] = field(init=False, repr=False)
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate symbols and derive slicing parameters."""
        symbols = tuple(self.symbols)
        if not symbols:
            raise EmptyAlphabet("Alphabet must contain at least one symbol")
        if len(symbols) > MAX_SYMBOLS:
            raise TooManySymbols(
                f"Alphabet has {len(symbols)} symbols, maximum is {MAX_SYMBOLS}"
            )

        index: dict[str, int] = {}
        for position, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidCharacter(
                    f"Symbol at position {position} must be a single character, got {symbol!r}"
                )
            if symbol.isspace() or not symbol.isprintable():
                raise InvalidCharacter(
                    f"Symbol at position {position} is whitespace or non-printable: {symbol!r}"
                )
            if symbol in index:
                raise DuplicateCharacter(symbol)
            index[symbol] = position

        if len(symbols) < 2:
            raise InvalidAlphabet("Alphabet must contain at least two symbols")

        n = len(symbols)
        width = slice_width(n)
        shifts = rejection_shifts(n, width)
        exact = math.log2(n)

        # Frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "bits_per_symbol", width)
        object.__setattr__(self, "entropy_bits_per_char", exact)
        object.__setattr__(self, "ere", exact / width)
        object.__setattr__(self, "ete", n * exact / sum(shifts))
        object.__setattr__(self, "shift_table", shifts)
        object.__setattr__(self, "index", MappingProxyType(index))

    @property
    def is_pow2(self) -> bool:
        """True if the symbol count is an exact power of two."""
        return self.n & (self.n - 1) == 0

    @property
    def characters(self) -> str:
        """Symbols joined into a single string."""
        return "".join(self.symbols)

    def __len__(self) -> int:
        return self.n
