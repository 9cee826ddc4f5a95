"""Statistical checks for generated IDs and the bit-saving codec."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

from puidkit.components.alphabet import AlphabetSpec
from puidkit.core.codec import slice_symbols
from puidkit.core.cursor import BitCursor
from puidkit.core.source import EntropySource


def symbol_histogram(ids: Iterable[str], alphabet: AlphabetSpec) -> np.ndarray:
    """Count occurrences of each alphabet index across ``ids``."""
    index = alphabet.index
    try:
        indices = np.fromiter(
            (index[symbol] for text in ids for symbol in text), dtype=np.int64
        )
    except KeyError as e:
        raise ValueError(f"Symbol {e.args[0]!r} is not in the alphabet") from e
    return np.bincount(indices, minlength=alphabet.n)


def chi_square_uniformity(counts: np.ndarray) -> float:
    """Pearson chi-square statistic of ``counts`` against a uniform distribution.

    With ``k`` bins the statistic has ``k - 1`` degrees of freedom; its mean
    under uniformity is ``k - 1``.
    """
    counts = np.asarray(counts, dtype=np.float64)
    if counts.ndim != 1 or counts.size < 2:
        raise ValueError(f"Expected 1-D counts with >= 2 bins, got shape {counts.shape}")
    total = counts.sum()
    if total <= 0:
        raise ValueError("Counts are empty")
    expected = total / counts.size
    return float(((counts - expected) ** 2 / expected).sum())


def naive_bits_per_symbol(alphabet: AlphabetSpec) -> float:
    """Expected bits per symbol when a rejected slice is discarded whole."""
    width = alphabet.bits_per_symbol
    return width * (1 << width) / alphabet.n


def expected_bits_per_symbol(alphabet: AlphabetSpec) -> float:
    """Expected bits per symbol under bit-saving, from the shift table."""
    return sum(alphabet.shift_table) / alphabet.n


def measure_bit_usage(
    alphabet: AlphabetSpec,
    n_symbols: int,
    source: EntropySource,
) -> dict[str, Any]:
    """Slice ``n_symbols`` symbols from ``source`` and report the bits spent.

    Returns:
        Dictionary with bits_consumed, bits_discarded, bits_per_symbol and ete
    """
    if n_symbols < 1:
        raise ValueError(f"n_symbols must be >= 1, got {n_symbols}")
    cursor = BitCursor()
    slice_symbols(alphabet, n_symbols, source, cursor)
    per_symbol = cursor.consumed / n_symbols
    return {
        "bits_consumed": cursor.consumed,
        "bits_discarded": cursor.discarded,
        "bits_per_symbol": per_symbol,
        "ete": alphabet.entropy_bits_per_char / per_symbol,
    }


def waste_reduction(alphabet: AlphabetSpec, bits_per_symbol: float | None = None) -> float:
    """Fraction of whole-slice rejection waste avoided by bit-saving.

    Waste is bits spent per symbol beyond ``log2(n)``. For the 10-symbol
    ``decimal`` alphabet this is about 0.32.

    Args:
        alphabet: Alphabet to evaluate
        bits_per_symbol: Measured bits per symbol; the expected value if None
    """
    if alphabet.is_pow2:
        return 0.0
    if bits_per_symbol is None:
        bits_per_symbol = expected_bits_per_symbol(alphabet)
    exact = alphabet.entropy_bits_per_char
    naive_waste = naive_bits_per_symbol(alphabet) - exact
    return 1.0 - (bits_per_symbol - exact) / naive_waste
