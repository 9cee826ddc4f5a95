"""Entropy sources.

An entropy source is any callable ``source(count) -> bytes`` that returns
exactly ``count`` random bytes. The generator takes one as a constructor
argument; nothing in puidkit holds a process-wide source.
"""

from __future__ import annotations

import secrets
from typing import Any, Callable

import numpy as np

EntropySource = Callable[[int], bytes]

default_source: EntropySource = secrets.token_bytes


def prng_source(seed: int | None = None) -> EntropySource:
    """Return a reproducible pseudo-random source backed by numpy's PCG64.

    Not suitable for security-sensitive identifiers and not safe to share
    between threads.

    Args:
        seed: Seed for ``numpy.random.default_rng``

    Example:
        >>> source = prng_source(seed=7)
        >>> len(source(16))
        16
    """
    rng = np.random.default_rng(seed)

    def source(count: int) -> bytes:
        return rng.bytes(count)

    source.__qualname__ = f"prng_source(seed={seed})"
    return source


class FixedBytes:
    """Deterministic source handing out successive slices of a fixed buffer.

    Once the buffer is exhausted, calls return short (possibly empty) reads.

    Attributes:
        data: Full byte buffer
        offset: Index of the next byte to hand out
    """

    def __init__(self, data: bytes | bytearray | list[int]) -> None:
        self.data = bytes(data)
        self.offset = 0

    def __call__(self, count: int) -> bytes:
        chunk = self.data[self.offset : self.offset + count]
        self.offset += len(chunk)
        return chunk

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def reset(self) -> None:
        self.offset = 0

    def __repr__(self) -> str:
        return f"FixedBytes(len={len(self.data)}, offset={self.offset})"


def describe_source(source: Any) -> str:
    """Readable label for an entropy source, e.g. ``secrets.token_bytes``."""
    if isinstance(source, FixedBytes):
        return repr(source)
    module = getattr(source, "__module__", None)
    name = getattr(source, "__qualname__", None) or getattr(source, "__name__", None)
    if name is None:
        return type(source).__qualname__
    return f"{module}.{name}" if module else name
