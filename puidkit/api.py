"""High-level API for one-off ID generation and encoding.

Each call builds a throwaway ``Puid``. Code that generates many IDs should
construct a ``Puid`` once and call ``generate()`` on it.
"""

from __future__ import annotations

from puidkit.components.info import PuidInfo
from puidkit.core.chars import CharsLike
from puidkit.core.generator import Puid
from puidkit.core.source import EntropySource, default_source


def generate(
    chars: CharsLike = "safe64",
    bits: float | None = None,
    total: float | None = None,
    risk: float | None = None,
    rand_bytes: EntropySource = default_source,
) -> str:
    """Generate one random ID.

    Args:
        chars: Preset name or custom symbols (default: 'safe64')
        bits: Entropy bits (default: 128 when total/risk are not given)
        total: Number of IDs that may be generated
        risk: Acceptable collision risk as "1-in-risk"
        rand_bytes: Entropy source (default: secrets.token_bytes)

    Returns:
        Random ID string

    Example:
        >>> len(generate(chars="hex", bits=64))
        16
    """
    return Puid(chars=chars, bits=bits, total=total, risk=risk, rand_bytes=rand_bytes).generate()


def encode(data: bytes, chars: CharsLike = "safe64") -> str:
    """Encode bytes with a power-of-two alphabet.

    Raises:
        NonPowerOfTwoAlphabet: If the alphabet size is not a power of two
    """
    return Puid(chars=chars).encode(data)


def decode(text: str, chars: CharsLike = "safe64") -> bytes:
    """Decode a string produced by ``encode`` with the same alphabet.

    Raises:
        NonPowerOfTwoAlphabet: If the alphabet size is not a power of two
        UnknownSymbol: If ``text`` has characters outside the alphabet
    """
    return Puid(chars=chars).decode(text)


def info(
    chars: CharsLike = "safe64",
    bits: float | None = None,
    total: float | None = None,
    risk: float | None = None,
    rand_bytes: EntropySource = default_source,
) -> PuidInfo:
    """Describe the generator these arguments would configure."""
    return Puid(chars=chars, bits=bits, total=total, risk=risk, rand_bytes=rand_bytes).info()
