"""Random IDs with explicit entropy.

This package generates random identifier strings from any alphabet of up to
256 symbols, using:
- Birthday-bound entropy math to turn "total IDs at 1-in-risk" into bits
- Bit slicing with bit-saving rejection to spend as few random bits as possible
- Pluggable entropy sources (CSPRNG by default, seeded PRNG, fixed bytes)

Quick Start:
    >>> from puidkit import Puid
    >>>
    >>> rand_id = Puid(total=1e6, risk=1e12)
    >>> rand_id.generate()  # doctest: +SKIP
    'R0yT0xeP0tL-mj'

Custom alphabets and deterministic sources:
    >>> from puidkit import FixedBytes
    >>>
    >>> dingosky = Puid(chars="dingosky", bits=12, rand_bytes=FixedBytes(b"\\x0f\\xf0"))
    >>> dingosky.generate()
    'dgyy'
"""

import logging

from puidkit.api import decode, encode, generate, info
from puidkit.components.alphabet import AlphabetSpec
from puidkit.components.entropy import EntropySpec
from puidkit.components.info import PuidInfo
from puidkit.core.chars import alphabet_for, preset_names
from puidkit.core.entropy import bits_for, risk_for, total_for
from puidkit.core.errors import (
    DuplicateCharacter,
    EmptyAlphabet,
    InsufficientEntropy,
    InvalidAlphabet,
    InvalidArgument,
    InvalidCharacter,
    NonPowerOfTwoAlphabet,
    PuidError,
    TooManySymbols,
    UnknownSymbol,
)
from puidkit.core.generator import Puid
from puidkit.core.source import FixedBytes, default_source, prng_source

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Puid",
    "generate",
    "encode",
    "decode",
    "info",
    "bits_for",
    "total_for",
    "risk_for",
    "alphabet_for",
    "preset_names",
    "AlphabetSpec",
    "EntropySpec",
    "PuidInfo",
    "FixedBytes",
    "default_source",
    "prng_source",
    "PuidError",
    "InvalidArgument",
    "InvalidAlphabet",
    "EmptyAlphabet",
    "DuplicateCharacter",
    "TooManySymbols",
    "InvalidCharacter",
    "UnknownSymbol",
    "NonPowerOfTwoAlphabet",
    "InsufficientEntropy",
]
