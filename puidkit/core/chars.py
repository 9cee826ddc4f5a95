"""Alphabet registry: predefined symbol sets and alphabet resolution.

The preset tables are fixed literals; other implementations of the same
scheme rely on them matching character for character.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import Union

from puidkit.components.alphabet import CUSTOM, AlphabetSpec

logger = logging.getLogger(__name__)

_ALPHA_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ALPHA_LOWER = "abcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"

PRESETS: MappingProxyType[str, str] = MappingProxyType(
    {
        "alpha": _ALPHA_UPPER + _ALPHA_LOWER,
        "alpha_lower": _ALPHA_LOWER,
        "alpha_upper": _ALPHA_UPPER,
        "alphanum": _ALPHA_UPPER + _ALPHA_LOWER + _DIGITS,
        "alphanum_lower": _ALPHA_LOWER + _DIGITS,
        "alphanum_upper": _ALPHA_UPPER + _DIGITS,
        "base16": "0123456789ABCDEF",
        "base32": "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
        "base32_hex": "0123456789abcdefghijklmnopqrstuv",
        "base32_hex_upper": "0123456789ABCDEFGHIJKLMNOPQRSTUV",
        "crockford32": "0123456789ABCDEFGHJKMNPQRSTVWXYZ",
        "decimal": _DIGITS,
        "hex": "0123456789abcdef",
        "hex_upper": "0123456789ABCDEF",
        # Printable ASCII without space, double quote, single quote, backslash, backtick
        "safe_ascii": (
            "!#$%&()*+,-./0123456789:;<=>?@"
            "ABCDEFGHIJKLMNOPQRSTUVWXYZ[]^_"
            "abcdefghijklmnopqrstuvwxyz{|}~"
        ),
        "safe32": "2346789bdfghjmnpqrtBDFGHJLMNPQRT",
        "safe64": _ALPHA_UPPER + _ALPHA_LOWER + _DIGITS + "-_",
        "symbol": "!#$%&()*+,-./:;<=>?@[]^_{|}~",
        "wordSafe32": "23456789CFGHJMPQRVWXcfghjmpqrvwx",
    }
)

# Snake-case spelling accepted alongside the published camel-case name
_ALIASES = {"word_safe32": "wordSafe32"}

CharsLike = Union[str, Sequence[str], AlphabetSpec]

_cache: dict[str, AlphabetSpec] = {}


def preset_names() -> list[str]:
    """Return the names of all predefined alphabets."""
    return list(PRESETS)


def preset(name: str) -> AlphabetSpec:
    """Return the ``AlphabetSpec`` for a predefined alphabet.

    Raises:
        KeyError: If ``name`` is not a preset
    """
    name = _ALIASES.get(name, name)
    spec = _cache.get(name)
    if spec is None:
        spec = AlphabetSpec(symbols=tuple(PRESETS[name]), name=name)
        _cache[name] = spec
    return spec


def is_preset(name: str) -> bool:
    return _ALIASES.get(name, name) in PRESETS


def alphabet_for(chars: CharsLike) -> AlphabetSpec:
    """Resolve a preset name, symbol string or symbol sequence to an alphabet.

    A string that names a preset selects that preset; any other string is
    taken as the literal symbols of a custom alphabet.

    Args:
        chars: Preset name, custom symbols, or an existing ``AlphabetSpec``

    Returns:
        Validated ``AlphabetSpec``

    Raises:
        InvalidAlphabet: (or a subclass) if the custom symbols are unusable
    """
    if isinstance(chars, AlphabetSpec):
        return chars
    if isinstance(chars, str) and is_preset(chars):
        return preset(chars)
    spec = AlphabetSpec(symbols=tuple(chars), name=CUSTOM)
    logger.debug("Custom alphabet of %d symbols, %d bits/symbol", spec.n, spec.bits_per_symbol)
    return spec
