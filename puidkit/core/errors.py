"""Exception hierarchy for puidkit.

Every error derives from ``PuidError``. Argument and alphabet errors are
also ``ValueError`` so callers that already guard with ``except ValueError``
keep working.
"""


class PuidError(Exception):
    """Base class for all puidkit errors."""


class InvalidArgument(PuidError, ValueError):
    """Non-positive, non-finite or non-numeric input to the entropy math."""


class InvalidAlphabet(PuidError, ValueError):
    """A symbol set that cannot be used as an alphabet."""


class EmptyAlphabet(InvalidAlphabet):
    """Alphabet has no symbols."""


class DuplicateCharacter(InvalidAlphabet):
    """Alphabet repeats a symbol."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Duplicate character in alphabet: {symbol!r}")
        self.symbol = symbol


class TooManySymbols(InvalidAlphabet):
    """Alphabet has more than 256 symbols."""


class InvalidCharacter(InvalidAlphabet):
    """Symbol is not a single printable, non-whitespace character."""


class UnknownSymbol(PuidError, ValueError):
    """Decode hit a character that is not part of the alphabet."""

    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(f"Unknown symbol {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class NonPowerOfTwoAlphabet(PuidError, ValueError):
    """Encode/decode requested on an alphabet whose size is not a power of two."""


class InsufficientEntropy(PuidError, RuntimeError):
    """Entropy source returned fewer bytes than requested."""
