"""Random ID generator.

``Puid`` binds an alphabet, an entropy target and an entropy source. All
configuration work (alphabet validation, entropy math, ID length) happens
in the constructor; ``generate()`` only slices bytes.

Example:
    >>> from puidkit.core.source import FixedBytes
    >>> rand_id = Puid(chars="hex", bits=16, rand_bytes=FixedBytes(b"\\x9f\\x3a"))
    >>> rand_id.generate()
    '9f3a'
"""

from __future__ import annotations

import logging
import math

from puidkit.components.alphabet import AlphabetSpec
from puidkit.components.config import GeneratorConfig
from puidkit.components.entropy import EntropySpec
from puidkit.components.info import PuidInfo
from puidkit.core import codec
from puidkit.core.chars import CharsLike, alphabet_for
from puidkit.core.config import load_generator_config
from puidkit.core.cursor import BitCursor
from puidkit.core.entropy import check_bits, check_risk, check_total, risk_for, total_for
from puidkit.core.errors import InsufficientEntropy
from puidkit.core.source import EntropySource, default_source, describe_source

logger = logging.getLogger(__name__)


def id_length(bits: float, bits_per_symbol: int) -> int:
    """Minimum number of symbols with ``length * bits_per_symbol >= bits``."""
    return max(1, math.ceil(bits / bits_per_symbol))


class Puid:
    """Generator of random IDs with a fixed entropy and alphabet.

    Attributes:
        alphabet: Resolved alphabet
        entropy: Entropy specification the generator was built from
        bits: Requested entropy bits
        length: Symbols per ID
        rand_bytes: Entropy source
    """

    def __init__(
        self,
        chars: CharsLike = "safe64",
        bits: float | None = None,
        total: float | None = None,
        risk: float | None = None,
        rand_bytes: EntropySource = default_source,
    ) -> None:
        """Configure the generator.

        Args:
            chars: Preset name, custom symbols, or an ``AlphabetSpec``
            bits: Entropy bits per ID (mutually exclusive with total/risk)
            total: Number of IDs that may be generated
            risk: Acceptable collision risk as "1-in-risk"
            rand_bytes: Callable returning the requested number of random bytes

        Raises:
            InvalidAlphabet: If ``chars`` cannot form an alphabet
            InvalidArgument: If bits, total or risk are non-numeric, non-finite or out of range
            pydantic.ValidationError: If bits/total/risk are combined incorrectly
        """
        if bits is None and total is None and risk is None:
            entropy = EntropySpec.default()
        else:
            if bits is not None:
                check_bits(bits)
            if total is not None:
                check_total(total)
            if risk is not None:
                check_risk(risk)
            entropy = EntropySpec(bits=bits, total=total, risk=risk)

        resolved = entropy.resolve_bits()

        self.alphabet: AlphabetSpec = alphabet_for(chars)
        self.entropy = entropy
        self.bits = resolved
        self.length = id_length(resolved, self.alphabet.bits_per_symbol)
        self.rand_bytes = rand_bytes

        logger.debug(
            "Configured %s generator: %.2f bits, %d symbols of %d bits",
            self.alphabet.name,
            self.bits,
            self.length,
            self.alphabet.bits_per_symbol,
        )

    @classmethod
    def from_config(
        cls,
        name: str,
        config_path: str | None = None,
        rand_bytes: EntropySource = default_source,
    ) -> Puid:
        """Build a generator from a ``[generators.<name>]`` TOML table."""
        config = load_generator_config(name, config_path)
        return cls.from_generator_config(config, rand_bytes=rand_bytes)

    @classmethod
    def from_generator_config(
        cls,
        config: GeneratorConfig,
        rand_bytes: EntropySource = default_source,
    ) -> Puid:
        entropy = config.entropy()
        return cls(
            chars=config.chars,
            bits=entropy.bits,
            total=entropy.total,
            risk=entropy.risk,
            rand_bytes=rand_bytes,
        )

    def _fetch(self, count: int) -> bytes:
        data = self.rand_bytes(count)
        if not isinstance(data, (bytes, bytearray)):
            raise InsufficientEntropy(
                f"Entropy source returned {type(data).__name__}, expected bytes"
            )
        if len(data) < count:
            raise InsufficientEntropy(
                f"Entropy source returned {len(data)} bytes, {count} requested"
            )
        return bytes(data[:count])

    def generate(self) -> str:
        """Generate one random ID.

        Raises:
            InsufficientEntropy: If the entropy source under-delivers
        """
        return codec.slice_symbols(self.alphabet, self.length, self._fetch, BitCursor())

    @property
    def total_entropy_bits(self) -> float:
        """Entropy actually carried by one generated ID."""
        return self.length * self.alphabet.entropy_bits_per_char

    def total(self, risk: float) -> int:
        """Number of IDs that can be generated before reaching ``risk``."""
        return total_for(self.total_entropy_bits, risk)

    def risk(self, total: float) -> int:
        """Collision risk ("1-in-N") after generating ``total`` IDs."""
        return risk_for(self.total_entropy_bits, total)

    def encode(self, data: bytes) -> str:
        """Encode bytes with this generator's (power-of-two) alphabet."""
        return codec.encode(self.alphabet, data)

    def decode(self, text: str) -> bytes:
        """Decode symbols of this generator's (power-of-two) alphabet."""
        return codec.decode(self.alphabet, text)

    def info(self) -> PuidInfo:
        """Describe the generator configuration."""
        alphabet = self.alphabet
        return PuidInfo(
            characters=alphabet.characters,
            preset_name=alphabet.name,
            bits_per_symbol=alphabet.bits_per_symbol,
            entropy_bits=round(self.bits, 2),
            entropy_bits_per_char=round(alphabet.entropy_bits_per_char, 2),
            total_entropy_bits=round(self.total_entropy_bits, 2),
            ere=round(alphabet.ere, 2),
            ete=round(alphabet.ete, 2),
            length=self.length,
            source_description=describe_source(self.rand_bytes),
        )

    def __repr__(self) -> str:
        # may run on a half-built instance when __init__ raised
        alphabet = getattr(self, "alphabet", None)
        return (
            f"{self.__class__.__name__}(chars={alphabet.name if alphabet is not None else None}, "
            f"bits={getattr(self, 'bits', None)}, length={getattr(self, 'length', None)})"
        )
