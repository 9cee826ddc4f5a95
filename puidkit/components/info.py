"""Generator description component."""

from pydantic import BaseModel, Field


class PuidInfo(BaseModel):
    """Description of a configured generator.

    Attributes:
        characters: Alphabet symbols as one string
        preset_name: Preset name, or 'custom'
        bits_per_symbol: Slice width in bits
        entropy_bits: Entropy requested at configuration
        entropy_bits_per_char: Exact entropy per symbol, log2(n)
        total_entropy_bits: Entropy of one generated ID, length * log2(n)
        ere: Entropy representation efficiency (0, 1]
        ete: Entropy transform efficiency (0, 1]
        length: Symbols per generated ID
        source_description: Label of the entropy source
    """

    model_config = {"frozen": True}

    characters: str
    preset_name: str
    bits_per_symbol: int = Field(ge=1, le=8)
    entropy_bits: float = Field(ge=0)
    entropy_bits_per_char: float = Field(gt=0)
    total_entropy_bits: float = Field(ge=0)
    ere: float = Field(gt=0, le=1)
    ete: float = Field(gt=0, le=1)
    length: int = Field(ge=1)
    source_description: str
