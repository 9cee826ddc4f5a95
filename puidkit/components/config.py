"""Generator configuration component."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from puidkit.components.entropy import EntropySpec


class GeneratorConfig(BaseModel):
    """Configuration for one named generator.

    Attributes:
        chars: Preset name, custom symbol string, or list of symbols
        bits: Explicit entropy bits
        total: Number of identifiers that may be generated
        risk: Acceptable collision risk as "1-in-risk"
    """

    model_config = {"frozen": True, "extra": "forbid"}

    chars: str | list[str] = "safe64"
    bits: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    total: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    risk: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    @field_validator("chars")
    @classmethod
    def _non_empty(cls, value: str | list[str]) -> str | list[str]:
        if not value:
            raise ValueError("chars must not be empty")
        return value

    def entropy(self) -> EntropySpec:
        """Return the entropy spec, 128 bits when nothing is pinned."""
        if self.bits is None and self.total is None and self.risk is None:
            return EntropySpec.default()
        return EntropySpec(bits=self.bits, total=self.total, risk=self.risk)
