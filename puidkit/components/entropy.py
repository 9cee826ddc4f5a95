"""Entropy specification component."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from puidkit.core.entropy import bits_for

DEFAULT_BITS = 128.0


class EntropySpec(BaseModel):
    """Desired randomness of one identifier.

    Either ``bits`` is given directly, or ``total`` and ``risk`` are given and
    the bits are derived with the birthday bound.

    Attributes:
        bits: Explicit entropy bits (> 0)
        total: Number of identifiers that may be generated
        risk: Acceptable collision risk as "1-in-risk"
    """

    model_config = {"frozen": True}

    bits: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    total: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    risk: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _one_form(self) -> EntropySpec:
        pinned = self.total is not None or self.risk is not None
        if self.bits is not None and pinned:
            raise ValueError("Specify either bits or total/risk, not both")
        if self.bits is None:
            if self.total is None or self.risk is None:
                raise ValueError("Both total and risk are required when bits is not given")
        return self

    def resolve_bits(self) -> float:
        """Return the entropy bits, deriving them from total/risk if needed.

        Raises:
            InvalidArgument: If total/risk are outside the math's domain
        """
        if self.bits is not None:
            return self.bits
        if self.total is None or self.risk is None:
            raise ValueError("Both total and risk are required when bits is not given")
        return bits_for(self.total, self.risk)

    @classmethod
    def default(cls) -> EntropySpec:
        return cls(bits=DEFAULT_BITS)
