"""Entropy accounting: bits, total and risk.

Relates the three quantities through the birthday-bound approximation::

    risk ~= 2 * 2^bits / total^2

where ``risk`` is expressed as "1-in-risk" chance of at least one collision
among ``total`` identifiers. Every function rounds toward the safe side:
required bits are rounded up, achievable totals and reported risks are
rounded down.

These functions run at configuration time only. Floats only size the work:
``total_for`` and ``risk_for`` are exact on integers for whole bit counts and
otherwise floor a decimal evaluation carried past the last integer digit, so
float rounding never lifts a result above the exact bound.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, ROUND_FLOOR, Decimal, localcontext
from fractions import Fraction
from numbers import Integral, Real

from puidkit.core.errors import InvalidArgument

_LOG10_2 = math.log10(2)
_GUARD_DIGITS = 30
# Results above 2**_EXACT_LIMIT are rounded down to a power of two
_EXACT_LIMIT = 8192


def _check(value: object, name: str, minimum: float) -> float:
    """Validate a numeric argument and return it as an ``int`` or ``float``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a real number, got {type(value).__name__}")
    # ints are always finite and may exceed the float range
    if isinstance(value, Integral):
        value = int(value)
    else:
        try:
            value = float(value)
        except OverflowError:
            raise InvalidArgument(f"{name} must be finite, got {value}") from None
        if not math.isfinite(value):
            raise InvalidArgument(f"{name} must be finite, got {value}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")
    return value


def check_bits(bits: object) -> float:
    """Validate an entropy bit count: a finite real number above zero."""
    bits = _check(bits, "bits", 0)
    if bits == 0:
        raise InvalidArgument("bits must be > 0")
    if isinstance(bits, Integral) and bits.bit_length() > 1023:
        raise InvalidArgument(f"bits must fit in a float, got a {bits.bit_length()}-bit integer")
    return bits


def check_total(total: object) -> float:
    """Validate a number of identifiers (>= 2)."""
    return _check(total, "total", 2)


def check_risk(risk: object) -> float:
    """Validate a "1-in-risk" collision denominator (>= 1)."""
    return _check(risk, "risk", 1)


def _floor_bound(bits: float, divisor: Fraction, estimate: float, root: bool = False) -> int:
    """Floor ``2 * 2^bits / divisor``, or its square root when ``root``.

    Whole ``bits`` are computed exactly on integers. Fractional ``bits`` are
    evaluated in decimal arithmetic with guard digits beyond the last integer
    digit. ``estimate`` is the float log2 of the result and only sizes the
    work. Beyond ``2**_EXACT_LIMIT`` the result is ``2**(floor(estimate) - 1)``,
    which stays below the exact value since the estimate is off by far less
    than one.
    """
    if estimate < -1:
        return 0
    if estimate > _EXACT_LIMIT:
        return 1 << (math.floor(estimate) - 1)
    if float(bits).is_integer():
        bound = 2 ** (int(bits) + 1) // divisor
        return math.isqrt(bound) if root else bound
    with localcontext() as ctx:
        ctx.prec = int(max(estimate, 0) * _LOG10_2) + _GUARD_DIGITS
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        value = Decimal(2) ** (1 + Decimal(bits))
        value /= Decimal(divisor.numerator) / Decimal(divisor.denominator)
        if root:
            value = value.sqrt()
        return int(value.to_integral_value(rounding=ROUND_FLOOR))


def bits_for(total: float, risk: float) -> float:
    """Minimum entropy bits for ``total`` IDs with a 1-in-``risk`` collision chance.

    Args:
        total: Number of identifiers that may ever be generated (>= 2)
        risk: Acceptable risk as the denominator of "1-in-risk" (>= 1)

    Returns:
        ``2*log2(total) + log2(risk) - 1`` rounded up to two decimal places

    Raises:
        InvalidArgument: If either value is non-numeric, non-finite or too small

    Example:
        >>> bits_for(1e6, 1e12)
        78.73
    """
    total = check_total(total)
    risk = check_risk(risk)
    bits = 2 * math.log2(total) + math.log2(risk) - 1
    return math.ceil(bits * 100) / 100


def total_for(bits: float, risk: float) -> int:
    """Maximum number of IDs at ``bits`` entropy without exceeding ``risk``.

    Computes ``floor(sqrt(2 * 2^bits / risk))``.
    """
    bits = check_bits(bits)
    risk = check_risk(risk)
    estimate = (1 + bits - math.log2(risk)) / 2
    return _floor_bound(bits, Fraction(risk), estimate, root=True)


def risk_for(bits: float, total: float) -> int:
    """Risk denominator ``N`` ("1-in-N") of a collision among ``total`` IDs.

    Computes ``floor(2 * 2^bits / total^2)``, never less than 1.
    """
    bits = check_bits(bits)
    total = check_total(total)
    estimate = 1 + bits - 2 * math.log2(total)
    return max(1, _floor_bound(bits, Fraction(total) ** 2, estimate))


def bits_per_char(n_chars: int) -> float:
    """Exact entropy carried by one symbol of an ``n_chars`` alphabet."""
    return math.log2(n_chars)


def slice_width(n_chars: int) -> int:
    """Whole bits needed to index ``n_chars`` symbols, ``ceil(log2(n))``."""
    if n_chars < 2:
        raise InvalidArgument(f"Need at least 2 symbols, got {n_chars}")
    return (n_chars - 1).bit_length()
