"""Plural variant data model.

A raw template such as ``"{0}none|one item|]1,Inf]many items"`` is parsed
into a VariantSet: explicit-value rules, interval rules, and plain variants
assigned positionally to a locale's plural categories.

All types are immutable. A VariantSet may be shared freely between threads
once built.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import TypeAlias

__all__ = [
    "ExplicitRule",
    "IntervalRule",
    "PlainVariant",
    "VariantRule",
    "VariantSet",
    "number_key",
    "to_real",
]

# Beyond this decimal exponent keys use scientific notation instead of
# spelling out every digit.
_MAX_POSITIONAL_EXPONENT = 1000


@dataclass(frozen=True, slots=True)
class ExplicitRule:
    """Variant bound to one or more exact numeric values.

    Attributes:
        values: Canonical number keys (see number_key) in source order
        template: Variant text
    """

    values: tuple[str, ...]
    template: str


@dataclass(frozen=True, slots=True)
class IntervalRule:
    """Variant bound to a numeric range over the extended reals.

    Inclusivity flags only add the exact boundary values; interior
    containment is strict. Bounds may be ``-inf``/``inf``.

    Attributes:
        lower: Lower bound
        upper: Upper bound
        lower_inclusive: Whether ``lower`` itself matches
        upper_inclusive: Whether ``upper`` itself matches
        template: Variant text
    """

    lower: float
    upper: float
    lower_inclusive: bool
    upper_inclusive: bool
    template: str = ""

    def contains(self, number: float) -> bool:
        """Check whether number falls into the interval.

        Example:
            >>> IntervalRule(10, 50, False, True).contains(50)
            True
            >>> IntervalRule(10, 50, False, True).contains(10)
            False
        """
        if self.lower_inclusive and number == self.lower:
            return True
        if self.upper_inclusive and number == self.upper:
            return True
        return self.lower < number < self.upper


@dataclass(frozen=True, slots=True)
class PlainVariant:
    """Variant without a numeric binding (matched by plural category)."""

    template: str


VariantRule: TypeAlias = ExplicitRule | IntervalRule | PlainVariant


@dataclass(frozen=True, slots=True)
class VariantSet:
    """Parsed form of one raw template string.

    Attributes:
        explicit: Canonical number key -> variant text
        intervals: Interval rules in declaration order (first match wins)
        ordinals: Plain variants, indexed by the locale's plural categories
        default: Text of the first part, used when nothing else matches
    """

    explicit: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    intervals: tuple[IntervalRule, ...] = ()
    ordinals: tuple[str, ...] = ()
    default: str = ""

    def __post_init__(self) -> None:
        """Freeze the explicit map so the set stays immutable."""
        if not isinstance(self.explicit, MappingProxyType):
            object.__setattr__(self, "explicit", MappingProxyType(dict(self.explicit)))


def _decimal_key(number: Decimal) -> str:
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "-Inf" if number.is_signed() else "Inf"
    if number.is_zero():
        return "0"
    if abs(number.adjusted()) > _MAX_POSITIONAL_EXPONENT:
        return str(number)
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def number_key(value: object) -> str:
    """Render a number in the canonical textual form used for explicit matches.

    Integral values never carry a fractional part, so ``1``, ``1.0`` and
    ``Decimal("1.00")`` all map to ``"1"``. Non-integral values are plain
    positional decimals without trailing zeros. Infinities render as
    ``"Inf"``/``"-Inf"``.

    Args:
        value: Quantity or numeric literal (int, float, Decimal, str, bool)

    Returns:
        Canonical key. Non-numeric strings are returned stripped.

    Example:
        >>> number_key(1.0)
        '1'
        >>> number_key("1.50")
        '1.5'
        >>> number_key(float("-inf"))
        '-Inf'
    """
    match value:
        case bool():
            return "1" if value else "0"
        case int():
            return str(value)
        case float():
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Inf" if value > 0 else "-Inf"
            return _decimal_key(Decimal(repr(value)))
        case Decimal():
            return _decimal_key(value)
        case str():
            text = value.strip()
            try:
                return _decimal_key(Decimal(text))
            except InvalidOperation:
                return text
        case None:
            return ""
        case _:
            return str(value)


def to_real(value: object) -> float | None:
    """Read a quantity as a real number.

    Returns:
        Float value (possibly infinite or NaN), or None when the value has no
        numeric reading (non-numeric strings, None, arbitrary objects).
    """
    match value:
        case Decimal() if value.is_snan():
            return math.nan
        case bool() | float() | Decimal():
            return float(value)
        case int():
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf
        case str():
            try:
                return float(value.strip())
            except ValueError:
                return None
        case _:
            return None
