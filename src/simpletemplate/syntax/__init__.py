"""Plural variant syntax: data model and template parser.

Python 3.13+. Zero external dependencies.
"""

from .parser import parse_rule, parse_variants
from .variants import (
    ExplicitRule,
    IntervalRule,
    PlainVariant,
    VariantRule,
    VariantSet,
    number_key,
    to_real,
)

__all__ = [
    "ExplicitRule",
    "IntervalRule",
    "PlainVariant",
    "VariantRule",
    "VariantSet",
    "number_key",
    "parse_rule",
    "parse_variants",
    "to_real",
]
