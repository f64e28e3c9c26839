"""Hypothesis strategies for simpletemplate tests."""

from .templates import (
    explicit_parts,
    finite_numbers,
    interval_parts,
    plain_parts,
    templates,
    variant_texts,
)

__all__ = [
    "explicit_parts",
    "finite_numbers",
    "interval_parts",
    "plain_parts",
    "templates",
    "variant_texts",
]
