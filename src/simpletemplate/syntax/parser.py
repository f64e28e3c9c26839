"""Plural variant template parser.

Splits a raw template on the variant delimiter and classifies every part:

    {0}no apples                 explicit values (comma-separated list allowed)
    {1, 21}one of them           explicit values
    ]1,Inf]%count% apples        interval, ``[``/``]`` select bound inclusivity
    %count% apples               plain variant (matched by plural category)

Parsing is permissive: anything that is not a well-formed explicit or
interval prefix is kept verbatim as a plain variant.

The interval syntax follows the Symfony Translation component (MIT license).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re

from simpletemplate.constants import DEFAULT_TEMPLATE_DELIMITER

from .variants import ExplicitRule, IntervalRule, PlainVariant, VariantRule, VariantSet, number_key

__all__ = ["parse_rule", "parse_variants"]

_NUMBER = r"-?[0-9]+(?:\.[0-9]+)?"

_EXPLICIT_PATTERN = re.compile(
    rf"""
    \{{\s*
        (?P<values>{_NUMBER}(?:\s*,\s*{_NUMBER})*)
    \s*\}}
    \s*(?P<template>.*)
    """,
    re.VERBOSE | re.DOTALL,
)

_INTERVAL_PATTERN = re.compile(
    rf"""
    (?P<left_delimiter>[\[\]])
        \s*
        (?P<left>-Inf|{_NUMBER})
        \s*,\s*
        (?P<right>\+?Inf|{_NUMBER})
        \s*
    (?P<right_delimiter>[\[\]])
    \s*(?P<template>.*)
    """,
    re.VERBOSE | re.DOTALL,
)


def _parse_bound(text: str) -> float:
    match text:
        case "-Inf":
            return -math.inf
        case "Inf" | "+Inf":
            return math.inf
        case _:
            return float(text)


def parse_rule(part: str) -> VariantRule:
    """Classify one delimiter-separated part of a template.

    Args:
        part: Raw text of a single variant

    Returns:
        ExplicitRule, IntervalRule, or PlainVariant. Never raises.

    Example:
        >>> parse_rule("{0, 1}none")
        ExplicitRule(values=('0', '1'), template='none')
        >>> parse_rule("[-Inf,0[negative").lower
        -inf
        >>> parse_rule("just text")
        PlainVariant(template='just text')
    """
    if match := _EXPLICIT_PATTERN.fullmatch(part):
        values = tuple(number_key(value) for value in match["values"].split(","))
        return ExplicitRule(values=values, template=match["template"])

    if match := _INTERVAL_PATTERN.fullmatch(part):
        return IntervalRule(
            lower=_parse_bound(match["left"]),
            upper=_parse_bound(match["right"]),
            lower_inclusive=match["left_delimiter"] == "[",
            upper_inclusive=match["right_delimiter"] == "]",
            template=match["template"],
        )

    return PlainVariant(template=part)


def parse_variants(template: str, delimiter: str = DEFAULT_TEMPLATE_DELIMITER) -> VariantSet:
    """Parse a raw template into a VariantSet.

    Explicit values, intervals, and plain variants are collected separately;
    declaration order is preserved within intervals and within plain
    variants. When an explicit value is listed twice, the later part wins.
    The first part's text (of any kind) becomes the default variant.

    Args:
        template: Raw template text
        delimiter: Variant separator (default: "|")

    Returns:
        Immutable VariantSet

    Raises:
        ValueError: If delimiter is empty
    """
    if not delimiter:
        msg = "delimiter must be a non-empty string"
        raise ValueError(msg)

    explicit: dict[str, str] = {}
    intervals: list[IntervalRule] = []
    ordinals: list[str] = []
    default: str | None = None

    for part in template.split(delimiter):
        rule = parse_rule(part)
        match rule:
            case ExplicitRule(values=values, template=text):
                for value in values:
                    explicit[value] = text
            case IntervalRule():
                intervals.append(rule)
            case PlainVariant(template=text):
                ordinals.append(text)
        if default is None:
            default = rule.template

    return VariantSet(
        explicit=explicit,
        intervals=tuple(intervals),
        ordinals=tuple(ordinals),
        default=template if default is None else default,
    )
