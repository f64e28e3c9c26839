"""Tests for syntax/parser.py - plural variant template parsing.

Coverage:
    - Explicit-value parts (single and comma-separated values)
    - Interval parts (all inclusivity combinations, infinities)
    - Plain parts, including malformed rule syntax
    - Default variant selection and delimiter handling
    - Partition invariant (property-based)
"""

from __future__ import annotations

import math

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from simpletemplate.syntax import (
    ExplicitRule,
    IntervalRule,
    PlainVariant,
    parse_rule,
    parse_variants,
)
from tests.strategies import explicit_parts, interval_parts, plain_parts, templates

# ============================================================================
# parse_rule
# ============================================================================


class TestParseRuleExplicit:
    """Explicit-value form: {n1, n2, ...}text."""

    def test_single_value(self) -> None:
        assert parse_rule("{0}none") == ExplicitRule(values=("0",), template="none")

    def test_multiple_values_with_whitespace(self) -> None:
        rule = parse_rule("{ 1 , 21,31 }one")
        assert rule == ExplicitRule(values=("1", "21", "31"), template="one")

    def test_negative_and_decimal_values(self) -> None:
        rule = parse_rule("{-2, 1.5}odd")
        assert isinstance(rule, ExplicitRule)
        assert rule.values == ("-2", "1.5")

    def test_values_are_canonicalized(self) -> None:
        """Trailing zeros never split one number into several keys."""
        rule = parse_rule("{1.0, 2.50}x")
        assert isinstance(rule, ExplicitRule)
        assert rule.values == ("1", "2.5")

    def test_leading_whitespace_of_text_skipped(self) -> None:
        assert parse_rule("{0}   none ").template == "none "

    def test_text_may_span_lines(self) -> None:
        assert parse_rule("{0}first\nsecond").template == "first\nsecond"

    def test_empty_text(self) -> None:
        assert parse_rule("{3}") == ExplicitRule(values=("3",), template="")


class TestParseRuleInterval:
    """Interval form: [a,b], ]a,b[, [a,b[, ]a,b]."""

    @pytest.mark.parametrize(
        ("part", "lower_inclusive", "upper_inclusive"),
        [
            ("[1,5]x", True, True),
            ("]1,5]x", False, True),
            ("[1,5[x", True, False),
            ("]1,5[x", False, False),
        ],
    )
    def test_delimiters_set_inclusivity(
        self, part: str, lower_inclusive: bool, upper_inclusive: bool
    ) -> None:
        rule = parse_rule(part)
        assert rule == IntervalRule(1.0, 5.0, lower_inclusive, upper_inclusive, "x")

    def test_infinite_bounds(self) -> None:
        rule = parse_rule("[-Inf,Inf]all")
        assert isinstance(rule, IntervalRule)
        assert rule.lower == -math.inf
        assert rule.upper == math.inf

    def test_plus_inf_upper_bound(self) -> None:
        rule = parse_rule("]50,+Inf]high")
        assert isinstance(rule, IntervalRule)
        assert rule.upper == math.inf

    def test_whitespace_around_bounds(self) -> None:
        rule = parse_rule("[ -1.5 ,  2 ] text")
        assert rule == IntervalRule(-1.5, 2.0, True, True, "text")


class TestParseRulePlain:
    """Anything else is a plain variant, kept verbatim."""

    @pytest.mark.parametrize(
        "part",
        [
            "%count% apples",
            "",
            " {0}leading space",
            "{}empty braces",
            "{a}letters",
            "[1;5]semicolon",
            "[Inf,5]inf as lower bound",
            "]1,-Inf]negative inf as upper bound",
            "(1,5)parentheses",
            "{1,}dangling comma",
        ],
    )
    def test_non_matching_parts_are_plain(self, part: str) -> None:
        assert parse_rule(part) == PlainVariant(template=part)


# ============================================================================
# parse_variants
# ============================================================================


class TestParseVariants:
    """Splitting, collecting, and default selection."""

    def test_mixed_template(self) -> None:
        variants = parse_variants(
            "[-Inf,0[neg|{0}zero|plural-one|plural-other|{10}ten|]10,50[mid|]50,Inf]high"
        )

        assert dict(variants.explicit) == {"0": "zero", "10": "ten"}
        assert [rule.template for rule in variants.intervals] == ["neg", "mid", "high"]
        assert variants.ordinals == ("plural-one", "plural-other")
        assert variants.default == "neg"

    def test_default_is_first_part_text(self) -> None:
        assert parse_variants("{0}none|one|many").default == "none"
        assert parse_variants("one|{0}none").default == "one"

    def test_no_delimiter_single_plain_part(self) -> None:
        variants = parse_variants("just text")
        assert variants.ordinals == ("just text",)
        assert variants.default == "just text"
        assert not variants.explicit
        assert variants.intervals == ()

    def test_empty_template(self) -> None:
        variants = parse_variants("")
        assert variants.ordinals == ("",)
        assert variants.default == ""

    def test_empty_parts_are_plain_variants(self) -> None:
        assert parse_variants("a||b").ordinals == ("a", "", "b")

    def test_later_explicit_value_wins(self) -> None:
        variants = parse_variants("{1}first|{1, 2}second")
        assert dict(variants.explicit) == {"1": "second", "2": "second"}

    def test_custom_delimiter(self) -> None:
        variants = parse_variants("{0}none;one|with pipe;many", delimiter=";")
        assert variants.ordinals == ("one|with pipe", "many")

    def test_multi_character_delimiter(self) -> None:
        assert parse_variants("a<>b<>c", delimiter="<>").ordinals == ("a", "b", "c")

    def test_empty_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError, match="delimiter"):
            parse_variants("a|b", delimiter="")

    def test_variant_set_is_immutable(self) -> None:
        variants = parse_variants("{0}zero|other")
        with pytest.raises(TypeError):
            variants.explicit["1"] = "one"  # type: ignore[index]


# ============================================================================
# Property Tests
# ============================================================================


class TestParseVariantsProperties:
    """Invariants over generated templates."""

    @given(template=templates())
    def test_every_part_lands_in_exactly_one_collection(self, template: str) -> None:
        """Plain and interval parts are counted once; explicit parts add keys."""
        parts = template.split("|")
        variants = parse_variants(template)

        explicit_count = sum(isinstance(parse_rule(p), ExplicitRule) for p in parts)
        assert len(variants.intervals) + len(variants.ordinals) + explicit_count == len(parts)
        event(f"explicit_parts={explicit_count}")

    @given(template=templates())
    def test_default_matches_first_part(self, template: str) -> None:
        first = template.split("|")[0]
        assert parse_variants(template).default == parse_rule(first).template

    @given(part=explicit_parts())
    def test_explicit_part_round_trip(self, part: tuple[str, tuple[int, ...], str]) -> None:
        raw, values, text = part
        rule = parse_rule(raw)
        assert rule == ExplicitRule(values=tuple(str(v) for v in values), template=text)

    @given(part=interval_parts())
    def test_interval_part_round_trip(
        self, part: tuple[str, int, int, bool, bool, str]
    ) -> None:
        raw, lower, upper, lower_inclusive, upper_inclusive, text = part
        rule = parse_rule(raw)
        assert rule == IntervalRule(
            float(lower), float(upper), lower_inclusive, upper_inclusive, text
        )

    @given(text=plain_parts)
    def test_plain_text_is_never_reinterpreted(self, text: str) -> None:
        assert parse_rule(text) == PlainVariant(template=text)

    @given(texts=st.lists(plain_parts, min_size=1, max_size=6))
    def test_plain_variants_keep_order(self, texts: list[str]) -> None:
        assert parse_variants("|".join(texts)).ordinals == tuple(texts)
