"""Plural variant selection.

Picks one variant of a parsed template for a quantity, in priority order:

1. Explicit value: canonical textual form of the quantity in ``explicit``
2. Interval: first interval (declaration order) containing the quantity
3. Plural category: index of the locale's category for the quantity among
   the locale's allowed categories, looked up in ``ordinals``
4. Default: text of the template's first part

Selection never raises. An unsupported locale selects category index 0.

Python 3.13+. Indirect dependency: Babel (via plural_rules).
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from simpletemplate.diagnostics import LocaleNotSupportedError
from simpletemplate.syntax import VariantSet, number_key, to_real

from .plural_rules import PluralDetectorRegistry, PluralNumber

__all__ = ["resolve_category_index", "select_variant"]

logger = logging.getLogger(__name__)


def _plural_operand(quantity: object, real: float) -> PluralNumber:
    """Pick the value handed to the plural rule.

    Numeric strings become Decimal so visible fraction digits ("1.0") count
    as CLDR operands the way the caller wrote them.
    """
    match quantity:
        case bool():
            return int(quantity)
        case int() | float() | Decimal():
            return quantity
        case str():
            try:
                return Decimal(quantity.strip())
            except InvalidOperation:
                return real
        case _:
            return real


def resolve_category_index(
    registry: PluralDetectorRegistry,
    locale: str,
    number: PluralNumber,
) -> int:
    """Map number to the position of its plural category for locale.

    Args:
        registry: Plural detector source
        locale: Locale code
        number: Quantity to classify

    Returns:
        Index into the locale's allowed categories. 0 when the locale is not
        supported or the detected category is not among the allowed ones.
    """
    try:
        detector = registry.get(locale)
    except LocaleNotSupportedError as e:
        logger.warning("Unknown locale '%s': %s. Falling back to first plural variant", locale, e)
        return 0

    category = detector.detect(number)
    allowed = detector.allowed_categories
    if category not in allowed:
        logger.debug("Category '%s' not allowed for locale '%s'", category, locale)
        return 0
    return allowed.index(category)


def select_variant(
    variants: VariantSet,
    quantity: object,
    locale: str,
    registry: PluralDetectorRegistry,
) -> str:
    """Select the variant text for quantity.

    Args:
        variants: Parsed template
        quantity: Value of the pluralization parameter (int, float, Decimal,
            or numeric string)
        locale: Locale code used for plural category rules
        registry: Plural detector source

    Returns:
        Variant text. Never raises. Quantities with no numeric reading
        (None, "", "apples") are not coerced to 0: they only match explicit
        values and otherwise yield the default variant, so ``None`` does not
        fall into an interval such as ``[0,5]``.

    Example:
        >>> from simpletemplate.syntax import parse_variants
        >>> from simpletemplate.runtime.plural_rules import get_shared_registry
        >>> variants = parse_variants("{0}none|one|many|]10,Inf]lots")
        >>> select_variant(variants, 0, "en", get_shared_registry())
        'none'
        >>> select_variant(variants, 5, "en", get_shared_registry())
        'many'
    """
    key = number_key(quantity)
    if key in variants.explicit:
        return variants.explicit[key]

    real = to_real(quantity)
    if real is None:
        logger.debug("Quantity %r is not numeric, using default variant", quantity)
        return variants.default

    for rule in variants.intervals:
        if rule.contains(real):
            return rule.template

    if variants.ordinals:
        index = resolve_category_index(registry, locale, _plural_operand(quantity, real))
        if index < len(variants.ordinals):
            return variants.ordinals[index]

    return variants.default
