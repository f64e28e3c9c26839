"""CLDR plural category provider using Babel.

Exposes plural rules as a registry of per-locale detectors. A detector
classifies a number into a CLDR category and lists the categories its locale
uses, in canonical CLDR order (zero, one, two, few, many, other). That order
is what maps plain template variants onto categories by position.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from threading import RLock
from typing import TYPE_CHECKING, Protocol, TypeAlias

from babel.core import UnknownLocaleError

from simpletemplate.constants import FALLBACK_CATEGORY, PLURAL_CATEGORIES
from simpletemplate.diagnostics import LocaleNotSupportedError
from simpletemplate.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = [
    "CldrPluralDetector",
    "CldrPluralDetectorRegistry",
    "PluralDetector",
    "PluralDetectorRegistry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)

PluralNumber: TypeAlias = int | float | Decimal


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class PluralDetector(Protocol):
    """Plural category classifier for a single locale."""

    @property
    def allowed_categories(self) -> tuple[str, ...]:
        """Categories used by the locale, in canonical CLDR order."""
        ...

    def detect(self, number: PluralNumber) -> str:
        """Return the plural category of number."""
        ...


class PluralDetectorRegistry(Protocol):
    """Source of plural detectors keyed by locale code."""

    def get(self, locale_code: str) -> PluralDetector:
        """Return the detector for locale_code.

        Raises:
            LocaleNotSupportedError: If the locale has no plural rules
        """
        ...


class CldrPluralDetector:
    """PluralDetector backed by a Babel PluralRule.

    Example:
        >>> detector = get_shared_registry().get("ar")
        >>> detector.allowed_categories
        ('zero', 'one', 'two', 'few', 'many', 'other')
        >>> detector.detect(6)
        'few'
    """

    __slots__ = ("_allowed", "_rule")

    def __init__(self, rule: PluralRule) -> None:
        """Initialize detector.

        Args:
            rule: Babel plural rule of the locale
        """
        self._rule = rule
        # "other" is implicit in Babel rules unless explicitly declared
        tags = set(rule.tags) | {FALLBACK_CATEGORY}
        self._allowed = tuple(category for category in PLURAL_CATEGORIES if category in tags)

    @property
    def allowed_categories(self) -> tuple[str, ...]:
        """Categories used by the locale, in canonical CLDR order."""
        return self._allowed

    def detect(self, number: PluralNumber) -> str:
        """Classify number with the locale's CLDR rule.

        Infinite and NaN values have no CLDR operands and are reported as
        "other". So are Decimals the decimal context cannot take operands
        of (exponent beyond Emax, or too large for the rule's modulo).
        """
        if isinstance(number, Decimal):
            if not number.is_finite():
                return FALLBACK_CATEGORY
        elif isinstance(number, float) and not math.isfinite(number):
            return FALLBACK_CATEGORY
        try:
            return self._rule(number)
        except ArithmeticError as e:
            logger.debug(
                "No plural operands for %r (%s), using '%s'", number, e, FALLBACK_CATEGORY
            )
            return FALLBACK_CATEGORY


class CldrPluralDetectorRegistry:
    """PluralDetectorRegistry for every locale known to Babel.

    Detectors are created once per normalized locale code ("en-US" and
    "en_US" share one) and reused.

    Thread Safety:
        Detector creation is protected by RLock.
    """

    __slots__ = ("_detectors", "_lock")

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._detectors: dict[str, CldrPluralDetector] = {}
        self._lock = RLock()

    def get(self, locale_code: str) -> CldrPluralDetector:
        """Return the detector for locale_code.

        Raises:
            LocaleNotSupportedError: If Babel does not know the locale
        """
        normalized = normalize_locale(locale_code)
        with self._lock:
            detector = self._detectors.get(normalized)
            if detector is not None:
                return detector

            try:
                locale = get_babel_locale(normalized)
            except (UnknownLocaleError, ValueError, TypeError) as e:
                raise LocaleNotSupportedError(locale_code, str(e)) from e

            detector = CldrPluralDetector(locale.plural_form)
            self._detectors[normalized] = detector
            logger.debug(
                "Loaded plural rules for %s: %s", normalized, ", ".join(detector.allowed_categories)
            )
            return detector

    def __contains__(self, locale_code: object) -> bool:
        """Check whether a detector has already been loaded."""
        if not isinstance(locale_code, str):
            return False
        with self._lock:
            return normalize_locale(locale_code) in self._detectors


_shared_registry: CldrPluralDetectorRegistry | None = None
_shared_lock = RLock()


def get_shared_registry() -> CldrPluralDetectorRegistry:
    """Get the process-wide CLDR registry (created lazily).

    Used as the default registry of PluralHandler so that every handler
    shares loaded detectors.
    """
    global _shared_registry  # noqa: PLW0603
    with _shared_lock:
        if _shared_registry is None:
            _shared_registry = CldrPluralDetectorRegistry()
        return _shared_registry
