"""Plural handler: cached template parsing plus variant selection.

Python 3.13+. Indirect dependency: Babel (via plural_rules).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from simpletemplate.constants import DEFAULT_PLURAL_PARAMETER, DEFAULT_TEMPLATE_DELIMITER
from simpletemplate.syntax import VariantSet, parse_variants

from .cache import VariantCache
from .cache_config import CacheConfig
from .plural_rules import PluralDetectorRegistry, get_shared_registry
from .selector import select_variant

__all__ = ["PluralHandler"]

logger = logging.getLogger(__name__)


class PluralHandler:
    """Selects the plural variant of a template for a quantity parameter.

    A handler is triggered by one parameter name (default: "count"). Parsed
    templates are cached by content digest.

    Example:
        >>> handler = PluralHandler()
        >>> handler.get_template("one apple|%count% apples", {"count": 3}, "en")
        '%count% apples'

    Thread Safety:
        Parsing and selection are pure; the cache is internally locked.
    """

    __slots__ = ("_cache", "_delimiter", "_parameter_name", "_registry")

    def __init__(
        self,
        registry: PluralDetectorRegistry | None = None,
        *,
        parameter_name: str = DEFAULT_PLURAL_PARAMETER,
        delimiter: str = DEFAULT_TEMPLATE_DELIMITER,
        cache: CacheConfig | None = None,
    ) -> None:
        """Initialize plural handler.

        Args:
            registry: Plural detector source (default: shared CLDR registry)
            parameter_name: Parameter that triggers pluralization
            delimiter: Variant separator inside templates
            cache: Parsed-template cache settings (default: CacheConfig())

        Raises:
            ValueError: If parameter_name or delimiter is empty
        """
        if not parameter_name:
            msg = "parameter_name must be a non-empty string"
            raise ValueError(msg)
        if not delimiter:
            msg = "delimiter must be a non-empty string"
            raise ValueError(msg)

        config = cache if cache is not None else CacheConfig()
        self._registry = registry if registry is not None else get_shared_registry()
        self._parameter_name = parameter_name
        self._delimiter = delimiter
        self._cache = VariantCache(config.size)

    @property
    def parameter_name(self) -> str:
        """Parameter that triggers pluralization."""
        return self._parameter_name

    @property
    def delimiter(self) -> str:
        """Variant separator."""
        return self._delimiter

    def needs_pluralize(self, parameters: Mapping[str, object]) -> bool:
        """Check whether parameters carry the trigger parameter."""
        return self._parameter_name in parameters

    def get_variants(self, template: str) -> VariantSet:
        """Return the parsed form of template, parsing on cache miss."""
        variants = self._cache.get(template)
        if variants is None:
            variants = parse_variants(template, self._delimiter)
            self._cache.put(template, variants)
            logger.debug(
                "Parsed template: %d explicit, %d interval, %d plain",
                len(variants.explicit),
                len(variants.intervals),
                len(variants.ordinals),
            )
        return variants

    def get_template(self, template: str, parameters: Mapping[str, object], locale: str) -> str:
        """Select the variant of template for the trigger parameter.

        Args:
            template: Raw template with delimiter-separated variants
            parameters: Resolution parameters; must contain the trigger
            locale: Locale code for plural category rules

        Returns:
            Selected variant text (placeholders untouched)

        Raises:
            KeyError: If the trigger parameter is missing
        """
        quantity = parameters[self._parameter_name]
        return select_variant(self.get_variants(template), quantity, locale, self._registry)

    def clear_cache(self) -> None:
        """Drop all parsed templates."""
        self._cache.clear()

    def get_cache_stats(self) -> dict[str, int | float | None]:
        """Get parsed-template cache statistics (see VariantCache.get_stats)."""
        return self._cache.get_stats()
