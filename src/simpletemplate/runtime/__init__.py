"""Runtime package: plural rules, variant selection, and template resolution.

Depends on syntax package for parsing.

Python 3.13+.
"""

from .cache import VariantCache, make_cache_key
from .cache_config import CacheConfig
from .plural_handler import PluralHandler
from .plural_rules import (
    CldrPluralDetector,
    CldrPluralDetectorRegistry,
    PluralDetector,
    PluralDetectorRegistry,
    get_shared_registry,
)
from .resolver import SimpleTemplateResolver, TemplateFilter, format_value, replace_pairs
from .selector import resolve_category_index, select_variant

__all__ = [
    "CacheConfig",
    "CldrPluralDetector",
    "CldrPluralDetectorRegistry",
    "PluralDetector",
    "PluralDetectorRegistry",
    "PluralHandler",
    "SimpleTemplateResolver",
    "TemplateFilter",
    "VariantCache",
    "format_value",
    "get_shared_registry",
    "make_cache_key",
    "replace_pairs",
    "resolve_category_index",
    "select_variant",
]
