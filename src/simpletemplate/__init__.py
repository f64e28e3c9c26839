"""simpletemplate - placeholder templates with CLDR plural variant selection.

Resolves templates such as ``"{count} apple|{count} apples"`` into final
text. Plural variants are chosen by explicit value (``{0}none``), numeric
interval (``]10,Inf]lots``), or the locale's CLDR plural category via Babel.

Public API:
    SimpleTemplateResolver - Placeholder substitution with optional pluralization
    PluralHandler - Cached variant parsing and selection
    CacheConfig - Parsed-template cache settings
    CldrPluralDetectorRegistry - Babel-backed plural category provider
    parse_variants - Parse a raw template into a VariantSet
    select_variant - Pick one variant for a quantity and locale

Exceptions:
    TemplateError - Base exception class
    LocaleNotSupportedError - Locale without plural rules

Submodules:
    simpletemplate.syntax - Variant data model and template parser
    simpletemplate.runtime - Cache, plural rules, selector, resolver
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import LocaleNotSupportedError, TemplateError
from .runtime import (
    CacheConfig,
    CldrPluralDetectorRegistry,
    PluralHandler,
    SimpleTemplateResolver,
    select_variant,
)
from .syntax import VariantSet, parse_variants

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("simpletemplate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CacheConfig",
    "CldrPluralDetectorRegistry",
    "LocaleNotSupportedError",
    "PluralHandler",
    "SimpleTemplateResolver",
    "TemplateError",
    "VariantSet",
    "__version__",
    "parse_variants",
    "select_variant",
]
