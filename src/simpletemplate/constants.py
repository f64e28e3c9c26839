"""Shared constants for simpletemplate.

Centralizes default configuration values used by the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template syntax
    "DEFAULT_TEMPLATE_DELIMITER",
    "DEFAULT_PREFIX",
    "DEFAULT_SUFFIX",
    # Pluralization
    "DEFAULT_PLURAL_PARAMETER",
    "PLURAL_CATEGORIES",
    "FALLBACK_CATEGORY",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# TEMPLATE SYNTAX
# ============================================================================

# Separator between plural variants: "one apple|{count} apples"
DEFAULT_TEMPLATE_DELIMITER: str = "|"

# Placeholder wrapping: "{name}"
DEFAULT_PREFIX: str = "{"
DEFAULT_SUFFIX: str = "}"

# ============================================================================
# PLURALIZATION
# ============================================================================

# Parameter whose presence switches on variant selection.
DEFAULT_PLURAL_PARAMETER: str = "count"

# CLDR canonical category order. A locale's allowed categories are listed in
# this order, which fixes the positional mapping of plain variants.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Every CLDR locale defines "other"; used for numbers Babel cannot classify.
FALLBACK_CATEGORY: str = "other"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum number of parsed templates kept by a PluralHandler.
DEFAULT_CACHE_SIZE: int = 1024

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
