"""Exception hierarchy for simpletemplate.

Errors never cross the resolver boundary for template content: malformed
variant syntax degrades to plain text and unsupported locales fall back to the
first plural category. Exceptions here cover the plural-category provider and
are raised for callers that talk to it directly.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LocaleNotSupportedError", "TemplateError"]


class TemplateError(Exception):
    """Base exception for all simpletemplate errors."""


class LocaleNotSupportedError(TemplateError):
    """Locale has no plural rules available.

    Raised by plural detector registries. The variant selector absorbs it and
    uses the locale's first category instead.

    Attributes:
        locale_code: The locale code that was requested
    """

    def __init__(self, locale_code: str, reason: str = "") -> None:
        """Initialize LocaleNotSupportedError.

        Args:
            locale_code: The locale code that could not be resolved
            reason: Optional underlying cause (e.g. Babel's message)
        """
        message = f"Locale not supported: {locale_code!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.locale_code = locale_code
