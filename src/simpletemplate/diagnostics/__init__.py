"""Error types for simpletemplate.

Python 3.13+.
"""

from .errors import LocaleNotSupportedError, TemplateError

__all__ = ["LocaleNotSupportedError", "TemplateError"]
