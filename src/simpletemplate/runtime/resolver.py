"""Simple template resolver - placeholder substitution with pluralization.

Resolves ``"Hello, {name}!"`` style templates. Parameter names are wrapped
with a configurable prefix/suffix and replaced literally (no regex, no
escaping, no recursive substitution). When a PluralHandler is configured and
its trigger parameter is present, the matching plural variant is selected
before substitution.

Substitution follows ``strtr`` semantics: the text is scanned once from the
left, at each position the longest matching token is replaced, and replaced
text is never scanned again. ``{"hello": "world", "world": "hello"}`` swaps
the two words.

Python 3.13+. Indirect dependency: Babel (via plural_handler).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Self, TypeAlias

from simpletemplate.constants import DEFAULT_PREFIX, DEFAULT_SUFFIX
from simpletemplate.syntax import number_key

from .plural_handler import PluralHandler

__all__ = ["SimpleTemplateResolver", "TemplateFilter", "format_value", "replace_pairs"]

TemplateFilter: TypeAlias = Callable[[str], str]


def format_value(value: object) -> str:
    """Format a parameter name or value to text.

    - str: returned as-is
    - bool: "1" / "" (checked before int, bool is a subclass of int)
    - int/float/Decimal: canonical number text (``1.0`` -> ``"1"``)
    - None: empty string
    - anything else: ``str(value)``
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float, Decimal)):
        return number_key(value)
    if value is None:
        return ""
    return str(value)


def replace_pairs(text: str, pairs: Mapping[str, str]) -> str:
    """Replace all tokens in a single left-to-right pass.

    Longer tokens win over shorter ones starting at the same position.
    Empty tokens are ignored.

    Example:
        >>> replace_pairs("hello, world", {"hello": "world", "world": "hello"})
        'world, hello'
    """
    tokens = sorted((token for token in pairs if token), key=len, reverse=True)
    if not tokens:
        return text
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: pairs[match.group()], text)


class SimpleTemplateResolver:
    """Placeholder resolver with optional plural variant selection.

    Example:
        >>> resolver = SimpleTemplateResolver()
        >>> resolver.resolve("hello, {name}!", {"name": "world"}, "en_US")
        'hello, world!'

        >>> resolver = SimpleTemplateResolver("%", "%", PluralHandler())
        >>> resolver.resolve("%count% apple|%count% apples", {"count": 2}, "en")
        '2 apples'
    """

    __slots__ = ("_filters", "_plural_handler", "_prefix", "_replacements", "_suffix")

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        suffix: str = DEFAULT_SUFFIX,
        plural_handler: PluralHandler | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            prefix: Text placed before parameter names (default: "{")
            suffix: Text placed after parameter names (default: "}")
            plural_handler: Variant selector; without one, templates are
                never pluralized and variant syntax passes through verbatim
        """
        self._prefix = prefix
        self._suffix = suffix
        self._plural_handler = plural_handler
        self._replacements: dict[str, str] = {}
        self._filters: list[TemplateFilter] = [str]

    @property
    def plural_handler(self) -> PluralHandler | None:
        """Configured plural handler, if any."""
        return self._plural_handler

    def add_replacement(self, search: str, replace: str) -> Self:
        """Register a fixed replacement applied after parameter substitution.

        Example:
            >>> SimpleTemplateResolver("%", "%").add_replacement("%%", "%").resolve(
            ...     "%percent%%% match!", {"percent": 99}, "en")
            '99% match!'
        """
        self._replacements[search] = replace
        return self

    def add_filter(self, template_filter: TemplateFilter) -> Self:
        """Register a filter producing an extra name/value pair per parameter.

        Every filter is applied separately to the text of each parameter's
        name and value; each result pair becomes a substitution. The initial
        filter is plain stringification.

        Example:
            >>> resolver = SimpleTemplateResolver(":", "").add_filter(str.upper)
            >>> resolver.resolve("hello, :NAME!", {"name": "alice"}, "en")
            'hello, ALICE!'
        """
        self._filters.append(template_filter)
        return self

    def resolve(self, template: str, parameters: Mapping[str, object], locale: str) -> str:
        """Resolve template with parameters.

        Args:
            template: Template text, possibly with plural variants
            parameters: Parameter name -> value
            locale: Locale code for plural rules

        Returns:
            Resolved text
        """
        translated = self._select_template(template, parameters, locale)

        pairs = self._make_pairs(parameters)
        if pairs:
            translated = replace_pairs(translated, pairs)

        if self._replacements:
            translated = replace_pairs(translated, self._replacements)

        return translated

    def _select_template(
        self, template: str, parameters: Mapping[str, object], locale: str
    ) -> str:
        handler = self._plural_handler
        if handler is not None and handler.needs_pluralize(parameters):
            return handler.get_template(template, parameters, locale)
        return template

    def _make_pairs(self, parameters: Mapping[str, object]) -> dict[str, str]:
        pairs: dict[str, str] = {}
        for name, value in parameters.items():
            name_text = format_value(name)
            value_text = format_value(value)
            for template_filter in self._filters:
                prepared_name = template_filter(name_text)
                if prepared_name == "":
                    continue
                pairs[self._wrap(prepared_name)] = template_filter(value_text)
        return pairs

    def _wrap(self, name: str) -> str:
        if self._prefix and not name.startswith(self._prefix):
            name = f"{self._prefix}{name}"
        if self._suffix and not name.endswith(self._suffix):
            name = f"{name}{self._suffix}"
        return name
