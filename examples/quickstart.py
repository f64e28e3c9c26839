"""Quickstart example for simpletemplate.

Demonstrates placeholder substitution, plural categories, explicit values,
and intervals.
"""

import logging

from simpletemplate import CacheConfig, PluralHandler, SimpleTemplateResolver

logging.basicConfig(level=logging.INFO)

# Example 1: Simple placeholders
print("=" * 50)
print("Example 1: Placeholders")
print("=" * 50)

resolver = SimpleTemplateResolver()
print(resolver.resolve("Hello, {name}!", {"name": "World"}, "en"))
# Output: Hello, World!

# Example 2: Plural categories (Arabic has six)
print("\n" + "=" * 50)
print("Example 2: Plural Categories")
print("=" * 50)

resolver = SimpleTemplateResolver("%", "%", PluralHandler())
arabic = "%count% zero|%count% one|%count% two|%count% few|%count% many|%count% other"
for count in (0, 1, 2, 6, 42, 1.1):
    print(resolver.resolve(arabic, {"count": count}, "ar"))
# Output: 0 zero, 1 one, 2 two, 6 few, 42 many, 1.1 other

# Example 3: Explicit values and intervals
print("\n" + "=" * 50)
print("Example 3: Explicit Values and Intervals")
print("=" * 50)

template = "{0}No apples|One apple|%count% apples|]99,Inf]Too many apples"
for count in (0, 1, 5, 100):
    print(resolver.resolve(template, {"count": count}, "en_US"))
# Output: No apples, One apple, 5 apples, Too many apples

# Example 4: Custom trigger parameter and cache size
print("\n" + "=" * 50)
print("Example 4: Configuration")
print("=" * 50)

handler = PluralHandler(parameter_name="n", delimiter=";", cache=CacheConfig(size=16))
resolver = SimpleTemplateResolver(":", "", handler).add_replacement("%%", "%")
print(resolver.resolve("One file;:n files (100%%)", {"n": 3}, "en"))
# Output: 3 files (100%)
print(handler.get_cache_stats())
