"""Hypothesis strategies for combilex property-based testing.

Usage:
    from tests.strategies import primitive_parsers, small_text
"""

from .parsers import (
    SMALL_ALPHABET,
    digit_strings,
    failing_primitive_parsers,
    literal_text,
    predicates,
    primitive_parsers,
    small_text,
    source_text,
)

__all__ = [
    "SMALL_ALPHABET",
    "digit_strings",
    "failing_primitive_parsers",
    "literal_text",
    "predicates",
    "primitive_parsers",
    "small_text",
    "source_text",
]
