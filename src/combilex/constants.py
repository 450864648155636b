"""Shared constants for combilex.

Centralized configuration constants used by the primitives and the driver.
Placing them here avoids circular imports and provides a single source of
truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Character classes: Sets consulted by the primitive matchers
- Display: Text used when rendering the end of input in error messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "IDENTIFIER_EXTRA_CHARS",
    # Display
    "END_OF_INPUT",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input size in characters (10 MiB of text).
# The whole input is held in memory for the lifetime of a run, so an
# unbounded input is an unbounded allocation. Pass max_source_size=0 to run()
# to disable the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII digits only. str.isdigit() accepts Unicode digits such as "²",
# which int() rejects.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ASCII letters only. str.isalpha() accepts every Unicode letter.
ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Non-letter characters accepted by identifier_char().
IDENTIFIER_EXTRA_CHARS: frozenset[str] = frozenset("?_")

# ============================================================================
# DISPLAY
# ============================================================================

# Rendered in place of the found character when a matcher runs off the end.
END_OF_INPUT: str = "end of input"
