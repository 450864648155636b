"""Primitive matchers.

Atomic parsers that match directly against the input without delegating to
another parser:

- literal(s): exact prefix
- digit(): one ASCII digit
- identifier_char(): one ASCII letter, ``?`` or ``_``
- take_while(predicate): longest prefix satisfying a predicate, never fails
- any_char: one character of any kind

Every primitive that fails returns the state it was given, unchanged, and
an error text from ``ErrorTemplate``. None of them raises on short input:
running off the end of the input is a mismatch, not a fault.
"""

from __future__ import annotations

from collections.abc import Callable

from combilex.constants import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    END_OF_INPUT,
    IDENTIFIER_EXTRA_CHARS,
)
from combilex.diagnostics import ErrorTemplate
from combilex.parser import Parser, Step
from combilex.result import Err, Ok
from combilex.state import ParseState

__all__ = [
    "any_char",
    "digit",
    "identifier_char",
    "is_digit",
    "is_identifier_char",
    "literal",
    "take_while",
]


def is_digit(ch: str) -> bool:
    """Check if ch is an ASCII digit (0-9)."""
    return ch in ASCII_DIGITS


def is_identifier_char(ch: str) -> bool:
    """Check if ch is accepted by identifier_char(): [a-zA-Z?_]."""
    return ch in ASCII_LETTERS or ch in IDENTIFIER_EXTRA_CHARS


def _found(ch: str | None) -> str:
    return END_OF_INPUT if ch is None else ch


def literal(expected: str) -> Parser[str]:
    """Match the exact text ``expected``.

    Args:
        expected: Text the remaining input must start with

    Returns:
        Parser yielding ``expected`` and advancing past it, or failing with
        ``"expected <text>"`` at the unchanged state

    Example:
        >>> run(literal("ab"), "abc")
        Ok(value='ab')
        >>> run(literal("ab"), "ac")
        Err(error=ParseError(description='expected ab', position=0))
    """
    length = len(expected)

    def parse_literal(state: ParseState) -> Step[str]:
        if state.starts_with(expected):
            return state.advance(length), Ok(expected)
        return state, Err(ErrorTemplate.expected_literal(expected))

    return Parser(parse_literal, f"literal({expected!r})")


def _single_char(
    accept: Callable[[str], bool],
    describe: Callable[[str], str],
    name: str,
) -> Parser[str]:
    def parse_char(state: ParseState) -> Step[str]:
        ch = state.peek()
        if ch is None or not accept(ch):
            return state, Err(describe(_found(ch)))
        return state.advance(), Ok(ch)

    return Parser(parse_char, name)


def digit() -> Parser[str]:
    """Match one ASCII digit.

    Unicode digits such as ``"²"`` are rejected.
    """
    return _single_char(is_digit, ErrorTemplate.expected_digit, "digit")


def identifier_char() -> Parser[str]:
    """Match one identifier character: an ASCII letter, ``?`` or ``_``.

    Matches a single character per call; repeat it with ``many`` to read a
    whole identifier.
    """
    return _single_char(
        is_identifier_char, ErrorTemplate.expected_identifier_char, "identifier_char"
    )


def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume the longest prefix whose characters all satisfy ``predicate``.

    Never fails. The prefix may be empty, in which case the state is
    returned unchanged and the value is ``""``.

    Args:
        predicate: Called once per character until it returns False
    """

    def parse_while(state: ParseState) -> Step[str]:
        source = state.source
        end = len(source)
        pos = state.position
        while pos < end and predicate(source[pos]):
            pos += 1
        return state.advance(pos - state.position), Ok(state.slice_to(pos))

    name = getattr(predicate, "__name__", "predicate")
    return Parser(parse_while, f"take_while({name})")


def _parse_any_char(state: ParseState) -> Step[str]:
    ch = state.peek()
    if ch is None:
        return state, Err(ErrorTemplate.expected_any_char())
    return state.advance(), Ok(ch)


any_char: Parser[str] = Parser(_parse_any_char, "any_char")
