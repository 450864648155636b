"""Combinator layer.

Higher-order constructors that build a new parser from existing ones.
Each combinator runs the parsers it wraps, threading state forward and
branching on success or failure. The output state of one step is always
the exact input state of the next.

Failure policy:
    Most combinators short-circuit on the first failure. Three convert
    failure into success, and callers rely on it:

    - optional: failure becomes ``NOTHING``
    - many: a failure after at least one success ends the repetition
    - sequence (and between): a failure ends the run and the values
      collected so far are returned as a success

    ``sequence`` is best-effort sequencing. Use ``and_then_keep_both`` for
    strict sequencing.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from typing import Any

from combilex.diagnostics import ErrorTemplate
from combilex.parser import Parser, Step
from combilex.result import NOTHING, Err, Ok, Option, Some
from combilex.state import ParseState

__all__ = [
    "and_then_keep_both",
    "and_then_keep_left",
    "and_then_keep_right",
    "between",
    "bind",
    "choice",
    "fail",
    "ignore_success",
    "lazy",
    "many",
    "map_value",
    "optional",
    "reduce",
    "sequence",
    "succeed",
]

logger = logging.getLogger(__name__)


# ============================================================================
# TRANSFORMATION
# ============================================================================


def map_value[A, B](f: Callable[[A], B], p: Parser[A]) -> Parser[B]:
    """Apply ``f`` to the value of ``p`` on success.

    State is preserved. Failures pass through unchanged.
    """

    def parse_map(state: ParseState) -> Step[B]:
        next_state, result = p(state)
        match result:
            case Ok(value):
                return next_state, Ok(f(value))
            case Err():
                return next_state, result

    return Parser(parse_map, f"map_value({p.name})")


def bind[A, B](f: Callable[[A], Parser[B]], p: Parser[A]) -> Parser[B]:
    """Run ``p``, then the parser ``f`` builds from its value.

    Lets the rest of a grammar depend on what was already parsed.
    """

    def parse_bind(state: ParseState) -> Step[B]:
        next_state, result = p(state)
        match result:
            case Ok(value):
                return f(value)(next_state)
            case Err():
                return next_state, result

    return Parser(parse_bind, f"bind({p.name})")


def succeed[T](value: T) -> Parser[T]:
    """Parser that consumes nothing and always yields ``value``."""
    return Parser(lambda state: (state, Ok(value)), f"succeed({value!r})")


def fail(message: str) -> Parser[Any]:
    """Parser that consumes nothing and always fails with ``message``."""
    return Parser(lambda state: (state, Err(message)), f"fail({message!r})")


# ============================================================================
# SEQUENCING
# ============================================================================


def and_then_keep_right[A, B](p1: Parser[A], p2: Parser[B]) -> Parser[B]:
    """Run ``p1`` then ``p2``, keeping only ``p2``'s value.

    If ``p1`` fails its error and returned state are propagated; no rewind
    is performed here.
    """

    def parse_keep_right(state: ParseState) -> Step[B]:
        next_state, result = p1(state)
        if isinstance(result, Err):
            return next_state, result
        return p2(next_state)

    return Parser(parse_keep_right, f"{p1.name} *> {p2.name}")


def and_then_keep_left[A, B](p1: Parser[A], p2: Parser[B]) -> Parser[A]:
    """Run ``p1`` then ``p2``, keeping only ``p1``'s value.

    ``p2`` enforces a trailing condition. If it fails, the combined parser
    fails with ``p2``'s error and state and ``p1``'s value is discarded.
    """

    def parse_keep_left(state: ParseState) -> Step[A]:
        state1, first = p1(state)
        if isinstance(first, Err):
            return state1, first
        state2, second = p2(state1)
        if isinstance(second, Err):
            return state2, second
        return state2, first

    return Parser(parse_keep_left, f"{p1.name} <* {p2.name}")


def and_then_keep_both[A, B](p1: Parser[A], p2: Parser[B]) -> Parser[tuple[A, B]]:
    """Run ``p1`` then ``p2``, yielding the pair of both values.

    Strict: fails with the first error encountered.
    """

    def parse_keep_both(state: ParseState) -> Step[tuple[A, B]]:
        state1, first = p1(state)
        if isinstance(first, Err):
            return state1, first
        state2, second = p2(state1)
        if isinstance(second, Err):
            return state2, second
        return state2, Ok((first.value, second.value))

    return Parser(parse_keep_both, f"{p1.name} <*> {p2.name}")


def sequence[T](parsers: Sequence[Parser[T]]) -> Parser[list[T]]:
    """Best-effort sequencing: collect what can be parsed, in order.

    Runs each parser on the advancing state. The first failure stops the
    run, but the outcome is still ``Ok`` with the values collected before
    it; the error is discarded and the state is the one the failing parser
    returned. ``None`` values (from ``ignore_success`` for instance) are
    not collected.

    Never fails.
    """
    parsers = tuple(parsers)

    def parse_sequence(state: ParseState) -> Step[list[T]]:
        values: list[T] = []
        current = state
        for parser in parsers:
            current, result = parser(current)
            if isinstance(result, Err):
                break
            if result.value is not None:
                values.append(result.value)
        return current, Ok(values)

    names = ", ".join(p.name for p in parsers)
    return Parser(parse_sequence, f"sequence([{names}])")


def between[T](open_: Parser[Any], p: Parser[T], close: Parser[Any]) -> Parser[T | None]:
    """Parse ``p`` bracketed by ``open_`` and ``close``; yield ``p``'s value.

    Built on ``sequence([open_, p, close])`` and inherits its partial
    success: a missing ``close`` does not fail the parse. The value is the
    second collected value, or None if fewer than two were collected.

    Example:
        >>> bracketed = between(literal("["), take_while(lambda c: c != "]"), literal("]"))
        >>> run(bracketed, "[abc")
        Ok(value='abc')
    """
    inner = sequence([open_, p, close])

    def parse_between(state: ParseState) -> Step[T | None]:
        next_state, result = inner(state)
        match result:
            case Ok(values):
                return next_state, Ok(values[1] if len(values) > 1 else None)
            case Err():
                return next_state, result

    return Parser(parse_between, f"between({open_.name}, {p.name}, {close.name})")


def reduce[A, B](
    list_parser: Parser[Sequence[A]],
    initial: B,
    reducer: Callable[[B, A], B],
) -> Parser[B]:
    """Left-fold ``reducer`` over the sequence ``list_parser`` produces.

    Fails iff ``list_parser`` fails. An empty sequence yields ``initial``.

    Note:
        ``many`` produces ``Ok`` wrappers, not bare values; a reducer over
        ``many(...)`` must unwrap each element.
    """

    def parse_reduce(state: ParseState) -> Step[B]:
        next_state, result = list_parser(state)
        match result:
            case Ok(items):
                return next_state, Ok(functools.reduce(reducer, items, initial))
            case Err():
                return next_state, result

    return Parser(parse_reduce, f"reduce({list_parser.name})")


# ============================================================================
# REPETITION & OPTIONALITY
# ============================================================================


def optional[T](p: Parser[T]) -> Parser[Option[T]]:
    """Run ``p``; always succeed.

    Yields ``Some(value)`` with ``p``'s state on success, or ``NOTHING``
    with the state ``p`` returned on failure (not rewound here).
    """

    def parse_optional(state: ParseState) -> Step[Option[T]]:
        next_state, result = p(state)
        match result:
            case Ok(value):
                return next_state, Ok(Some(value))
            case Err():
                return next_state, Ok(NOTHING)

    return Parser(parse_optional, f"optional({p.name})")


def many[T](p: Parser[T]) -> Parser[list[Ok[T]]]:
    """Repeat ``p``, accumulating its ``Ok`` results.

    Branches of the repetition:
        - fails before any success: ``many`` fails with that error
        - fails after a success: stop with the results so far, state
          rewound to the last success
        - succeeds, input remains: append and continue
        - succeeds, input exhausted: stop; this last result goes FIRST,
          ahead of the earlier ones (``[r_n, r_1, ..., r_n-1]``)
        - succeeds without consuming while input remains: append and stop

    The exhaustion ordering is a long-standing quirk kept for compatibility
    with grammars that already depend on it.

    Example:
        >>> run(many(digit()), "123")
        Ok(value=[Ok(value='3'), Ok(value='1'), Ok(value='2')])
        >>> run(many(digit()), "12a")
        Ok(value=[Ok(value='1'), Ok(value='2')])
    """

    def parse_many(state: ParseState) -> Step[list[Ok[T]]]:
        results: list[Ok[T]] = []
        previous = state
        while True:
            current, result = p(previous)
            if isinstance(result, Err):
                if not results:
                    return current, result
                return previous, Ok(results)
            if current.is_eof:
                return current, Ok([result, *results])
            results.append(result)
            if current.position == previous.position:
                return current, Ok(results)
            previous = current

    return Parser(parse_many, f"many({p.name})")


# ============================================================================
# CHOICE & GROUPING
# ============================================================================


def choice[T](parsers: Sequence[Parser[T]]) -> Parser[T]:
    """Try each parser against the same state; first success wins.

    If every alternative fails, fails at the original state with a generic
    error. Per-alternative errors are not reported.
    """
    parsers = tuple(parsers)

    def parse_choice(state: ParseState) -> Step[T]:
        for parser in parsers:
            logger.debug("choice: trying %s at position %d", parser.name, state.position)
            outcome = parser(state)
            if isinstance(outcome[1], Ok):
                return outcome
        return state, Err(ErrorTemplate.no_choice_matched())

    names = " | ".join(p.name for p in parsers)
    return Parser(parse_choice, f"choice([{names}])")


def ignore_success(p: Parser[Any]) -> Parser[None]:
    """Run ``p`` and discard its value on success."""

    def parse_ignore(state: ParseState) -> Step[None]:
        next_state, result = p(state)
        if isinstance(result, Err):
            return next_state, result
        return next_state, Ok(None)

    return Parser(parse_ignore, f"ignore_success({p.name})")


# ============================================================================
# RECURSION
# ============================================================================


def lazy[T](factory: Callable[[], Parser[T]], name: str = "lazy") -> Parser[T]:
    """Defer building a parser until it first runs.

    Lets a grammar refer to itself, e.g. an expression that contains
    parenthesised expressions. ``factory`` is called once; the parser it
    returns is immutable, so runs stay independent.
    """

    @functools.cache
    def build() -> Parser[T]:
        logger.debug("lazy: building deferred parser %s", name)
        return factory()

    def parse_lazy(state: ParseState) -> Step[T]:
        return build()(state)

    return Parser(parse_lazy, name)
