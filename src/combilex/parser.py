"""The parser abstraction.

A parser is a pure function from a ``ParseState`` to a pair of the next
state and a ``Result``:

    Parser[T]:  ParseState -> (ParseState, Ok[T] | Err[str])

``Parser`` wraps that function as an immutable value with a descriptive
name. Primitives and combinators are constructors that return new
``Parser`` instances closing over their inputs. There is no inheritance
hierarchy and no mutable field: a parser may be stored, reused and run from
any number of threads.

Invariant:
    A parser that fails without having consumed input must return the
    state it was given. ``optional``, ``and_then_keep_right`` and ``many``
    do not rewind on failure themselves and rely on this.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from combilex.result import Result
from combilex.state import ParseState

__all__ = ["ParseFn", "Parser", "Step"]

type Step[T] = tuple[ParseState, Result[T, str]]
type ParseFn[T] = Callable[[ParseState], Step[T]]


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Immutable parser value.

    Attributes:
        fn: The state transition
        name: Description used in repr and debug logs

    Example:
        >>> p = literal("ab")
        >>> p(ParseState("abc"))
        (ParseState(position=2, remaining='c'), Ok(value='ab'))
    """

    fn: ParseFn[T]
    name: str = "parser"

    def __call__(self, state: ParseState) -> Step[T]:
        return self.fn(state)

    def named(self, name: str) -> Parser[T]:
        """Return the same parser under a different name."""
        return Parser(self.fn, name)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"
