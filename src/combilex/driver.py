"""Driver: run a composed parser over an input text.

``run()`` is the single entry point. It seeds the initial state, executes
the root parser and converts its plain-text error into a positioned
``ParseError``. Nothing else in combilex produces a ``ParseError``.

Security:
    Inputs longer than ``max_source_size`` characters are rejected with
    ValueError before parsing, since the whole input is held in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from combilex.constants import MAX_SOURCE_SIZE
from combilex.diagnostics import (
    Diagnostic,
    DiagnosticFormatter,
    ErrorTemplate,
    ParseFailedError,
    SourceSpan,
)
from combilex.parser import Parser
from combilex.result import Err, Ok, Result
from combilex.state import ParseState

__all__ = ["ParseError", "run", "run_or_raise"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseError:
    """Positioned failure of the root parser.

    Attributes:
        description: Error text from the parser that gave up
        position: Offset into the original input where no further progress
            was possible
        source: The original input (excluded from equality and repr; used
            for line:column reporting)

    Example:
        >>> error = ParseError("expected ']'", 6, source="[a]\\n[b")
        >>> error.format_error()
        "2:3: expected ']'"
    """

    description: str
    position: int
    source: str = field(default="", repr=False, compare=False)

    @property
    def line(self) -> int:
        return self.line_col[0]

    @property
    def column(self) -> int:
        return self.line_col[1]

    @property
    def line_col(self) -> tuple[int, int]:
        """1-indexed (line, column) of ``position`` in ``source``."""
        return ParseState(self.source, self.position).compute_line_col()

    def format_error(self) -> str:
        """Format as ``line:column: description``."""
        line, col = self.line_col
        return f"{line}:{col}: {self.description}"

    def format_with_context(self, formatter: DiagnosticFormatter | None = None) -> str:
        """Render as a diagnostic showing the failing line and a caret.

        Args:
            formatter: Rendering options (default: no color, two lines of
                context)

        Example:
            >>> print(ParseError("expected =", 8, source="[main]\\nkey").format_with_context())
            error[PARSE_FAILED]: expected =
             --> line 2, column 2
              |
            1 | [main]
            2 | key
              |  ^
              = help: Check the input near the reported position
        """
        return (formatter or DiagnosticFormatter()).format(self.to_diagnostic(), self.source)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured Diagnostic spanning the offending character."""
        line, col = self.line_col
        end = max(min(self.position + 1, len(self.source)), self.position)
        span = SourceSpan(start=self.position, end=end, line=line, column=col)
        return ErrorTemplate.parse_failed(self.description, span)


def _check_size(text: str, max_source_size: int | None) -> None:
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if limit > 0 and len(text) > limit:
        raise ValueError(ErrorTemplate.source_too_large(len(text), limit).message)


def run[T](
    parser: Parser[T],
    text: str,
    *,
    max_source_size: int | None = None,
) -> Result[T, ParseError]:
    """Run ``parser`` over ``text``.

    Args:
        parser: Root parser of the grammar
        text: Complete input
        max_source_size: Maximum input length in characters (default:
            MAX_SOURCE_SIZE). 0 disables the check.

    Returns:
        ``Ok(value)`` on success, or ``Err(ParseError)`` positioned at the
        state the root parser returned when it failed. Unconsumed trailing
        input is not an error.

    Raises:
        ValueError: If ``text`` exceeds ``max_source_size``
    """
    _check_size(text, max_source_size)
    logger.debug("run: %s on %d characters", parser.name, len(text))

    final_state, result = parser(ParseState.initial(text))
    match result:
        case Ok(value):
            logger.debug("run: succeeded at position %d", final_state.position)
            return Ok(value)
        case Err(description):
            logger.debug(
                "run: failed at position %d: %s", final_state.position, description
            )
            return Err(ParseError(description, final_state.position, source=text))


def run_or_raise[T](
    parser: Parser[T],
    text: str,
    *,
    max_source_size: int | None = None,
) -> T:
    """Run ``parser`` over ``text`` and return the bare value.

    Raises:
        ParseFailedError: If the root parser fails
        ValueError: If ``text`` exceeds ``max_source_size``
    """
    match run(parser, text, max_source_size=max_source_size):
        case Ok(value):
            return value
        case Err(error):
            raise ParseFailedError(error)
