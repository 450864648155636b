"""combilex exception hierarchy with structured diagnostics.

Parsers never raise: failures travel as ``Err`` values. These exceptions
exist for callers that prefer raising at the outermost boundary, via
``run_or_raise()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from combilex.driver import ParseError

__all__ = ["CombilexError", "ParseFailedError"]


class CombilexError(Exception):
    """Base exception for all combilex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic, source: str | None = None) -> None:
        """Initialize CombilexError.

        Args:
            message: Error message string OR Diagnostic object
            source: Input text a Diagnostic's span points into; included in
                the rendered message as a snippet
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error(source))
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(CombilexError):
    """Root parser failed to match the input.

    Raised by ``run_or_raise()``; callers of ``run()`` holding an
    ``Err(ParseError)`` may raise it themselves. The message shows the
    failing line of the input with a caret.

    Attributes:
        parse_error: The positioned error produced by the driver
    """

    def __init__(self, parse_error: ParseError) -> None:
        super().__init__(parse_error.to_diagnostic(), parse_error.source)
        self.parse_error = parse_error

    @property
    def position(self) -> int:
        return self.parse_error.position
