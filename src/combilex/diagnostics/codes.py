"""Diagnostic codes and data structures.

A ``Diagnostic`` is the structured form of a failure that reaches a caller:
a root parse failure, or an input rejected before parsing.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes.

    1000-1999: the root parser failed on the input
    2000-2999: the input was rejected before parsing
    """

    PARSE_FAILED = 1001
    UNEXPECTED_EOF = 1002

    SOURCE_TOO_LARGE = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open character range ``[start, end)`` of the input.

    ``line`` and ``column`` locate ``start`` and are 1-indexed. An empty
    span (``start == end``) marks a failure at the end of input.
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            msg = f"SourceSpan offsets must satisfy 0 <= start <= end, got [{self.start}, {self.end})"
            raise ValueError(msg)
        if self.line < 1 or self.column < 1:
            msg = f"SourceSpan line and column are 1-indexed, got {self.line}:{self.column}"
            raise ValueError(msg)

    @property
    def width(self) -> int:
        """Number of characters covered, at least 1 for display."""
        return max(self.end - self.start, 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured failure report.

    Attributes:
        code: Error code
        message: The failing parser's description, or the rejection reason
        span: Where the failure happened (None when no position applies)
        hint: Suggestion for the caller
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Render with the default formatter.

        Args:
            source: Input text ``span`` points into; when given, the failing
                line is shown with a caret under the span
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)
