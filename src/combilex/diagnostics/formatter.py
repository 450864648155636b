"""Render diagnostics as compiler-style reports with a source snippet.

Output for a parse failure with its input available::

    error[PARSE_FAILED]: expected =
     --> line 2, column 2
      |
    1 | [main]
    2 | key
      |  ^
      = help: Check the input near the reported position

Without a span (or without the input) only the header and help lines are
produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .codes import Diagnostic, SourceSpan

__all__ = ["DiagnosticFormatter"]

_BOLD_RED = "\033[1;31m"
_RESET = "\033[0m"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic rendering options.

    Attributes:
        color: Highlight the "error" label and the caret in bold red
        context_lines: Lines of input shown before and after the failing line
    """

    color: bool = False
    context_lines: int = 2

    @classmethod
    def for_stream(cls, stream: TextIO, context_lines: int = 2) -> DiagnosticFormatter:
        """Formatter that colors output only when ``stream`` is a terminal."""
        isatty = getattr(stream, "isatty", None)
        return cls(color=bool(isatty and isatty()), context_lines=context_lines)

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Render ``diagnostic``.

        Args:
            diagnostic: Diagnostic to render
            source: Input text the diagnostic's span points into
        """
        span = diagnostic.span
        snippet = self._snippet(span, source) if span is not None and source is not None else []
        pad = " " * self._gutter_width(span, source)

        lines = [f"{self._paint('error')}[{diagnostic.code.name}]: {diagnostic.message}"]
        if span is not None:
            lines.append(f"{pad}--> line {span.line}, column {span.column}")
        lines.extend(snippet)
        if diagnostic.hint:
            lines.append(f"{pad} = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _visible_range(self, span: SourceSpan, source: str) -> tuple[int, int]:
        line_count = source.count("\n") + 1
        first = max(1, span.line - self.context_lines)
        last = min(line_count, span.line + self.context_lines)
        return first, last

    def _gutter_width(self, span: SourceSpan | None, source: str | None) -> int:
        if span is None or source is None:
            return 1
        return len(str(self._visible_range(span, source)[1]))

    def _snippet(self, span: SourceSpan, source: str) -> list[str]:
        source_lines = source.split("\n")
        first, last = self._visible_range(span, source)
        width = len(str(last))
        gutter = " " * width + " |"

        lines = [gutter]
        for number in range(first, last + 1):
            text = source_lines[number - 1]
            lines.append(f"{number:>{width}} | {text}".rstrip())
            if number == span.line:
                caret = " " * (span.column - 1) + self._paint("^" * span.width)
                lines.append(f"{gutter} {caret}")
        return lines

    def _paint(self, text: str) -> str:
        if not self.color:
            return text
        return f"{_BOLD_RED}{text}{_RESET}"
