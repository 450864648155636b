"""Immutable parse state.

A ``ParseState`` is the original input plus an absolute offset into it.
Every parser receives one and returns a new one; nothing is ever mutated.

Design Philosophy:
    - State is immutable (frozen dataclass)
    - The remaining input is an offset into one shared buffer, never a
      fresh substring per step (avoids quadratic copying on long inputs)
    - EOF is a state (is_eof), not a return value
    - Line:column computed on demand (O(n), only for error reporting)

Line Ending Support:
    ``\\n`` is the line delimiter. CRLF input works because the ``\\n`` is
    still present. CR-only input reports every character on line 1.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from combilex.diagnostics import ErrorTemplate

__all__ = ["ParseState"]


@dataclass(frozen=True, slots=True)
class ParseState:
    """Remaining input plus absolute position.

    Invariant:
        ``position`` equals the number of characters consumed from
        ``source``; ``remaining`` is exactly ``source[position:]``.

    Example:
        >>> state = ParseState("hello", 0)
        >>> state.current
        'h'
        >>> state.advance(2).remaining
        'llo'
        >>> state.remaining  # Original unchanged
        'hello'
    """

    source: str
    position: int = 0

    @classmethod
    def initial(cls, source: str) -> ParseState:
        """State at the start of ``source``."""
        return cls(source, 0)

    @property
    def remaining(self) -> str:
        """Unconsumed suffix of the input.

        Materializes a substring; matchers use ``startswith`` and
        ``current`` instead so that parsing itself never copies.
        """
        return self.source[self.position :]

    @property
    def remaining_length(self) -> int:
        return max(len(self.source) - self.position, 0)

    @property
    def is_eof(self) -> bool:
        """True if no input remains."""
        return self.position >= len(self.source)

    @property
    def current(self) -> str:
        """Character at the current position.

        Raises:
            EOFError: If no input remains
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.position)
            raise EOFError(diagnostic.message)
        return self.source[self.position]

    def peek(self, offset: int = 0) -> str | None:
        """Character at ``position + offset``, or None past the end."""
        target = self.position + offset
        if target >= len(self.source):
            return None
        return self.source[target]

    def starts_with(self, prefix: str) -> bool:
        """Check whether the remaining input starts with ``prefix``.

        Compares in place against the shared buffer; running off the end is
        simply a mismatch.
        """
        return self.source.startswith(prefix, self.position)

    def advance(self, count: int = 1) -> ParseState:
        """Return a new state ``count`` characters further on.

        Clamped to the end of input so position never exceeds the source
        length.
        """
        new_position = min(self.position + count, len(self.source))
        return ParseState(self.source, new_position)

    def slice_to(self, end_position: int) -> str:
        """Source text from the current position up to ``end_position``."""
        return self.source[self.position : end_position]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-indexed (line, column) for the current position.

        Example:
            >>> ParseState("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        position = min(self.position, len(self.source))
        line = self.source.count("\n", 0, position) + 1
        last_newline = self.source.rfind("\n", 0, position)
        col = position - last_newline if last_newline >= 0 else position + 1
        return (line, col)

    def __repr__(self) -> str:
        preview = self.source[self.position : self.position + 20]
        suffix = "..." if self.remaining_length > 20 else ""
        return f"ParseState(position={self.position}, remaining={preview + suffix!r})"
