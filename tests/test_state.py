"""Tests for ParseState.

Validates the immutable state model: remaining input as an offset into one
shared buffer, EOF handling and line:column computation.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given, settings

from combilex.state import ParseState
from tests.strategies import source_text

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestParseStateBasic:
    """Test basic state construction."""

    def test_initial_state(self) -> None:
        """initial() starts at position 0 with the whole input remaining."""
        state = ParseState.initial("hello")

        assert state.position == 0
        assert state.remaining == "hello"
        assert not state.is_eof

    def test_default_position_is_zero(self) -> None:
        """Position defaults to 0."""
        assert ParseState("abc") == ParseState("abc", 0)

    def test_state_is_immutable(self) -> None:
        """ParseState is a frozen dataclass."""
        state = ParseState("hello", 0)

        with pytest.raises(AttributeError):
            state.position = 3  # type: ignore[misc]

    def test_states_compare_by_value(self) -> None:
        """Two states over the same input and position are equal."""
        assert ParseState("abc", 1) == ParseState("abc", 1)
        assert ParseState("abc", 1) != ParseState("abc", 2)

    def test_repr_shows_position_and_preview(self) -> None:
        """repr shows the position and the start of the remaining input."""
        text = repr(ParseState("abcdefghijklmnopqrstuvwxyz", 1))

        assert "position=1" in text
        assert "bcdefghijklmnopqrstu..." in text


# ============================================================================
# REMAINING INPUT
# ============================================================================


class TestParseStateRemaining:
    """Test remaining input and lookahead."""

    def test_remaining_is_suffix(self) -> None:
        """remaining is the suffix starting at position."""
        assert ParseState("hello", 2).remaining == "llo"

    def test_remaining_empty_at_end(self) -> None:
        """remaining is empty at the end of input."""
        assert ParseState("hello", 5).remaining == ""

    def test_remaining_length(self) -> None:
        """remaining_length never goes negative."""
        assert ParseState("hello", 2).remaining_length == 3
        assert ParseState("hello", 9).remaining_length == 0

    def test_starts_with_matches_in_place(self) -> None:
        """starts_with compares against the buffer at the current position."""
        state = ParseState("xxabc", 2)

        assert state.starts_with("ab")
        assert state.starts_with("")
        assert not state.starts_with("xx")

    def test_starts_with_past_end_is_false(self) -> None:
        """A prefix longer than the remaining input does not match."""
        assert not ParseState("ab", 1).starts_with("bc")

    def test_peek(self) -> None:
        """peek returns a character or None beyond the end."""
        state = ParseState("abc", 1)

        assert state.peek() == "b"
        assert state.peek(1) == "c"
        assert state.peek(2) is None

    def test_slice_to(self) -> None:
        """slice_to extracts text from the current position."""
        assert ParseState("hello world", 6).slice_to(11) == "world"


# ============================================================================
# EOF AND ADVANCE
# ============================================================================


class TestParseStateEOF:
    """Test EOF detection and advancing."""

    def test_empty_source_is_eof(self) -> None:
        """Empty input is at EOF immediately."""
        assert ParseState("", 0).is_eof

    def test_current_raises_at_eof(self) -> None:
        """current raises EOFError at the end of input."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 2"):
            _ = ParseState("ab", 2).current

    def test_advance_returns_new_state(self) -> None:
        """advance leaves the original state untouched."""
        state = ParseState("hello", 0)
        advanced = state.advance(2)

        assert state.position == 0
        assert advanced.position == 2
        assert advanced.source is state.source

    def test_advance_is_clamped(self) -> None:
        """advance never moves past the end of input."""
        assert ParseState("abc", 2).advance(10).position == 3


# ============================================================================
# LINE AND COLUMN
# ============================================================================


class TestParseStateLineCol:
    """Test line:column computation for error reporting."""

    def test_start_of_input(self) -> None:
        """Position 0 is line 1, column 1."""
        assert ParseState("abc", 0).compute_line_col() == (1, 1)

    def test_second_line(self) -> None:
        """Columns restart after a newline."""
        assert ParseState("ab\ncd", 3).compute_line_col() == (2, 1)
        assert ParseState("ab\ncd", 4).compute_line_col() == (2, 2)

    def test_end_of_input(self) -> None:
        """The end position reports one column past the last character."""
        assert ParseState("ab", 2).compute_line_col() == (1, 3)

    def test_crlf(self) -> None:
        """CRLF input counts lines by LF."""
        assert ParseState("a\r\nb", 3).compute_line_col() == (2, 1)


# ============================================================================
# PROPERTIES
# ============================================================================


class TestParseStateProperties:
    """Property tests for the position/remaining invariant."""

    @given(source=source_text)
    @settings(max_examples=200)
    def test_remaining_matches_position(self, source: str) -> None:
        """INVARIANT: remaining == source[position:] at every step."""
        state = ParseState.initial(source)
        consumed = 0
        while not state.is_eof:
            assert state.remaining == source[consumed:]
            state = state.advance()
            consumed += 1
        assert state.position == len(source)
        assert state.remaining == ""

    @given(source=source_text)
    @settings(max_examples=200)
    def test_current_is_first_remaining_char(self, source: str) -> None:
        """PROPERTY: current is the first character of remaining."""
        assume(source)
        state = ParseState.initial(source)

        assert state.current == state.remaining[0]
