"""Tests for combilex.primitives.

Every primitive that fails must return the exact state it was given; the
combinators that do not rewind on failure depend on it.
"""

from __future__ import annotations

from hypothesis import event, example, given
from hypothesis import strategies as st

from combilex import Err, Ok, ParseState, run
from combilex.primitives import (
    any_char,
    digit,
    identifier_char,
    is_digit,
    is_identifier_char,
    literal,
    take_while,
)
from tests.strategies import failing_primitive_parsers, predicates, small_text, source_text

# ============================================================================
# CHARACTER CLASSIFICATION
# ============================================================================


class TestCharacterClassification:
    """Character classes used by the single-character matchers."""

    @given(ch=st.characters(min_codepoint=48, max_codepoint=57))
    def test_ascii_digits(self, ch: str) -> None:
        """ASCII 0-9 are digits."""
        assert is_digit(ch)

    def test_unicode_digits_rejected(self) -> None:
        """Superscripts and other Unicode digits are not accepted."""
        assert not is_digit("²")
        assert not is_digit("٣")

    @given(ch=st.sampled_from("abcxyzABCXYZ?_"))
    def test_identifier_chars(self, ch: str) -> None:
        """ASCII letters plus ? and _ are identifier characters."""
        assert is_identifier_char(ch)

    @given(ch=st.sampled_from("0123456789-. \né"))
    def test_non_identifier_chars(self, ch: str) -> None:
        """Digits, punctuation, whitespace and non-ASCII letters are not."""
        assert not is_identifier_char(ch)


# ============================================================================
# LITERAL
# ============================================================================


class TestLiteral:
    """literal(s) matches an exact prefix."""

    def test_match_consumes_literal(self) -> None:
        """A matching prefix is consumed and returned."""
        state, result = literal("ab")(ParseState("abc"))

        assert result == Ok("ab")
        assert state == ParseState("abc", 2)

    def test_mismatch_reports_expected(self) -> None:
        """A mismatch names the expected literal and leaves the state alone."""
        start = ParseState("ac")
        state, result = literal("ab")(start)

        assert result == Err("expected ab")
        assert state is start

    def test_short_input_is_mismatch(self) -> None:
        """Running off the end of input is a mismatch, not an exception."""
        start = ParseState("a")
        state, result = literal("abc")(start)

        assert result == Err("expected abc")
        assert state is start

    def test_empty_input(self) -> None:
        """Matching against empty input fails cleanly."""
        _, result = literal("x")(ParseState(""))

        assert result == Err("expected x")

    def test_match_mid_input(self) -> None:
        """Matching works from any position, not only the start."""
        state, result = literal("cd")(ParseState("abcd", 2))

        assert result == Ok("cd")
        assert state.is_eof

    @given(prefix=small_text, rest=small_text)
    @example(prefix="", rest="")
    def test_prefix_always_matches(self, prefix: str, rest: str) -> None:
        """PROPERTY: literal(s) succeeds on any input starting with s."""
        event(f"empty_prefix={not prefix}")
        state, result = literal(prefix)(ParseState(prefix + rest))

        assert result == Ok(prefix)
        assert state.position == len(prefix)
        assert state.remaining == rest


# ============================================================================
# DIGIT
# ============================================================================


class TestDigit:
    """digit() matches exactly one ASCII digit."""

    def test_match(self) -> None:
        """One digit is consumed."""
        state, result = digit()(ParseState("42"))

        assert result == Ok("4")
        assert state.position == 1

    def test_mismatch_names_found_character(self) -> None:
        """A non-digit is reported in the error text."""
        start = ParseState("a1")
        state, result = digit()(start)

        assert result == Err("expected a digit, got a")
        assert state is start

    def test_empty_input(self) -> None:
        """Empty input reports end of input."""
        start = ParseState("")
        state, result = digit()(start)

        assert result == Err("expected a digit, got end of input")
        assert state is start

    def test_unicode_digit_rejected(self) -> None:
        """Unicode digits fail."""
        _, result = digit()(ParseState("²"))

        assert isinstance(result, Err)


# ============================================================================
# IDENTIFIER CHARACTER
# ============================================================================


class TestIdentifierChar:
    """identifier_char() matches one letter, ? or _."""

    def test_letter(self) -> None:
        """A letter is consumed."""
        state, result = identifier_char()(ParseState("ab"))

        assert result == Ok("a")
        assert state.position == 1

    def test_whitelisted_characters(self) -> None:
        """? and _ are accepted."""
        assert identifier_char()(ParseState("?"))[1] == Ok("?")
        assert identifier_char()(ParseState("_"))[1] == Ok("_")

    def test_single_character_per_call(self) -> None:
        """Only one character is consumed even if more would match."""
        state, _ = identifier_char()(ParseState("abc"))

        assert state.remaining == "bc"

    def test_mismatch(self) -> None:
        """A digit is rejected with unchanged state."""
        start = ParseState("1a")
        state, result = identifier_char()(start)

        assert result == Err("expected an identifier character, got 1")
        assert state is start

    def test_empty_input(self) -> None:
        """Empty input fails cleanly."""
        _, result = identifier_char()(ParseState(""))

        assert result == Err("expected an identifier character, got end of input")


# ============================================================================
# TAKE WHILE
# ============================================================================


class TestTakeWhile:
    """take_while(p) consumes the longest satisfying prefix."""

    def test_consumes_prefix(self) -> None:
        """Characters are consumed until the predicate fails."""
        state, result = take_while(str.isdigit)(ParseState("123abc"))

        assert result == Ok("123")
        assert state.remaining == "abc"

    def test_empty_prefix(self) -> None:
        """No match yields the empty string and the same position."""
        state, result = take_while(str.isdigit)(ParseState("abc"))

        assert result == Ok("")
        assert state.position == 0

    def test_empty_input(self) -> None:
        """Empty input succeeds with the empty string."""
        assert run(take_while(str.isdigit), "") == Ok("")

    def test_consumes_to_end(self) -> None:
        """A predicate true everywhere consumes the whole input."""
        state, result = take_while(lambda _c: True)(ParseState("xyz"))

        assert result == Ok("xyz")
        assert state.is_eof

    @given(source=source_text, predicate=predicates)
    def test_never_fails(self, source: str, predicate) -> None:  # type: ignore[no-untyped-def]
        """PROPERTY: take_while never fails and consumes a maximal prefix."""
        state, result = take_while(predicate)(ParseState(source))

        assert isinstance(result, Ok)
        assert source.startswith(result.value)
        assert all(predicate(c) for c in result.value)
        assert state.position == len(result.value)
        if not state.is_eof:
            assert not predicate(state.current)


# ============================================================================
# ANY CHAR
# ============================================================================


class TestAnyChar:
    """any_char consumes one character of any kind."""

    def test_match(self) -> None:
        """One character is consumed."""
        state, result = any_char(ParseState("]x"))

        assert result == Ok("]")
        assert state.remaining == "x"

    def test_empty_input(self) -> None:
        """Empty input fails with unchanged state."""
        start = ParseState("")
        state, result = any_char(start)

        assert result == Err("expected any character")
        assert state is start

    def test_at_end_of_longer_input(self) -> None:
        """Exhaustion mid-way through the source is detected."""
        _, result = any_char(ParseState("ab", 2))

        assert result == Err("expected any character")


# ============================================================================
# UNCHANGED STATE ON FAILURE
# ============================================================================


class TestFailureLeavesStateUnchanged:
    """Every failing primitive reports the pre-attempt state."""

    @given(parser=failing_primitive_parsers(), source=small_text)
    def test_failure_returns_input_state(self, parser, source: str) -> None:  # type: ignore[no-untyped-def]
        """INVARIANT: a failing primitive returns the state it was given."""
        start = ParseState(source)
        state, result = parser(start)
        event(f"outcome={'ok' if isinstance(result, Ok) else 'err'}")

        if isinstance(result, Err):
            assert state == start
        else:
            assert state.position > start.position or not result.value
