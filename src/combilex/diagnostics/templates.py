"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!

    Two registers:
        - Matcher and combinator failures are plain text. They travel inside
          ``Err`` values between parsers and are never raised.
        - Driver-level failures are ``Diagnostic`` objects with a code and a
          span, built only once the root parser has given up.
    """

    # =========================================================================
    # MATCHER TEXT
    # =========================================================================

    @staticmethod
    def expected_literal(expected: str) -> str:
        """Literal prefix did not match."""
        return f"expected {expected}"

    @staticmethod
    def expected_digit(found: str) -> str:
        """Current character is not an ASCII digit.

        Args:
            found: Character found, or the end-of-input marker text
        """
        return f"expected a digit, got {found}"

    @staticmethod
    def expected_identifier_char(found: str) -> str:
        """Current character is not an identifier character.

        Args:
            found: Character found, or the end-of-input marker text
        """
        return f"expected an identifier character, got {found}"

    @staticmethod
    def expected_any_char() -> str:
        """Consumption attempted on an empty remainder."""
        return "expected any character"

    @staticmethod
    def no_choice_matched() -> str:
        """Every alternative of a choice failed."""
        return "failed to match any of the choices"

    # =========================================================================
    # DRIVER DIAGNOSTICS
    # =========================================================================

    @staticmethod
    def parse_failed(description: str, span: SourceSpan | None) -> Diagnostic:
        """Root parser failed.

        Args:
            description: Error text produced by the failing parser
            span: Location where no further progress was possible

        Returns:
            Diagnostic for PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=description,
            span=span,
            hint="Check the input near the reported position",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character access past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Input rejected by the size limit.

        Args:
            size: Length of the rejected input in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Pass max_source_size to run() to raise the limit, or 0 to disable it",
        )
