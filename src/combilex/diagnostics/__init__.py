"""Diagnostic system for combilex errors.

Structured diagnostics with codes, spans and hints, the text of every
matcher error message, and a compiler-style renderer that shows the failing
line of the input.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import CombilexError, ParseFailedError
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "CombilexError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ParseFailedError",
    "SourceSpan",
]
