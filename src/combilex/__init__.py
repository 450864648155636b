"""combilex - parser combinators for building recursive-descent parsers.

A small set of primitive matchers plus composable combinators. A grammar is
assembled by combining functions instead of hand-writing control flow, and
``run()`` turns an input text into a typed value or a positioned error.

Public API:
    run - Run a parser over a text, returning Ok(value) or Err(ParseError)
    run_or_raise - Same, but returns the bare value or raises ParseFailedError
    Parser - Immutable parser value (ParseState -> (ParseState, Result))
    ParseState - Immutable input + absolute position
    Ok, Err, Some, NOTHING - Result and Option variants

Primitives:
    literal, digit, identifier_char, take_while, any_char

Combinators:
    map_value, and_then_keep_right, and_then_keep_left, and_then_keep_both,
    sequence, between, reduce, optional, many, choice, ignore_success,
    succeed, fail, bind, lazy

Exceptions:
    CombilexError - Base exception class
    ParseFailedError - Raised by run_or_raise on parse failure

Submodules:
    combilex.diagnostics - Diagnostic codes, templates and formatting
    combilex.constants - Size limits and character classes
"""

from .combinators import (
    and_then_keep_both,
    and_then_keep_left,
    and_then_keep_right,
    between,
    bind,
    choice,
    fail,
    ignore_success,
    lazy,
    many,
    map_value,
    optional,
    reduce,
    sequence,
    succeed,
)
from .diagnostics import CombilexError, ParseFailedError
from .driver import ParseError, run, run_or_raise
from .parser import Parser
from .primitives import any_char, digit, identifier_char, literal, take_while
from .result import NOTHING, Err, Nothing, Ok, Option, Result, Some
from .state import ParseState

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combilex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NOTHING",
    "CombilexError",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "ParseError",
    "ParseFailedError",
    "ParseState",
    "Parser",
    "Result",
    "Some",
    "__version__",
    "and_then_keep_both",
    "and_then_keep_left",
    "and_then_keep_right",
    "any_char",
    "between",
    "bind",
    "choice",
    "digit",
    "fail",
    "identifier_char",
    "ignore_success",
    "lazy",
    "literal",
    "many",
    "map_value",
    "optional",
    "reduce",
    "run",
    "run_or_raise",
    "sequence",
    "succeed",
    "take_while",
]
