"""Two-variant value types: Result (Ok / Err) and Option (Some / Nothing).

Failures are ordinary return values in combilex, never exceptions. Every
parser returns a ``Result`` and optional matches are reported with an
``Option``. All variants are frozen dataclasses, so they compare by value
and destructure with ``match``:

    >>> match Ok(3):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(error)
    3

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, NoReturn

__all__ = [
    "NOTHING",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Some",
]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_or[D](self, default: D) -> T:  # noqa: ARG002
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying an error.

    Below the driver the error is plain descriptive text. The driver is the
    only place that upgrades it to a positioned ``ParseError``.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value to return.

        Raises:
            ValueError: Always
        """
        msg = f"Called unwrap() on Err: {self.error}"
        raise ValueError(msg)

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E] = Ok[T] | Err[E]


@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present optional value. ``Some(None)`` and ``Some(False)`` are present."""

    value: T


@dataclass(frozen=True, slots=True)
class Nothing:
    """Absent optional value.

    A distinct variant rather than a flag next to a nullable payload, so an
    absent value can never be confused with a present falsy one. Use the
    ``NOTHING`` singleton; all instances compare equal anyway.
    """

    def __bool__(self) -> Literal[False]:
        return False


NOTHING: Final[Nothing] = Nothing()


type Option[T] = Some[T] | Nothing
