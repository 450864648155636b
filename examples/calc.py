"""Calculator Example - Arithmetic Expressions With combilex.

Builds a small arithmetic grammar from combilex combinators and evaluates
it while parsing:

    expr   ::= term (("+" | "-") term)*
    term   ::= factor (("*" | "/") factor)*
    factor ::= number | "(" expr ")"

Operators are left-associative. Whitespace (spaces and newlines) is allowed
between tokens.

Usage:
    python examples/calc.py "1 + 2 * (3 - 1)"

Python 3.13+.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable

from combilex import (
    Err,
    Ok,
    Parser,
    ParseFailedError,
    ParseState,
    and_then_keep_both,
    and_then_keep_left,
    and_then_keep_right,
    bind,
    choice,
    fail,
    lazy,
    literal,
    map_value,
    run_or_raise,
    succeed,
    take_while,
)
from combilex.diagnostics import DiagnosticFormatter
from combilex.parser import Step
from combilex.primitives import is_digit

type Number = int | float
type BinaryOp = Callable[[Number, Number], Number]


def is_space(ch: str) -> bool:
    return ch in (" ", "\n")


spaces = take_while(is_space)


def token[T](p: Parser[T]) -> Parser[T]:
    """Parse ``p`` and skip the whitespace after it."""
    return and_then_keep_left(p, spaces)


def _end_of_input(state: ParseState) -> Step[None]:
    if state.is_eof:
        return state, Ok(None)
    return state, Err(f"unexpected {state.current!r}")


end_of_input: Parser[None] = Parser(_end_of_input, "end_of_input")

number: Parser[Number] = token(
    bind(
        lambda digits: succeed(int(digits)) if digits else fail("expected a number"),
        take_while(is_digit),
    )
).named("number")


def operators(table: dict[str, BinaryOp]) -> Parser[BinaryOp]:
    return choice([token(map_value(lambda s: table[s], literal(s))) for s in table])


def left_chain(operand: Parser[Number], op: Parser[BinaryOp]) -> Parser[Number]:
    """Left-associative chain: operand (op operand)*.

    Folds in a loop, so the stack depth does not grow with the number of
    operands. ``many`` is not used here because a chain that ends the input
    would come back with its last operation first.
    """
    step = and_then_keep_both(op, operand)

    def parse_chain(state: ParseState) -> Step[Number]:
        state, result = operand(state)
        if isinstance(result, Err):
            return state, result
        acc = result.value
        while True:
            next_state, pair = step(state)
            if isinstance(pair, Err):
                return state, Ok(acc)
            apply, rhs = pair.value
            acc = apply(acc, rhs)
            state = next_state

    return Parser(parse_chain, f"left_chain({operand.name})")


add_op = operators({"+": operator.add, "-": operator.sub})
mul_op = operators({"*": operator.mul, "/": operator.truediv})

expr: Parser[Number] = lazy(lambda: left_chain(term, add_op), "expr")

parenthesized = and_then_keep_right(
    token(literal("(")), and_then_keep_left(expr, token(literal(")")))
)

factor = choice([number, parenthesized])

term = left_chain(factor, mul_op)

calculator = and_then_keep_left(and_then_keep_right(spaces, expr), end_of_input)


def evaluate(source: str) -> Number:
    """Evaluate an arithmetic expression.

    Raises:
        ParseFailedError: If the expression does not parse
        ZeroDivisionError: If a divisor evaluates to zero
    """
    return run_or_raise(calculator, source)


def main() -> None:
    source = sys.argv[1] if len(sys.argv) > 1 else "1 + 1"
    try:
        print(evaluate(source))
    except ParseFailedError as e:
        formatter = DiagnosticFormatter.for_stream(sys.stderr)
        print(e.parse_error.format_with_context(formatter), file=sys.stderr)
        sys.exit(1)
    except ZeroDivisionError:
        print("division by zero", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("expression nested too deeply", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
