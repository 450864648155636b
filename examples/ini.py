"""INI Example - Reading INI Files With combilex.

Grammar (whitespace-separated, one section header per group):

    ini     ::= section+
    section ::= "[" name "]" pair+
    pair    ::= key "=" value

Keys and values are runs of non-whitespace characters. Sections and keys
are returned as dictionaries, so the order in which ``many`` reports them
does not matter to callers.

Usage:
    python examples/ini.py settings.ini

Python 3.13+.
"""

from __future__ import annotations

import sys
from pathlib import Path

from combilex import (
    Err,
    Ok,
    Parser,
    ParseFailedError,
    and_then_keep_both,
    and_then_keep_left,
    and_then_keep_right,
    any_char,
    literal,
    many,
    map_value,
    run,
    take_while,
)
from combilex.diagnostics import DiagnosticFormatter

type Section = tuple[str, list[tuple[str, str]]]

SAMPLE = """\
[server]
host = localhost
port = 8080

[client]
retries = 3
"""


def is_space(ch: str) -> bool:
    return ch in (" ", "\t", "\r", "\n")


def is_name_char(ch: str) -> bool:
    return not is_space(ch) and ch not in ("=", "[", "]")


spaces = take_while(is_space)

name = take_while(is_name_char)

# "[" name "]", the closing bracket consumed as any character
section_name: Parser[str] = and_then_keep_left(
    and_then_keep_right(and_then_keep_right(spaces, literal("[")), take_while(lambda c: c != "]")),
    any_char,
).named("section_name")

pair: Parser[tuple[str, str]] = and_then_keep_both(
    and_then_keep_left(
        and_then_keep_left(and_then_keep_left(and_then_keep_right(spaces, name), spaces), literal("=")),
        spaces,
    ),
    and_then_keep_left(name, spaces),
).named("pair")

section: Parser[Section] = map_value(
    lambda both: (both[0], [entry.value for entry in both[1]]),
    and_then_keep_both(section_name, many(pair)),
).named("section")

ini: Parser[list[Ok[Section]]] = many(section)


def read_ini(text: str) -> dict[str, dict[str, str]]:
    """Parse INI text into ``{section: {key: value}}``.

    Raises:
        ParseFailedError: If the text does not parse
    """
    match run(ini, text):
        case Ok(sections):
            return {entry.value[0]: dict(entry.value[1]) for entry in sections}
        case Err(error):
            raise ParseFailedError(error)


def main() -> None:
    text = Path(sys.argv[1]).read_text(encoding="utf-8") if len(sys.argv) > 1 else SAMPLE
    try:
        config = read_ini(text)
    except ParseFailedError as e:
        formatter = DiagnosticFormatter.for_stream(sys.stderr, context_lines=1)
        print(e.parse_error.format_with_context(formatter), file=sys.stderr)
        sys.exit(1)
    for section_title, entries in config.items():
        print(f"[{section_title}]")
        for key, value in entries.items():
            print(f"  {key} = {value}")


if __name__ == "__main__":
    main()
