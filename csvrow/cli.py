"""Command line front end for csvrow.

Usage:
    csvrow split [input_file] [-d DELIM] [--literal] [--pretty] [-o OUTPUT]
    csvrow escape VALUE [VALUE ...] [-d DELIM]

Examples:
    csvrow split testdata/months.csv
    printf 'a;"b;c"\\n' | csvrow split -d ';'
    csvrow escape 'say "hi"' plain
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from csvrow.escape import join_row
from csvrow.models import DEFAULT_DELIMITER, Dialect
from csvrow.tokenizer import CsvRow

logger = logging.getLogger(__name__)

# Names accepted for delimiters that are awkward to type in a shell
DELIMITER_ALIASES: dict[str, str] = {
    "\\t": "\t",
    "tab": "\t",
    "space": " ",
}


def parse_delimiter(value: str) -> str:
    """Argparse type for the delimiter option."""
    delimiter = DELIMITER_ALIASES.get(value, value)
    try:
        Dialect(delimiter=delimiter)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return delimiter


def split_lines(text: str) -> list[str]:
    """Split document text into lines for independent tokenization.

    Line endings are normalized, and the empty remainder after a final
    line terminator is dropped.

    Examples
    --------
    >>> split_lines("a,b\\r\\nc\\n")
    ['a,b', 'c']
    >>> split_lines("")
    []
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def tokenize_text(text: str, dialect: Dialect) -> list[list[str]]:
    """Tokenize every line of ``text`` with the given dialect."""
    return [list(CsvRow.from_dialect(line, dialect)) for line in split_lines(text)]


def format_rows(rows: list[list[str]], pretty: bool = False) -> str:
    """Render tokenized rows as JSON Lines, or one indented document."""
    if pretty:
        return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
    return "".join(json.dumps(row, ensure_ascii=False) + "\n" for row in rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvrow",
        description="Split CSV rows into fields, or escape values into a row",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s split testdata/months.csv
  %(prog)s split data.csv -d ';' --literal -o fields.jsonl
  %(prog)s escape 'say "hi"' plain
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="Tokenize each line of a file")
    split_parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Input file (default: stdin)",
    )
    split_parser.add_argument(
        "-d", "--delimiter",
        type=parse_delimiter,
        default=DEFAULT_DELIMITER,
        help="Field delimiter (default: ','; '\\t' or 'tab' for tab)",
    )
    split_parser.add_argument(
        "--literal",
        action="store_true",
        help="Output fields verbatim, quotes included",
    )
    split_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    split_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Write one indented JSON array of rows instead of JSON Lines",
    )

    escape_parser = subparsers.add_parser("escape", help="Escape values and join them into a row")
    escape_parser.add_argument("values", nargs="+", help="Raw field values")
    escape_parser.add_argument(
        "-d", "--delimiter",
        type=parse_delimiter,
        default=DEFAULT_DELIMITER,
        help="Field delimiter (default: ',')",
    )

    return parser


def run_split(args: argparse.Namespace) -> int:
    if args.input is None:
        logger.debug("Reading rows from stdin")
        text = sys.stdin.read()
    else:
        if not args.input.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1
        logger.debug("Reading rows from %s", args.input)
        try:
            text = args.input.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    dialect = Dialect(delimiter=args.delimiter, literal=args.literal)
    rows = tokenize_text(text, dialect)
    logger.debug("Tokenized %d rows with delimiter %r", len(rows), dialect.delimiter)

    output = format_rows(rows, pretty=args.pretty)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote {len(rows)} rows to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)
    return 0


def run_escape(args: argparse.Namespace) -> int:
    sys.stdout.write(join_row(args.values, args.delimiter) + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("csvrow").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    handlers: dict[str, Any] = {
        "split": run_split,
        "escape": run_escape,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
