"""Command line interface for texshort."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Iterator

from .core.errors import ConversionError
from .core.logging import get_context_logger, setup_logging
from .pipeline import Converter

logger = get_context_logger(__name__, component="cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="texshort",
        description="Convert ASCII math shorthand into LaTeX markup.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to convert. Read from FILE or stdin when omitted.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read one expression per line from this file (not with EXPR arguments).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per expression.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding to use when reading FILE (default: utf-8).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress log output, including conversion errors.",
    )
    return parser


def _lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield line.rstrip("\n")


def _inputs(args: argparse.Namespace) -> Iterator[str]:
    if args.expressions:
        yield from args.expressions
    elif args.file is not None:
        with open(args.file, encoding=args.encoding) as f:
            yield from _lines(f)
    else:
        yield from _lines(sys.stdin)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.expressions and args.file is not None:
        parser.error("give expressions or --file, not both")

    setup_logging(level="CRITICAL" if args.quiet else args.log_level)
    converter = Converter()

    failed = False
    try:
        for expression in _inputs(args):
            if not expression.strip():
                if not args.json:
                    print()
                continue
            try:
                output = converter.convert(expression)
            except ConversionError as exc:
                failed = True
                logger.error(
                    "Conversion failed: %s",
                    exc.message,
                    extra_data={
                        "input": expression,
                        "error_type": exc.__class__.__name__,
                        **exc.details,
                    },
                )
                if args.json:
                    print(json.dumps({"input": expression, **exc.to_dict()}))
                else:
                    # Keep output lines aligned with input lines
                    print()
                continue

            if args.json:
                print(json.dumps({"input": expression, "output": output}))
            else:
                print(output)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
