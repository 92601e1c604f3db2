"""Command line interface for the casekit converters."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .naming import convert, describe
from .schema import CaseVariant


def _read_lines(source: str) -> Iterator[str]:
    if source == "-":
        for line in sys.stdin:
            yield line.rstrip("\r\n")
        return

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(path)
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casekit", description="Convert text between casing conventions"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log how each input is tokenized",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    helps = {
        CaseVariant.CAMEL: "convert to lower camelCase",
        CaseVariant.DOT: "convert to dot.case",
        CaseVariant.KEBAB: "convert whitespace separated words to kebab-case",
    }
    for variant, help_text in helps.items():
        sub = subparsers.add_parser(variant.value, help=help_text)
        sub.add_argument("text", nargs="*", help="Strings to convert")
        sub.add_argument(
            "-f",
            "--file",
            metavar="PATH",
            help="Convert every line of PATH instead ('-' reads stdin)",
        )
        sub.add_argument(
            "--json",
            action="store_true",
            help="Emit one JSON document per input with the extracted tokens",
        )

    return parser


def _emit(values: Iterable[str], variant: CaseVariant, *, as_json: bool) -> None:
    for value in values:
        if as_json:
            sys.stdout.write(describe(value, variant).model_dump_json())
        else:
            sys.stdout.write(convert(value, variant))
        sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.file and args.text:
        parser.error("pass either TEXT arguments or --file, not both")
    if not args.file and not args.text:
        parser.error("nothing to convert")

    variant = CaseVariant(args.command)
    values = _read_lines(args.file) if args.file else args.text
    _emit(values, variant, as_json=args.json)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
