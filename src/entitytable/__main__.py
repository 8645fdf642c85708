#!/usr/bin/env python3
"""Command-line interface for entitytable."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from .builder import build_prefix_map, summarize
from .emit import FORMATS, render
from .errors import EntityTableError, SourceUnreadable
from .loader import load_references, parse_references, references_from_html5


def _get_version() -> str:
    try:
        return version("entitytable")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="entitytable",
        description="Build a prefix-closed named character reference table.",
        epilog=(
            "Examples:\n"
            "  entitytable entities.json > named_entities.py\n"
            "  curl -s https://html.spec.whatwg.org/entities.json | entitytable - --format json\n"
            "  entitytable --html5 --keep-semicolon --stats -o named_entities.py\n"
            "\n"
            "If you don't have the 'entitytable' command available, use:\n"
            "  python -m entitytable ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="entities.json file to read, or '-' to read from stdin",
    )
    parser.add_argument(
        "--html5",
        action="store_true",
        help="Use Python's html.entities.html5 table instead of a file",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="python",
        help="Output format (default: python)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write (default: stdout)",
    )
    parser.add_argument(
        "--name",
        default="NAMED_ENTITIES",
        help="Python-only: name of the generated dict (default: NAMED_ENTITIES)",
    )
    parser.add_argument(
        "--keep-semicolon",
        action="store_true",
        help="Keep the trailing ';' so 'amp;' and 'amp' are separate keys",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a name is defined twice with different codepoints",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a summary of the table to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"entitytable {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path and not args.html5:
        parser.print_help(sys.stderr)
        raise SystemExit(1)
    if args.path and args.html5:
        parser.error("give either a path or --html5, not both")
    if not args.name.isidentifier():
        parser.error(f"--name must be a Python identifier, got {args.name!r}")

    return args


def _read_references(args: argparse.Namespace):
    if args.html5:
        return references_from_html5()
    if args.path == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise SourceUnreadable(f"<stdin> is not valid text: {e.reason}") from e
        return parse_references(text, source="<stdin>")
    return load_references(args.path)


def _write_output(path: str | None, output: str) -> None:
    if not path:
        sys.stdout.write(output)
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(output)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    try:
        references = _read_references(args)
        table = build_prefix_map(
            references,
            strict=args.strict,
            require_marker=not args.html5,
            keep_terminator=args.keep_semicolon,
        )
    except EntityTableError as e:
        print(f"entitytable: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    output = render(table, fmt=args.format, name=args.name)
    try:
        _write_output(args.output, output)
    except OSError as e:
        print(f"entitytable: can't write {args.output or '<stdout>'}: {e.strerror or e}", file=sys.stderr)
        raise SystemExit(2) from e

    if args.stats:
        stats = summarize(table)
        print(
            f"{len(references)} references -> {stats.entries} keys "
            f"({stats.matches} entities, {stats.prefixes} prefixes); "
            f"longest key {stats.longest_key!r}",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
