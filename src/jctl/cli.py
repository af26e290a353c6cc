"""Command line entry point for jctl."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .errors import JctlError
from .graph import Graph
from .loader import load_settings
from .models import Settings, SortOrder

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

SORT_HELP = """\
sort orders:
  n    By name (alphabetical)
  l    By line count (increasing)
  L    By line count (decreasing)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jctl",
        usage="%(prog)s [-o[nlL]] names",
        description="Show the line counts of files as a bar chart.",
        epilog=SORT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-o", dest="sortorder", metavar="sortorder",
        help="List files in sorted order (n, l or L).",
    )
    parser.add_argument(
        "--config", metavar="FILE",
        help="Read settings from a YAML file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "names", nargs="*",
        help="One or more files. Wildcards are supported.",
    )
    return parser


def print_error(message: str) -> None:
    print(f"jctl: error: {message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args_list:
        parser.print_help()
        return EXIT_SUCCESS

    args = parser.parse_args(args_list)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="jctl: %(levelname)s: %(message)s",
    )

    order = None
    if args.sortorder is not None:
        try:
            order = SortOrder(args.sortorder)
        except ValueError:
            print_error(f"undefined sortorder '{args.sortorder}' for argument '-o'")
            return EXIT_FAILURE

    if not args.names:
        print("jctl: fatal error: no input files", file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = load_settings(args.config) if args.config else Settings()
        output = Graph(settings).run(args.names, order)
    except JctlError as exc:
        print_error(exc.message)
        return EXIT_FAILURE

    sys.stdout.write(output)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
