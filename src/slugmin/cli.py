"""Command-line interface entry point for slugmin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from slugmin import __version__, pipelines
from slugmin.config import STYLES
from slugmin.errors import SlugminError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugmin",
        description="Convert text into ASCII slugs (one per argument or stdin line)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "texts",
        nargs="*",
        help="Text to slugify; reads stdin when omitted. Use -- before text starting with -",
    )
    parser.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    parser.add_argument(
        "--style",
        dest="style",
        choices=STYLES,
        help="url: a-z0-9 joined by '-'; filename: also keeps spaces, '_' and '.'",
    )
    parser.add_argument(
        "--preserve-case",
        dest="preserve_case",
        action="store_true",
        default=None,
        help="Keep the case of ASCII letters",
    )
    parser.add_argument(
        "--max-length",
        dest="max_length",
        type=int,
        help="Truncate url slugs to this many characters (0 disables)",
    )
    parser.add_argument(
        "--show-config",
        dest="show_config",
        action="store_true",
        help="Print the effective configuration and exit",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", dest="verbose", action="store_true", default=None
    )
    verbosity.add_argument(
        "-q", "--quiet", dest="quiet", action="store_true", default=None
    )
    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value
        for key, value in vars(namespace).items()
        if key not in {"texts", "show_config"}
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    cli_options = _normalize_cli_options(args)

    try:
        if args.show_config:
            pipelines.run_config_show(cli_options)
        else:
            pipelines.run_slugify(cli_options, args.texts or None)
    except SlugminError as exc:
        print(f"slugmin: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"slugmin: hint: {exc.hint}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
