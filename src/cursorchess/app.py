"""Application entry point."""

from __future__ import annotations

import argparse
import sys

from cursorchess.ui.settings import LOG_LEVELS, AppSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursorchess",
        description="Keyboard-driven chess on a text board.",
    )
    parser.add_argument("--fen", help="positional record to start from")
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="use Unicode chess symbols instead of two-letter piece labels",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    args = build_parser().parse_args(argv)
    settings = AppSettings(
        use_unicode_symbols=args.unicode,
        log_level=args.log_level,
    )
    if args.fen:
        settings.start_fen = args.fen
    return settings


def main() -> None:
    """Launch the cursorchess application."""
    from cursorchess.ui.bootstrap import run_application

    settings = settings_from_args(sys.argv[1:])
    sys.exit(run_application([sys.argv[0]], settings))


if __name__ == "__main__":
    main()
