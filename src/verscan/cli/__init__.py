"""Verscan CLI — parse version strings and validate field schemes.

Entry point registered as ``verscan`` in ``pyproject.toml``::

    [project.scripts]
    verscan = "verscan.cli:main"
"""

import argparse
import logging
import sys

from verscan.cli._scheme import field_declaration
from verscan.config import ScanConfig


def _configure_logging(config: ScanConfig) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("verscan").setLevel(config.log_level.upper())


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``verscan`` command."""
    parser = argparse.ArgumentParser(
        prog="verscan",
        description="Verscan — parse version strings by following a declared routing table.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level for the verscan logger",
    )
    parser.add_argument(
        "--separator",
        default=",",
        help="Element separator used in --field declarations (default: ',')",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- verscan parse ----------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse a version string")
    parse_parser.add_argument("text", help="Version string to parse")
    parse_parser.add_argument(
        "--scheme",
        choices=["semver"],
        default="semver",
        help="Bundled scheme used when no --field is given",
    )
    parse_parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=field_declaration,
        default=[],
        metavar="NAME=DECL",
        help="Field declaration, e.g. major=0,number,.1 (repeatable)",
    )

    # -- verscan check ----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a field scheme")
    check_parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=field_declaration,
        required=True,
        metavar="NAME=DECL",
        help="Field declaration, e.g. major=0,number,.1 (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = ScanConfig(separator=args.separator, log_level=args.log_level)
    _configure_logging(config)

    if args.command == "parse":
        from verscan.cli._parse import run_parse

        run_parse(args, config)
    elif args.command == "check":
        from verscan.cli._check import run_check

        run_check(args, config)
