"""``verscan parse`` — parse one version string and print its fields as JSON.

Exits with code 1 if the scheme or the input is invalid.
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any

from verscan.cli._scheme import build_specs
from verscan.config import ScanConfig
from verscan.errors import VerscanError
from verscan.scanner import parse
from verscan.semver import SemVersion

logger = logging.getLogger("verscan.cli")


def _parse_fields(args: argparse.Namespace, config: ScanConfig) -> dict[str, Any]:
    if args.fields:
        specs, result = build_specs(args.fields, config)
        parse(specs, args.text)
        return result

    logger.debug("No --field given, using the %s scheme", args.scheme)
    return dataclasses.asdict(SemVersion.parse(args.text))


def run_parse(args: argparse.Namespace, config: ScanConfig) -> None:
    """Parse ``args.text`` and print the resulting fields to stdout."""
    try:
        result = _parse_fields(args, config)
    except VerscanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(json.dumps(result))
