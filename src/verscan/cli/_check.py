"""``verscan check`` — validate a field scheme without parsing anything.

Prints ``ok`` and the field count on success. Exits with code 1 on the
first construction error.
"""

import argparse
import sys

from verscan.cli._scheme import build_specs
from verscan.config import ScanConfig
from verscan.errors import SchemeError
from verscan.table import build


def run_check(args: argparse.Namespace, config: ScanConfig) -> None:
    """Build the descriptor table for ``args.fields`` and report the outcome."""
    try:
        specs, _ = build_specs(args.fields, config)
        table = build(specs)
    except SchemeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"ok: {len(table)} field(s)")
