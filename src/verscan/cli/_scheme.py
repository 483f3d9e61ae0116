"""Scheme assembly from ``--field NAME=DECL`` arguments.

Shared by ``verscan parse`` and ``verscan check``. Each field writes into
a plain dict so the result can be printed as JSON.
"""

import argparse
from typing import Any

from verscan.config import ScanConfig
from verscan.table import FieldSpec
from verscan.targets import MappingTarget


def field_declaration(value: str) -> tuple[str, str]:
    """argparse type for ``NAME=DECL``."""
    name, sep, declaration = value.partition("=")
    if not sep or not name:
        msg = f"expected NAME=DECL, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return name, declaration


def build_specs(
    fields: list[tuple[str, str]],
    config: ScanConfig,
) -> tuple[list[FieldSpec], dict[str, Any]]:
    """Decode *fields* into specs bound to a fresh result dict.

    Every declared name starts out as ``None`` so fields the scan never
    reaches still appear in the output.
    """
    result: dict[str, Any] = {name: None for name, _ in fields}
    specs = [
        FieldSpec.from_declaration(name, declaration, MappingTarget(result, name), config)
        for name, declaration in fields
    ]
    return specs, result
