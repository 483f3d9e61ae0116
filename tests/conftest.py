"""Shared fixtures for verscan tests."""

from typing import Any

import pytest

from verscan.table import FieldSpec
from verscan.targets import MappingTarget


@pytest.fixture
def out() -> dict[str, Any]:
    """Result dict the ``three_fields`` specs write into."""
    return {}


@pytest.fixture
def three_fields(out: dict[str, Any]) -> list[FieldSpec]:
    """``0,number,.1`` / ``1,number,+2`` / ``2,string`` bound to ``out``."""
    return [
        FieldSpec("major", 0, "number", MappingTarget(out, "major"), (".1",)),
        FieldSpec("minor", 1, "number", MappingTarget(out, "minor"), ("+2",)),
        FieldSpec("tag", 2, "string", MappingTarget(out, "tag")),
    ]
