"""Tests for verscan.errors — exception hierarchy and error messages."""

import contextlib
from collections.abc import Iterator

import pytest

from verscan.errors import (
    DanglingRoute,
    DuplicateIndex,
    DuplicateRoute,
    InvalidIndex,
    InvalidNumber,
    InvalidRouteTarget,
    MalformedDeclaration,
    MissingEntryField,
    ScanError,
    SchemeError,
    UnknownFieldKind,
    VerscanError,
)
from verscan.scanner import parse
from verscan.table import FieldSpec
from verscan.targets import MappingTarget


class TestHierarchy:
    def test_families_are_verscan_errors(self) -> None:
        assert issubclass(SchemeError, VerscanError)
        assert issubclass(ScanError, VerscanError)

    @pytest.mark.parametrize(
        "cls",
        [
            DanglingRoute,
            DuplicateIndex,
            DuplicateRoute,
            InvalidIndex,
            InvalidRouteTarget,
            MalformedDeclaration,
            MissingEntryField,
            UnknownFieldKind,
        ],
    )
    def test_construction_errors_are_scheme_errors(self, cls: type) -> None:
        assert issubclass(cls, SchemeError)
        assert not issubclass(cls, ScanError)

    def test_invalid_number_is_scan_error(self) -> None:
        assert issubclass(InvalidNumber, ScanError)
        assert not issubclass(InvalidNumber, SchemeError)


class TestMessages:
    def test_duplicate_index(self) -> None:
        err = DuplicateIndex("minor", 1)
        assert err.name == "minor"
        assert err.index == 1
        assert str(err) == "field 'minor': index 1 is already taken"

    def test_unknown_field_kind(self) -> None:
        assert "'float'" in str(UnknownFieldKind("major", "float"))

    def test_dangling_route(self) -> None:
        err = DanglingRoute("major", ".", 7)
        assert err.delimiter == "."
        assert err.target == 7
        assert "missing index 7" in str(err)

    def test_invalid_number(self) -> None:
        err = InvalidNumber("major", "12x")
        assert str(err) == "field 'major': '12x' is not a valid number"

    def test_missing_entry_field_default_detail(self) -> None:
        assert "index 0" in str(MissingEntryField())

    def test_propagates_through_context_manager(self) -> None:
        @contextlib.contextmanager
        def passthrough() -> Iterator[None]:
            yield

        spec = FieldSpec("n", 0, "number", MappingTarget({}, "n"))
        with pytest.raises(InvalidNumber) as exc_info:
            with passthrough():
                parse([spec], "x")
        assert exc_info.value.segment == "x"

    def test_scheme_error_through_context_manager(self) -> None:
        @contextlib.contextmanager
        def passthrough() -> Iterator[None]:
            yield

        with pytest.raises(DuplicateIndex):
            with passthrough():
                raise DuplicateIndex("minor", 1)

    def test_raisable(self) -> None:
        with pytest.raises(SchemeError) as exc_info:
            raise DuplicateRoute("patch", "-")
        assert exc_info.value.delimiter == "-"
