"""Tests for verscan.binding — dataclass metadata adapter."""

from dataclasses import dataclass, field

import pytest

from verscan.binding import describe, parse_as, parse_into
from verscan.config import ScanConfig
from verscan.errors import DanglingRoute, InvalidNumber, MalformedDeclaration
from verscan.targets import AttributeTarget


@dataclass
class Version:
    major: int = field(default=0, metadata={"version": "0,number,.1,+2"})
    minor: int = field(default=0, metadata={"version": "1,number,+2"})
    build: str = field(default="", metadata={"version": "2,string"})
    note: str = "untagged"


@dataclass(frozen=True)
class FrozenVersion:
    major: int = field(default=0, metadata={"version": "0,number"})


@dataclass
class Dangling:
    major: int = field(default=0, metadata={"version": "0,number,.1"})


@dataclass
class Calendar:
    year: int = field(default=0, metadata={"calver": "0;number;.1"})
    month: int = field(default=0, metadata={"calver": "1;number"})


class TestDescribe:
    def test_specs_for_tagged_fields_only(self) -> None:
        specs = describe(Version())
        assert [s.name for s in specs] == ["major", "minor", "build"]
        assert [s.index for s in specs] == [0, 1, 2]
        assert specs[0].routes == (".1", "+2")
        assert all(isinstance(s.target, AttributeTarget) for s in specs)

    def test_custom_key_and_separator(self) -> None:
        specs = describe(Calendar(), ScanConfig(metadata_key="calver", separator=";"))
        assert [s.name for s in specs] == ["year", "month"]

    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError, match="not a dataclass instance"):
            describe(object())

    def test_rejects_dataclass_type(self) -> None:
        with pytest.raises(TypeError, match="Version is a class"):
            describe(Version)

    def test_rejects_frozen(self) -> None:
        with pytest.raises(TypeError, match="frozen"):
            describe(FrozenVersion())

    def test_malformed_declaration(self) -> None:
        @dataclass
        class Broken:
            major: int = field(default=0, metadata={"version": "0"})

        with pytest.raises(MalformedDeclaration):
            describe(Broken())

    def test_non_string_declaration(self) -> None:
        @dataclass
        class NumericTag:
            major: int = field(default=0, metadata={"version": 0})

        with pytest.raises(MalformedDeclaration) as exc_info:
            describe(NumericTag())
        assert exc_info.value.name == "major"


class TestParseInto:
    def test_populates_in_place(self) -> None:
        v = Version()
        parse_into(v, "1.2+abc")
        assert v == Version(major=1, minor=2, build="abc")
        assert v.note == "untagged"

    def test_skip_to_build(self) -> None:
        v = Version()
        parse_into(v, "5+x.y")
        assert (v.major, v.minor, v.build) == (5, 0, "x.y")

    def test_dangling_route(self) -> None:
        with pytest.raises(DanglingRoute):
            parse_into(Dangling(), "1.2")

    def test_partial_write_on_error(self) -> None:
        v = Version()
        with pytest.raises(InvalidNumber):
            parse_into(v, "3.beta")
        assert v.major == 3
        assert v.minor == 0


class TestParseAs:
    def test_new_instance(self) -> None:
        v = parse_as(Version, "10.20")
        assert isinstance(v, Version)
        assert (v.major, v.minor, v.build) == (10, 20, "")

    def test_with_config(self) -> None:
        c = parse_as(Calendar, "2026.10", ScanConfig(metadata_key="calver", separator=";"))
        assert (c.year, c.month) == (2026, 10)
