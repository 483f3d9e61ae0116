"""Verscan — parse version strings by following a declared routing table.

Each field of a version scheme has an index, a kind (number or string)
and a set of delimiter routes. Index 0 is where the scan starts; a
delimiter ends the current field and jumps to the field it routes to.

Basic usage::

    from dataclasses import dataclass, field
    from verscan import parse_as

    @dataclass
    class Version:
        major: int = field(default=0, metadata={"version": "0,number,.1,+2"})
        minor: int = field(default=0, metadata={"version": "1,number,+2"})
        build: str = field(default="", metadata={"version": "2,string"})

    parse_as(Version, "1.2+beta")  # Version(major=1, minor=2, build="beta")

Lower level, without dataclasses::

    from verscan import FieldSpec, MappingTarget, parse

    out = {}
    parse([FieldSpec("major", 0, "number", MappingTarget(out, "major"))], "42")
"""

__version__ = "0.1.0"
__all__ = [
    "AttributeTarget",
    "CallbackTarget",
    "DescriptorTable",
    "FieldDescriptor",
    "FieldKind",
    "FieldSpec",
    "MappingTarget",
    "ScanConfig",
    "ScanError",
    "SchemeError",
    "SemVersion",
    "Target",
    "VerscanError",
    "build",
    "describe",
    "parse",
    "parse_as",
    "parse_into",
    "scan",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import verscan`` fast while providing a clean top-level API.
    """
    if name in ("parse", "scan"):
        from verscan import scanner as _scanner

        return getattr(_scanner, name)

    if name in ("build", "DescriptorTable", "FieldSpec"):
        from verscan import table as _table

        return getattr(_table, name)

    if name in ("FieldDescriptor", "FieldKind"):
        from verscan import fields as _fields

        return getattr(_fields, name)

    if name in ("AttributeTarget", "CallbackTarget", "MappingTarget", "Target"):
        from verscan import targets as _targets

        return getattr(_targets, name)

    if name in ("describe", "parse_as", "parse_into"):
        from verscan import binding as _binding

        return getattr(_binding, name)

    if name == "SemVersion":
        from verscan.semver import SemVersion

        return SemVersion

    if name == "ScanConfig":
        from verscan.config import ScanConfig

        return ScanConfig

    if name in ("VerscanError", "SchemeError", "ScanError"):
        from verscan import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
