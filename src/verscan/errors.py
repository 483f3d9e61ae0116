"""Verscan exception hierarchy.

Shared by the table builder, the scanner, and the dataclass adapter so
every module raises and catches the same types.

Two families:

- ``SchemeError``: the field declarations are wrong. Raised while the
  descriptor table is built, before any input is looked at.
- ``ScanError``: the declarations are fine but the input string does
  not fit them.
"""

from dataclasses import dataclass


class VerscanError(Exception):
    """Base for all verscan-specific errors."""


class SchemeError(VerscanError):
    """Raised when a set of field declarations cannot form a valid table."""


class ScanError(VerscanError):
    """Raised when an input string cannot be scanned into its fields."""


@dataclass(eq=False)
class MalformedDeclaration(SchemeError):
    """A declaration string has fewer than the two required elements."""

    name: str
    declaration: str

    def __str__(self) -> str:
        return f"field {self.name!r}: declaration {self.declaration!r} needs at least an index and a kind"


@dataclass(eq=False)
class InvalidIndex(SchemeError):
    """A field index is not a non-negative integer."""

    name: str
    value: object

    def __str__(self) -> str:
        return f"field {self.name!r}: invalid index {self.value!r}"


@dataclass(eq=False)
class DuplicateIndex(SchemeError):
    """Two fields claim the same index."""

    name: str
    index: int

    def __str__(self) -> str:
        return f"field {self.name!r}: index {self.index} is already taken"


@dataclass(eq=False)
class UnknownFieldKind(SchemeError):
    """The kind literal is neither ``number`` nor ``string``."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"field {self.name!r}: unknown field kind {self.value!r}"


@dataclass(eq=False)
class InvalidRouteTarget(SchemeError):
    """A route is not a delimiter character followed by a field index."""

    name: str
    route: str = ""

    def __str__(self) -> str:
        return f"field {self.name!r}: invalid route {self.route!r}"


@dataclass(eq=False)
class DuplicateRoute(SchemeError):
    """One field declares the same delimiter twice."""

    name: str
    delimiter: str

    def __str__(self) -> str:
        return f"field {self.name!r}: delimiter {self.delimiter!r} is routed twice"


@dataclass(eq=False)
class DanglingRoute(SchemeError):
    """A route points at an index no field has."""

    name: str
    delimiter: str
    target: int

    def __str__(self) -> str:
        return f"field {self.name!r}: route {self.delimiter!r} points to missing index {self.target}"


class MissingEntryField(SchemeError):
    """No field has index 0, so the scan has nowhere to start."""

    def __init__(self, detail: str = "no field declares the entry index 0") -> None:
        super().__init__(detail)


@dataclass(eq=False)
class InvalidNumber(ScanError):
    """A segment bound to a numeric field is not a base-10 integer."""

    name: str
    segment: str

    def __str__(self) -> str:
        return f"field {self.name!r}: {self.segment!r} is not a valid number"
