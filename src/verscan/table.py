"""Descriptor table builder.

Raw ``FieldSpec`` values (usually produced by an adapter) are validated
and assembled into an immutable ``DescriptorTable``::

    specs = [
        FieldSpec.from_declaration("major", "0,number,.1", major_target),
        FieldSpec.from_declaration("minor", "1,number", minor_target),
    ]
    table = build(specs)

Validation is table-wide: every route must point at an existing index
even if the route is never taken. Cycles and unreachable fields are
allowed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from verscan.config import DEFAULT_CONFIG, ScanConfig
from verscan.errors import (
    DanglingRoute,
    DuplicateIndex,
    DuplicateRoute,
    InvalidIndex,
    InvalidRouteTarget,
    MalformedDeclaration,
    MissingEntryField,
    UnknownFieldKind,
)
from verscan.fields import FieldDescriptor, FieldKind
from verscan.targets import Target

logger = logging.getLogger("verscan.table")

ENTRY_INDEX = 0

_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A raw, unvalidated field declaration.

    ``kind`` is the literal (``"number"`` / ``"string"``) and each route is
    a delimiter character followed by the target index (``".1"``).
    """

    name: str
    index: int
    kind: str
    target: Target
    routes: tuple[str, ...] = ()

    @classmethod
    def from_declaration(
        cls,
        name: str,
        declaration: str,
        target: Target,
        config: ScanConfig = DEFAULT_CONFIG,
    ) -> FieldSpec:
        """Decode ``"<index>,<kind>[,<delimiter><target-index>]*"``.

        Raises ``MalformedDeclaration`` if the index or kind is missing and
        ``InvalidIndex`` if the index is not a non-negative integer.
        """
        parts = declaration.split(config.separator)
        if len(parts) < 2:
            raise MalformedDeclaration(name, declaration)

        raw_index = parts[0]
        if not _DIGITS_RE.fullmatch(raw_index):
            raise InvalidIndex(name, raw_index)

        return cls(
            name=name,
            index=int(raw_index),
            kind=parts[1],
            target=target,
            routes=tuple(parts[2:]),
        )


@dataclass(frozen=True, slots=True)
class DescriptorTable(Mapping[int, FieldDescriptor]):
    """Validated, closed mapping of field index to descriptor.

    Only ``build()`` should create one. Immutable after creation.
    """

    _fields: Mapping[int, FieldDescriptor]

    @property
    def entry(self) -> FieldDescriptor:
        """The field the scan starts in (index 0)."""
        try:
            return self._fields[ENTRY_INDEX]
        except KeyError:
            raise MissingEntryField() from None

    def __getitem__(self, index: int) -> FieldDescriptor:
        return self._fields[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


def parse_kind(name: str, value: str) -> FieldKind:
    """Map a kind literal to ``FieldKind``."""
    try:
        return FieldKind(value)
    except ValueError:
        raise UnknownFieldKind(name, value) from None


def parse_routes(name: str, routes: Iterable[str]) -> dict[str, int]:
    """Decode route specs like ``".1"`` into ``{".": 1}``.

    The first character is the delimiter; the rest must be a non-negative
    integer.
    """
    result: dict[str, int] = {}
    for route in routes:
        delimiter, target = route[:1], route[1:]
        if not delimiter or not _DIGITS_RE.fullmatch(target):
            raise InvalidRouteTarget(name, route)
        if delimiter in result:
            raise DuplicateRoute(name, delimiter)
        result[delimiter] = int(target)
    return result


def build(specs: Iterable[FieldSpec]) -> DescriptorTable:
    """Validate *specs* and assemble them into a ``DescriptorTable``.

    Checks run in order and the first failure is raised:

    1. each spec: index, then uniqueness of the index, then kind
       literal and route syntax
    2. closure: every route target exists
    3. an entry field (index 0) exists
    """
    fields: dict[int, FieldDescriptor] = {}

    for spec in specs:
        if isinstance(spec.index, bool) or not isinstance(spec.index, int) or spec.index < 0:
            raise InvalidIndex(spec.name, spec.index)
        if spec.index in fields:
            raise DuplicateIndex(spec.name, spec.index)
        kind = parse_kind(spec.name, spec.kind)
        routes = parse_routes(spec.name, spec.routes)

        fields[spec.index] = FieldDescriptor(
            index=spec.index,
            kind=kind,
            routes=MappingProxyType(routes),
            target=spec.target,
            name=spec.name,
        )

    for index in sorted(fields):
        field = fields[index]
        for delimiter, target in field.routes.items():
            if target not in fields:
                raise DanglingRoute(field.name, delimiter, target)

    if ENTRY_INDEX not in fields:
        raise MissingEntryField()

    logger.debug("Built descriptor table with %d field(s)", len(fields))
    return DescriptorTable(MappingProxyType(fields))
