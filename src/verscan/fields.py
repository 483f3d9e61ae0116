"""FieldKind enum and FieldDescriptor frozen dataclass."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from verscan.targets import Target


class FieldKind(Enum):
    """How a segment is coerced before it reaches its target.

    The value is the literal used in declarations (``"0,number,.1"``).
    """

    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One validated field of a descriptor table.

    Number:  ``0,number,.1,+2`` (index=0, routes={".": 1, "+": 2})
    Text:    ``2,string``       (index=2, routes={})

    A field without routes can only end at the end of the input.
    """

    index: int
    kind: FieldKind
    routes: Mapping[str, int]
    target: Target
    name: str

    def next_index(self, char: str) -> int | None:
        """Index of the field *char* routes to, or None if it is segment content."""
        return self.routes.get(char)
