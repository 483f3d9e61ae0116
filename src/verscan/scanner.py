"""Single-pass scanning engine.

Walks the input once, left to right. The current field's routes decide
which characters end its segment; any other character is segment
content. End of input always ends the current field::

    table = build(specs)      # 0,number,.1  1,number,+2  2,string
    scan(table, "12.7+beta")  # field 0 <- 12, field 1 <- 7, field 2 <- "beta"

The first error stops the scan. Targets written before the failing
field keep their new values; nothing is rolled back.
"""

import logging
import re
from collections.abc import Iterable

from verscan.errors import InvalidNumber
from verscan.fields import FieldDescriptor, FieldKind
from verscan.table import DescriptorTable, FieldSpec, build

logger = logging.getLogger("verscan.scanner")

# Signed 64-bit range of a numeric field
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def coerce_number(field: FieldDescriptor, segment: str) -> int:
    """Parse *segment* as a base-10 signed 64-bit integer.

    Raises ``InvalidNumber`` for empty, non-decimal, or out-of-range
    segments. Whitespace and underscores are not accepted.
    """
    if not _NUMBER_RE.fullmatch(segment):
        raise InvalidNumber(field.name, segment)
    value = int(segment)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidNumber(field.name, segment)
    return value


def _write(field: FieldDescriptor, segment: str) -> None:
    """Coerce *segment* to the field's kind and hand it to the target."""
    if field.kind is FieldKind.NUMBER:
        value = coerce_number(field, segment)
        field.target.set_number(value)
    else:
        field.target.set_string(segment)
    logger.debug("Field %r <- %r", field.name, segment)


def scan(table: DescriptorTable, text: str | bytes) -> None:
    """Scan *text* into the targets bound to *table*.

    ``bytes`` input is decoded as UTF-8 first; invalid UTF-8 raises
    ``UnicodeDecodeError`` before any field is written.

    Raises ``MissingEntryField`` if the table has no index 0 and
    ``InvalidNumber`` on the first segment that fails numeric coercion.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")

    field = table.entry
    start = 0
    for i, char in enumerate(text):
        next_index = field.next_index(char)
        if next_index is None:
            continue

        _write(field, text[start:i])
        start = i + 1
        field = table[next_index]
        logger.debug("Route %r -> field %r at offset %d", char, field.name, i)

    # End of input always ends the current field
    _write(field, text[start:])


def parse(specs: Iterable[FieldSpec], text: str | bytes) -> None:
    """Build a table from *specs* and scan *text* into it.

    Any ``SchemeError`` is raised before the input is looked at.
    """
    scan(build(specs), text)
