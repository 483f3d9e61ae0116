"""Settable targets — where parsed values are written.

A target is anything matching::

    class Target(Protocol):
        def set_number(self, value: int) -> None: ...
        def set_string(self, value: str) -> None: ...

No base class required. The scanner checks the shape, not the lineage.
Each descriptor is bound to exactly one target when its spec is built.
"""

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol


class Target(Protocol):
    """Protocol for the write side of a field."""

    def set_number(self, value: int) -> None: ...

    def set_string(self, value: str) -> None: ...


class AttributeTarget:
    """Writes the value to an attribute of an object.

    Usage::

        target = AttributeTarget(version, "major")
        target.set_number(1)  # version.major == 1
    """

    __slots__ = ("_attr", "_obj")

    def __init__(self, obj: object, attr: str) -> None:
        self._obj = obj
        self._attr = attr

    def set_number(self, value: int) -> None:
        setattr(self._obj, self._attr, value)

    def set_string(self, value: str) -> None:
        setattr(self._obj, self._attr, value)

    def __repr__(self) -> str:
        return f"AttributeTarget({type(self._obj).__name__}.{self._attr})"


class MappingTarget:
    """Writes the value under a key of a mutable mapping."""

    __slots__ = ("_key", "_mapping")

    def __init__(self, mapping: MutableMapping[str, Any], key: str) -> None:
        self._mapping = mapping
        self._key = key

    def set_number(self, value: int) -> None:
        self._mapping[self._key] = value

    def set_string(self, value: str) -> None:
        self._mapping[self._key] = value

    def __repr__(self) -> str:
        return f"MappingTarget({self._key!r})"


class CallbackTarget:
    """Hands the value to a callable, whatever its kind."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[int | str], object]) -> None:
        self._callback = callback

    def set_number(self, value: int) -> None:
        self._callback(value)

    def set_string(self, value: str) -> None:
        self._callback(value)
