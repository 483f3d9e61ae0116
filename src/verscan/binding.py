"""Dataclass adapter — field declarations from dataclass metadata.

Declarations live in the metadata of each field, under the configured
key (``"version"`` by default)::

    @dataclass
    class Version:
        major: int = field(default=0, metadata={"version": "0,number,.1,+2"})
        minor: int = field(default=0, metadata={"version": "1,number,+2"})
        build: str = field(default="", metadata={"version": "2,string"})

    v = parse_as(Version, "1.2+abc")  # Version(major=1, minor=2, build="abc")

Fields without the key are left alone. The instance is written in place
through ``AttributeTarget``, so frozen dataclasses are rejected.
"""

import dataclasses
from typing import TypeVar

from verscan.config import DEFAULT_CONFIG, ScanConfig
from verscan.errors import MalformedDeclaration
from verscan.scanner import parse
from verscan.table import FieldSpec
from verscan.targets import AttributeTarget


def _check_instance(obj: object) -> None:
    if isinstance(obj, type):
        msg = f"{obj.__name__} is a class; pass an instance (or use parse_as)"
        raise TypeError(msg)
    cls = type(obj)
    if not dataclasses.is_dataclass(obj):
        msg = f"{cls.__name__} is not a dataclass instance; verscan binds to dataclass instances"
        raise TypeError(msg)
    if cls.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        msg = f"{cls.__name__} is frozen; verscan writes fields in place"
        raise TypeError(msg)


def describe(obj: object, config: ScanConfig | None = None) -> list[FieldSpec]:
    """Build one ``FieldSpec`` per declared field of the dataclass *obj*.

    Each spec writes back to *obj* through an ``AttributeTarget``.

    Raises ``TypeError`` if *obj* is not a mutable dataclass instance, and
    the declaration errors of ``FieldSpec.from_declaration``.
    """
    config = config or DEFAULT_CONFIG
    _check_instance(obj)

    specs: list[FieldSpec] = []
    for f in dataclasses.fields(obj):  # type: ignore[arg-type]
        declaration = f.metadata.get(config.metadata_key)
        if declaration is None:
            continue
        if not isinstance(declaration, str):
            raise MalformedDeclaration(f.name, repr(declaration))
        specs.append(
            FieldSpec.from_declaration(
                f.name,
                declaration,
                AttributeTarget(obj, f.name),
                config,
            )
        )
    return specs


def parse_into(obj: object, text: str | bytes, config: ScanConfig | None = None) -> None:
    """Parse *text* into the declared fields of the dataclass instance *obj*."""
    parse(describe(obj, config), text)


T = TypeVar("T")


def parse_as(cls: type[T], text: str | bytes, config: ScanConfig | None = None) -> T:
    """Create ``cls()`` and parse *text* into it.

    Every field of *cls* needs a default.
    """
    obj = cls()
    parse_into(obj, text, config)
    return obj
