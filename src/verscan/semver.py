"""Semantic version scheme built on the dataclass adapter.

``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``, where the pre-release and
build parts are optional and ``-``/``+`` may follow any numeric part::

    SemVersion.parse("1.2.3-beta.1+exp.sha.5114f85")
    # SemVersion(major=1, minor=2, patch=3, prerelease="beta.1", build="exp.sha.5114f85")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from verscan.binding import parse_into
from verscan.config import DEFAULT_CONFIG


@dataclass(slots=True)
class SemVersion:
    """A parsed semantic version. Fields not present in the input keep their defaults."""

    major: int = field(default=0, metadata={"version": "0,number,.1,-3,+4"})
    minor: int = field(default=0, metadata={"version": "1,number,.2,-3,+4"})
    patch: int = field(default=0, metadata={"version": "2,number,-3,+4"})
    prerelease: str = field(default="", metadata={"version": "3,string,+4"})
    build: str = field(default="", metadata={"version": "4,string"})

    @classmethod
    def parse(cls, text: str | bytes) -> SemVersion:
        """Parse *text* into a new ``SemVersion``."""
        version = cls()
        parse_into(version, text, DEFAULT_CONFIG)
        return version
