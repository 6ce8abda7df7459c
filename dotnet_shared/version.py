# Host platform version: parse, compare and carry the API version a host reports.

from __future__ import annotations

import re

from pydantic import BaseModel, Field

# major[.minor[.patch[.build]]][-QUALIFIER]
_VERSION_RE = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?(?:-([\w.]+))?$")


class Version(BaseModel):
    """
    Semantic version of the hosting platform API.

    Ordering compares (major, minor, patch, build_number), then the qualifier:
    a qualified build such as "7.4-SNAPSHOT" sorts below the "7.4" release.
    """

    major: int = Field(..., ge=0)
    minor: int = Field(0, ge=0)
    patch: int = Field(0, ge=0)
    build_number: int = Field(0, ge=0)
    qualifier: str = ""

    model_config = {"frozen": True}

    @classmethod
    def create(cls, major: int, minor: int, patch: int = 0, build_number: int = 0) -> Version:
        return cls(major=major, minor=minor, patch=patch, build_number=build_number)

    @classmethod
    def parse(cls, text: str) -> Version:
        """
        Parse "7", "7.4", "7.3.99", "7.4.0.12345" or "7.4-SNAPSHOT".

        Raises ValueError for blank or malformed input.
        """
        m = _VERSION_RE.match(text.strip())
        if m is None:
            raise ValueError(f"Invalid version: {text!r}")
        major, minor, patch, build, qualifier = m.groups()
        return cls(
            major=int(major),
            minor=int(minor or 0),
            patch=int(patch or 0),
            build_number=int(build or 0),
            qualifier=qualifier or "",
        )

    def _sort_key(self) -> tuple[int, int, int, int, bool, str]:
        # A release sorts above any qualified build of the same numbers: 7.4-SNAPSHOT < 7.4
        return (self.major, self.minor, self.patch, self.build_number, self.qualifier == "", self.qualifier)

    def is_greater_than_or_equal(self, other: Version) -> bool:
        return self._sort_key() >= other._sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.is_greater_than_or_equal(other)

    def __str__(self) -> str:
        parts = [self.major, self.minor]
        if self.patch or self.build_number:
            parts.append(self.patch)
        if self.build_number:
            parts.append(self.build_number)
        text = ".".join(str(p) for p in parts)
        if self.qualifier:
            text += f"-{self.qualifier}"
        return text


class HostRuntime(BaseModel):
    """What the host tells a plugin about itself at registration time."""

    api_version: Version

    model_config = {"frozen": True}
