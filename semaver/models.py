"""
Core data models for semaver.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

# Numeric identifiers are unsigned 64-bit values
NUMERIC_BITS = 64
NUMERIC_MAX = 2 ** NUMERIC_BITS - 1


class Level(Enum):
    """Numeric identifier of the core version that can be incremented."""
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class Ordering(Enum):
    """Result of a three-way precedence comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _split_identifiers(value: str) -> List[str]:
    return value.split('.') if value else []


@dataclass(eq=False)
class Version:
    """
    A Semantic Versioning 2.0.0 version number.

    Fields are plain public data. Only ``parser.parse`` validates input, so a
    hand-built or hand-mutated Version may hold values the grammar rejects.

    Relational operators compare by precedence: build metadata is ignored and
    ``Version(1, 0, 0, build="a") == Version(1, 0, 0, build="b")``. Use
    ``as_tuple()`` for structural equality.
    """
    major: int = 0
    minor: int = 1
    patch: int = 0
    prerelease: str = ""
    build: str = ""

    @property
    def prerelease_identifiers(self) -> List[str]:
        """Dot-separated pre-release identifiers, empty when there are none."""
        return _split_identifiers(self.prerelease)

    @property
    def build_identifiers(self) -> List[str]:
        """Dot-separated build metadata identifiers, empty when there are none."""
        return _split_identifiers(self.build)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def as_tuple(self) -> Tuple[int, int, int, str, str]:
        return (self.major, self.minor, self.patch, self.prerelease, self.build)

    def to_string(self) -> str:
        """
        Render the version in canonical form.

        Returns:
            "MAJOR.MINOR.PATCH", followed by "-PRERELEASE" and "+BUILD" when set
        """
        version = f"{self.major}.{self.minor}.{self.patch}"

        if self.prerelease:
            version += f"-{self.prerelease}"

        if self.build:
            version += f"+{self.build}"

        return version

    def __str__(self) -> str:
        return self.to_string()

    def increment(self, level: Union[Level, str], n: int = 1) -> 'Version':
        """
        Increment a core numeric identifier in place.

        Incrementing major resets minor and patch to 0, incrementing minor
        resets patch to 0. Incrementing by 0 changes nothing, including the
        lesser identifiers. Values wrap around at 2**64.

        Args:
            level: Level to increment, or its name ("major", "minor", "patch")
            n: Amount to add

        Returns:
            This version, for chaining

        Raises:
            ValueError: If level is unknown or n is negative
        """
        level = Level(level)
        if n < 0:
            raise ValueError(f"Increment must not be negative: {n}")

        if n == 0:
            return self

        if level is Level.MAJOR:
            self.major = _wrap(self.major + n)
            self.minor = 0
            self.patch = 0
        elif level is Level.MINOR:
            self.minor = _wrap(self.minor + n)
            self.patch = 0
        else:
            self.patch = _wrap(self.patch + n)

        return self

    def bumped(self, level: Union[Level, str], n: int = 1) -> 'Version':
        """Return an incremented copy, leaving this version untouched."""
        return copy.copy(self).increment(level, n)

    def _compare(self, other) -> Ordering:
        from .comparator import compare
        return compare(self, other)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.EQUAL

    def __ne__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is not Ordering.EQUAL

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is not Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is not Ordering.LESS

    __hash__ = None


def _wrap(value: int) -> int:
    return value & NUMERIC_MAX
