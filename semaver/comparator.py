"""
Version comparison logic for semantic versioning.

Precedence follows Semantic Versioning 2.0.0, section 11:

1. Major, minor and patch are compared numerically.
2. A version without pre-release identifiers has higher precedence than one
   with pre-release identifiers and the same core version.
3. Pre-release identifiers are compared left to right: digit-only identifiers
   numerically, others in ASCII order, and digit-only identifiers always
   have lower precedence than alphanumeric ones. A larger set of identifiers
   wins when all preceding identifiers are equal.
4. Build metadata is ignored.
"""

import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from .exceptions import MalformedVersion
from .logging_config import get_logger
from .models import Ordering, Version
from .parser import parse

logger = get_logger('comparator')

_DIGITS = re.compile(r'[0-9]+')


def _order(lhs, rhs) -> Ordering:
    if lhs < rhs:
        return Ordering.LESS
    if lhs > rhs:
        return Ordering.GREATER
    return Ordering.EQUAL


def _numeric_key(digits: str) -> tuple:
    # Orders digit strings of any length by value without int()
    digits = digits.lstrip('0')
    return (len(digits), digits)


def compare_identifiers(lhs: str, rhs: str) -> Ordering:
    """
    Compare two pre-release identifiers.

    Args:
        lhs: First identifier
        rhs: Second identifier

    Returns:
        Ordering of lhs relative to rhs
    """
    lhs_is_numeric = _DIGITS.fullmatch(lhs) is not None
    rhs_is_numeric = _DIGITS.fullmatch(rhs) is not None

    if lhs_is_numeric and rhs_is_numeric:
        return _order(_numeric_key(lhs), _numeric_key(rhs))

    if not lhs_is_numeric and not rhs_is_numeric:
        return _order(lhs, rhs)

    # Numeric identifiers have lower precedence than alphanumeric ones
    return Ordering.LESS if lhs_is_numeric else Ordering.GREATER


def compare(a: Version, b: Version) -> Ordering:
    """
    Compare two versions by precedence.

    Args:
        a: First version
        b: Second version

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER
    """
    for lhs, rhs in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if lhs != rhs:
            return _order(lhs, rhs)

    if a.prerelease == b.prerelease:
        return Ordering.EQUAL

    # A pre-release version has lower precedence than a normal version
    if not a.prerelease:
        return Ordering.GREATER
    if not b.prerelease:
        return Ordering.LESS

    lhs_ids = a.prerelease_identifiers
    rhs_ids = b.prerelease_identifiers

    for lhs, rhs in zip(lhs_ids, rhs_ids):
        result = compare_identifiers(lhs, rhs)
        if result is not Ordering.EQUAL:
            return result

    return _order(len(lhs_ids), len(rhs_ids))


def equal(a: Version, b: Version) -> bool:
    return compare(a, b) is Ordering.EQUAL


def not_equal(a: Version, b: Version) -> bool:
    return compare(a, b) is not Ordering.EQUAL


def less(a: Version, b: Version) -> bool:
    return compare(a, b) is Ordering.LESS


def less_equal(a: Version, b: Version) -> bool:
    return compare(a, b) is not Ordering.GREATER


def greater(a: Version, b: Version) -> bool:
    return compare(a, b) is Ordering.GREATER


def greater_equal(a: Version, b: Version) -> bool:
    return compare(a, b) is not Ordering.LESS


def _compare_value(a: Version, b: Version) -> int:
    return compare(a, b).value


def sort_versions(versions: Iterable[Version], reverse: bool = False) -> List[Version]:
    """
    Sort versions by precedence.

    The sort is stable: versions of equal precedence (for example differing
    only in build metadata) keep their input order, also when reversed.
    """
    return sorted(versions, key=cmp_to_key(_compare_value), reverse=reverse)


class SemanticVersionComparator:
    """Compare and rank version strings."""

    def __init__(self, allow_prefix: bool = True):
        """
        Args:
            allow_prefix: Accept a leading "v" on version strings
        """
        self.allow_prefix = allow_prefix

    def parse_version(self, version: str) -> Version:
        """
        Parse a version string.

        Raises:
            MalformedVersion: If version format is invalid
        """
        return parse(version, allow_prefix=self.allow_prefix)

    def compare_versions(self, version1: str, version2: str) -> int:
        """
        Compare two version strings.

        Args:
            version1: First version string
            version2: Second version string

        Returns:
            -1 if version1 < version2, 0 if equal, 1 if version1 > version2

        Raises:
            MalformedVersion: If either version is invalid
        """
        return compare(self.parse_version(version1), self.parse_version(version2)).value

    def is_valid_version(self, version: str) -> bool:
        """
        Check if a version string is valid.

        Args:
            version: Version string to validate

        Returns:
            True if version is valid, False otherwise
        """
        try:
            self.parse_version(version)
            return True
        except MalformedVersion:
            return False

    def _parse_all(self, versions: Iterable[str], skip_invalid: bool) -> List[tuple]:
        parsed = []
        for version in versions:
            try:
                parsed.append((self.parse_version(version), version))
            except MalformedVersion as e:
                if not skip_invalid:
                    raise
                logger.warning(f"Skipping invalid version: {version} ({e.reason})")
        return parsed

    def sort_versions(self, versions: Iterable[str], reverse: bool = False,
                      skip_invalid: bool = False) -> List[str]:
        """
        Sort version strings by precedence.

        Args:
            versions: Version strings
            reverse: Highest precedence first
            skip_invalid: Drop malformed entries instead of raising

        Returns:
            The original strings in precedence order

        Raises:
            MalformedVersion: If a version is invalid and skip_invalid is False
        """
        parsed = self._parse_all(versions, skip_invalid)
        key = cmp_to_key(lambda lhs, rhs: _compare_value(lhs[0], rhs[0]))
        return [original for _, original in sorted(parsed, key=key, reverse=reverse)]

    def get_latest_version(self, versions: Iterable[str]) -> Optional[str]:
        """
        Get the latest version from a list of version strings.

        Invalid entries are skipped with a warning. When several versions
        share the highest precedence the first one wins.

        Args:
            versions: List of version strings

        Returns:
            Latest version string or None if there is no valid version
        """
        parsed = self._parse_all(versions, skip_invalid=True)
        if not parsed:
            return None

        latest, latest_text = parsed[0]
        for version, text in parsed[1:]:
            if compare(version, latest) is Ordering.GREATER:
                latest, latest_text = version, text

        return latest_text
