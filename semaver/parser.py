"""
Parsing of Semantic Versioning 2.0.0 version strings.

Grammar::

    version       = ["v"] core ["-" prerelease] ["+" build]
    core          = numeric "." numeric "." numeric
    numeric       = "0" | nonzero-digit *digit
    prerelease    = prerelease-id *("." prerelease-id)
    build         = build-id *("." build-id)

Identifiers use ``[0-9A-Za-z-]``. Numeric pre-release identifiers must not
have leading zeros; build identifiers may. The whole input must match.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .exceptions import MalformedVersion
from .logging_config import get_logger
from .models import NUMERIC_MAX, Version

logger = get_logger('parser')

_NUMERIC = r'0|[1-9][0-9]*'
_IDENTIFIERS = r'[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*'

VERSION_PATTERN = re.compile(
    rf'(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})'
    rf'(?:-(?P<prerelease>{_IDENTIFIERS}))?'
    rf'(?:\+(?P<build>{_IDENTIFIERS}))?'
)

_IDENTIFIER_CHARS = re.compile(r'[0-9A-Za-z-]*')
_DIGITS = re.compile(r'[0-9]+')

_NUMERIC_MAX_DIGITS = len(str(NUMERIC_MAX))

PREFIX = 'v'


@dataclass
class ParseResult:
    """Outcome of ``try_parse``: either a version or the error that rejected the input."""
    version: Optional[Version] = None
    error: Optional[MalformedVersion] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def version_or(self, default: Optional[Version] = None) -> Optional[Version]:
        """
        Return the parsed version, or ``default`` when parsing failed.

        Callers that want the historical behaviour of treating garbage as
        0.0.0 pass ``Version(0, 0, 0)`` explicitly.
        """
        return self.version if self.ok else default


def parse(text: str, allow_prefix: bool = True) -> Version:
    """
    Parse a version string.

    Args:
        text: Candidate version such as "1.0.0-alpha+build.1"
        allow_prefix: Accept and discard a single leading "v"

    Returns:
        Parsed Version

    Raises:
        MalformedVersion: If the text does not fully match the grammar
        TypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, not {type(text).__name__}")

    candidate = text
    if allow_prefix and candidate.startswith(PREFIX):
        candidate = candidate[len(PREFIX):]

    match = VERSION_PATTERN.fullmatch(candidate)
    if not match:
        reason = _explain_mismatch(candidate, allow_prefix)
        logger.debug(f"Rejected version '{text}': {reason}")
        raise MalformedVersion(reason, version=text)

    groups = match.groupdict()
    prerelease = groups['prerelease'] or ""
    build = groups['build'] or ""

    for identifier in prerelease.split('.') if prerelease else []:
        if _has_leading_zero(identifier):
            reason = f"numeric pre-release identifier '{identifier}' has a leading zero"
            logger.debug(f"Rejected version '{text}': {reason}")
            raise MalformedVersion(reason, version=text)

    numbers = []
    for name in ('major', 'minor', 'patch'):
        # No leading zeros, so a longer digit string is always out of range
        digits = groups[name]
        if len(digits) > _NUMERIC_MAX_DIGITS or int(digits) > NUMERIC_MAX:
            reason = f"{name} version exceeds {NUMERIC_MAX}"
            logger.debug(f"Rejected version '{text[:64]}': {reason}")
            raise MalformedVersion(reason, version=text)
        numbers.append(int(digits))

    return Version(numbers[0], numbers[1], numbers[2], prerelease, build)


def try_parse(text: str, allow_prefix: bool = True) -> ParseResult:
    """Parse a version string without raising on malformed input."""
    try:
        return ParseResult(version=parse(text, allow_prefix=allow_prefix))
    except MalformedVersion as e:
        return ParseResult(error=e)


def is_valid(text: str, allow_prefix: bool = True) -> bool:
    """Check whether a string is a valid version."""
    return try_parse(text, allow_prefix=allow_prefix).ok


def _has_leading_zero(identifier: str) -> bool:
    return len(identifier) > 1 and identifier[0] == '0' and _DIGITS.fullmatch(identifier) is not None


def _explain_mismatch(candidate: str, allow_prefix: bool) -> str:
    """Describe why a string failed to match, for error messages only."""
    if not candidate:
        return "empty version string"

    if candidate.startswith(PREFIX) and not allow_prefix:
        return "'v' prefix is not allowed"

    core, _, build = candidate.partition('+')
    core, _, prerelease = core.partition('-')

    parts = core.split('.')
    if len(parts) != 3:
        return f"expected MAJOR.MINOR.PATCH, got {len(parts)} component(s)"

    for name, part in zip(('major', 'minor', 'patch'), parts):
        if not _DIGITS.fullmatch(part):
            return f"{name} version '{part}' is not a number"
        if _has_leading_zero(part):
            return f"{name} version '{part}' has a leading zero"

    for label, section, present in (('pre-release', prerelease, '-' in candidate.split('+', 1)[0]),
                                     ('build metadata', build, '+' in candidate)):
        if not present:
            continue
        for identifier in section.split('.'):
            if not identifier:
                return f"empty {label} identifier"
            if not _IDENTIFIER_CHARS.fullmatch(identifier):
                return f"invalid character in {label} identifier '{identifier}'"

    return "does not match MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]"
