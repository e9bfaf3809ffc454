"""
Version information for semaver itself.

This module provides centralized version information to avoid hardcoding
version numbers throughout the codebase.
"""

from . import __version__
from .parser import parse


def get_version() -> str:
    """
    Get the current version of semaver.

    Returns:
        Version string (e.g., "1.0.0")
    """
    return __version__


def get_version_info() -> dict:
    """
    Get detailed version information.

    Returns:
        Dictionary with version details
    """
    version = parse(__version__)

    return {
        "version": __version__,
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease,
        "build": version.build,
        "is_prerelease": version.is_prerelease,
        "is_stable": version.major > 0 and not version.is_prerelease
    }


def get_full_name_with_version() -> str:
    """
    Get the full tool name with version.

    Returns:
        Full name string (e.g., "semaver v1.0.0")
    """
    return f"semaver v{__version__}"
