"""
Custom exceptions for semaver.
"""


class SemaverError(Exception):
    """Base exception class for all semaver errors."""
    pass


class MalformedVersion(SemaverError, ValueError):
    """Raised when a string does not fully match the Semantic Versioning grammar."""

    def __init__(self, reason: str, version: str = None):
        self.reason = reason
        self.version = version

        if version is not None:
            message = f"Malformed version '{version}': {reason}"
        else:
            message = f"Malformed version: {reason}"

        super().__init__(message)


class ConfigurationError(SemaverError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path

        if file_path:
            message = f"Configuration error in '{file_path}': {message}"

        super().__init__(message)
