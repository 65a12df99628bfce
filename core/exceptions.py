"""
Custom exception hierarchy for sharecode-cli.

Every failure of a run surfaces as one of these, so cli.main can report them
uniformly and pick the exit status.
"""

class SharecodeError(Exception):
    """Base exception for all sharecode-cli errors."""
    exit_code = 1

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        return self.message


class UsageError(SharecodeError):
    """Raised when the command line is incomplete or inconsistent."""
    exit_code = 2


class ConfigurationError(SharecodeError):
    """Raised when the config file can't be read or fails validation."""
    pass


class ScanError(SharecodeError):
    """Raised when the directory to classify can't be read."""
    pass


class ClassificationError(SharecodeError):
    """Raised when no language category matches the directory."""
    pass


class SharedCodeNotFoundError(SharecodeError):
    """Raised when the resolved shared-code path doesn't exist."""
    pass


class WrongPathTypeError(SharecodeError):
    """Raised when the resolved shared-code path isn't a regular file."""
    pass


class CopyExecutionError(SharecodeError):
    """Raised when the copy command can't be launched."""
    pass
