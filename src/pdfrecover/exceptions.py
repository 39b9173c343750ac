"""
Exceptions raised by pdfrecover.

Only run-level (fatal) failures are exceptions. A candidate that the
repair tool rejects is reported as a failed
:class:`pdfrecover.recovery.RepairOutcome` instead.
"""


class RecoveryError(Exception):
    """Base exception for all pdfrecover errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown recovery error occurred."


class DumpReadError(RecoveryError):
    """Raised when the source dump cannot be read."""

    @property
    def default_message(self) -> str:
        return "Unable to read the source dump."


class StagingError(RecoveryError):
    """Raised when a working directory or a staged candidate cannot be written."""

    @property
    def default_message(self) -> str:
        return "Unable to stage carved candidates."


class CleanupError(RecoveryError):
    """Raised when the staging directory cannot be removed."""

    @property
    def default_message(self) -> str:
        return "Unable to remove the staging directory."
