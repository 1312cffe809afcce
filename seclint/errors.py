# Exceptions raised by seclint. Rules never raise; only the output side can fail a scan.


class SeclintError(Exception):
    """Base class for seclint errors."""


class SinkError(SeclintError):
    """The reporter could not write a diagnostic; the scan cannot continue."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
