"""Scan-level errors."""


class ScanError(Exception):
    """Base class for fatal scan errors.

    ``category`` is the text shown to the user; the exception message may hold
    more detail and is only logged.
    """

    category = "unexpected error"


class UnsupportedPlatformError(ScanError):
    """Raised when the traversal backend cannot run on this host."""

    category = "unsupported OS"


class InvalidRootError(ScanError):
    """Raised when the root path is missing or not a directory."""

    def __init__(self, root: object):
        super().__init__(f"root directory not found or not a directory: {root}")
        self.root = root

    @property
    def category(self) -> str:  # type: ignore[override]
        return str(self)


class ScanBackendError(ScanError):
    """Raised when the external listing tool fails."""

    category = "scan failed"

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr
