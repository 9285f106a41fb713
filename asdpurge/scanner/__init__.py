"""Scanner module for locating target files."""

from .backends import get_backend
from .errors import InvalidRootError, ScanBackendError, ScanError, UnsupportedPlatformError
from .models import ScanEntry, ScanResult
from .scanner import Scanner

__all__ = [
    "Scanner",
    "ScanEntry",
    "ScanResult",
    "get_backend",
    "ScanError",
    "InvalidRootError",
    "ScanBackendError",
    "UnsupportedPlatformError",
]
