"""Main scanner implementation."""

import logging
from pathlib import Path

from asdpurge.config import ScannerConfig
from asdpurge.scanner.backends import ScanBackend, get_backend
from asdpurge.scanner.errors import InvalidRootError
from asdpurge.scanner.models import ScanResult

logger = logging.getLogger(__name__)


class Scanner:
    """Finds files with the target extension under a root directory."""

    def __init__(
        self,
        config: ScannerConfig | None = None,
        backend: ScanBackend | None = None,
    ):
        self.config = config or ScannerConfig()
        self.backend = backend or get_backend(self.config.backend, self.config.find_command)

    def scan(self, root: Path) -> ScanResult:
        if not root.is_dir():
            raise InvalidRootError(root)

        logger.debug("Scanning %s with %s backend", root, self.backend.name)
        entries = self.backend.find_files(root, self.config.extension)
        result = ScanResult(root=root, entries=entries)
        logger.debug("Found %d files (%d bytes)", result.count, result.total_bytes)
        return result
