"""Traversal backend that delegates to the host ``find`` utility."""

import logging
import os
import shutil
import subprocess
from pathlib import Path

from asdpurge.scanner.errors import ScanBackendError, UnsupportedPlatformError
from asdpurge.scanner.filesystem import measure_file
from asdpurge.scanner.models import ScanEntry

logger = logging.getLogger(__name__)


class FindBackend:
    """Wrapper for ``find ROOT -type f -name '*EXT' -print0``."""

    name = "find"

    def __init__(self, command: str = "find") -> None:
        self.command = command

    def find_files(self, root: Path, extension: str) -> list[ScanEntry]:
        self._check_find()

        cmd = [
            self.command,
            _root_argument(root),
            "-type",
            "f",
            "-name",
            f"*{extension}",
            "-print0",
        ]
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except FileNotFoundError as e:
            raise UnsupportedPlatformError(f"{self.command} could not be started: {e}") from e
        except OSError as e:
            raise ScanBackendError(f"{self.command} could not be started: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise ScanBackendError(
                f"{self.command} exited with status {result.returncode}: {stderr}",
                stderr=stderr or f"{self.command} command failed",
            )

        return [ScanEntry(path=p, size=measure_file(p)) for p in parse_output(result.stdout)]

    def _check_find(self) -> None:
        if os.name == "nt":
            raise UnsupportedPlatformError("the find backend is not available on Windows")
        if not shutil.which(self.command):
            raise UnsupportedPlatformError(f"{self.command} is required but not found on PATH")


def parse_output(stdout: bytes) -> list[Path]:
    """Split NUL-separated ``find`` output into paths.

    Bytes that are not valid in the filesystem encoding are kept as surrogate
    escapes so the path still refers to the file on disk.
    """
    return [Path(os.fsdecode(raw)) for raw in stdout.split(b"\0") if raw]


def _root_argument(root: Path) -> str:
    """Return ``root`` in a form ``find`` cannot mistake for an option."""
    if root.is_absolute():
        return str(root)
    return os.path.join(".", str(root))
