"""Traversal backend selection."""

from pathlib import Path
from typing import Protocol

from asdpurge.scanner.filesystem import NativeBackend
from asdpurge.scanner.find import FindBackend
from asdpurge.scanner.models import ScanEntry

BACKEND_NAMES = ("native", "find")


class ScanBackend(Protocol):
    """Produces the matching files reachable from a root."""

    name: str

    def find_files(self, root: Path, extension: str) -> list[ScanEntry]:
        """Return matching regular files with their sizes, in traversal order."""


def get_backend(name: str, find_command: str = "find") -> ScanBackend:
    """Get traversal backend by name."""
    if name == "native":
        return NativeBackend()
    if name == "find":
        return FindBackend(command=find_command)
    raise ValueError(f"Unknown backend: {name}. Available: {list(BACKEND_NAMES)}")
