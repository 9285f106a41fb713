"""Native filesystem traversal for matching files."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from asdpurge.formatting import format_size
from asdpurge.scanner.models import ScanEntry

logger = logging.getLogger(__name__)


@dataclass
class DirectoryTotals:
    """Matches found under one directory, including its subdirectories."""

    entries: list[ScanEntry] = field(default_factory=list)
    total_bytes: int = 0

    def add(self, entry: ScanEntry) -> None:
        self.entries.append(entry)
        self.total_bytes += entry.size

    def merge(self, other: "DirectoryTotals") -> None:
        self.entries.extend(other.entries)
        self.total_bytes += other.total_bytes


def matches_extension(name: str, extension: str) -> bool:
    return name.endswith(extension)


def measure_file(path: str | Path) -> int:
    """Return the size of ``path`` in bytes, or 0 if it cannot be read."""
    try:
        return os.stat(path, follow_symlinks=False).st_size
    except FileNotFoundError:
        logger.warning("File disappeared during scan: %s", path)
    except PermissionError:
        logger.warning("Permission denied reading metadata: %s", path)
    except OSError as e:
        logger.warning("Could not read metadata for %s: %s", path, e)
    return 0


class NativeBackend:
    """Depth-first walk using os.scandir, no external process."""

    name = "native"

    def find_files(self, root: Path, extension: str) -> list[ScanEntry]:
        return _walk_recursive(root, extension).entries


def _walk_recursive(directory: Path, extension: str) -> DirectoryTotals:
    totals = DirectoryTotals()
    subdirs: list[Path] = []

    try:
        with os.scandir(directory) as entries:
            for entry in sorted(entries, key=lambda e: e.name):
                if _is_directory(entry):
                    subdirs.append(Path(entry.path))
                    continue
                scan_entry = _process_entry(entry, extension)
                if scan_entry:
                    totals.add(scan_entry)
    except PermissionError:
        logger.warning("Permission denied listing directory: %s", directory)
        return totals
    except OSError as e:
        logger.warning("Error listing directory %s: %s", directory, e)
        return totals

    for subdir in subdirs:
        totals.merge(_walk_recursive(subdir, extension))

    if totals.entries:
        logger.debug(
            "%s: %d files, %s",
            directory,
            len(totals.entries),
            format_size(totals.total_bytes),
        )
    return totals


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _process_entry(entry: os.DirEntry, extension: str) -> ScanEntry | None:
    if not matches_extension(entry.name, extension):
        return None

    try:
        if not entry.is_file(follow_symlinks=False):
            return None
    except OSError:
        return None

    return ScanEntry(path=Path(entry.path), size=measure_file(entry.path))
