"""Data models for scan results."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ScanEntry:
    """A matched file and the size recorded for it."""

    path: Path
    size: int


@dataclass
class ScanResult:
    """Matched files under a root, in traversal order."""

    root: Path
    entries: list[ScanEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def total_bytes(self) -> int:
        return sum(e.size for e in self.entries)

    @property
    def paths(self) -> list[Path]:
        return [e.path for e in self.entries]
