"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def asd_tree(tmp_path: Path) -> tuple[Path, dict[Path, int]]:
    """Build a tree with matches at depth 0, 1 and 3 plus files that must not match.

    Returns the root and a mapping of every expected match to its size.
    """
    root = tmp_path / "samples"
    deep = root / "drums" / "kicks" / "909"
    deep.mkdir(parents=True)
    (root / "bass").mkdir()
    (root / "empty").mkdir()

    expected = {
        root / "loop.wav.asd": 10,
        root / "bass" / "sub.wav.asd": 2048,
        deep / "kick.wav.asd": 300,
    }
    for path, size in expected.items():
        path.write_bytes(b"x" * size)

    (root / "loop.wav").write_bytes(b"w" * 50)
    (root / "bass" / "notes.txt").write_text("not an asd file")
    (root / "drums" / "KICK.ASD").write_bytes(b"u" * 7)
    (root / "drums" / "kick.asd.bak").write_bytes(b"b" * 9)

    return root, expected
