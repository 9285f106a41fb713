"""Tests for PurgeController."""

import logging
from pathlib import Path

from asdpurge.purge.controller import PurgeController
from asdpurge.purge.mode import RunMode
from asdpurge.purge.report import Reporter
from asdpurge.scanner import Scanner
from asdpurge.scanner.models import ScanEntry, ScanResult


class FixedScanner:
    """Returns a prepared result without touching the filesystem."""

    def __init__(self, result: ScanResult):
        self.result = result

    def scan(self, root: Path) -> ScanResult:
        return self.result


def _all_files(root: Path) -> set[Path]:
    return {p for p in root.rglob("*") if p.is_file()}


class TestReportMode:
    """Tests for RunMode.REPORT."""

    def test_lists_files_and_totals(self, asd_tree, capsys):
        root, expected = asd_tree

        outcome = PurgeController(Scanner()).run(root, RunMode.REPORT)
        out = capsys.readouterr().out

        assert outcome.deleted == []
        assert "(2.0 KiB)\tbass/sub.wav.asd" in out
        assert "(10.0 Bytes)\tloop.wav.asd" in out
        assert "total asd files: 3" in out
        assert "total asd files size: 2.3 KiB" in out
        assert "(deleted)" not in out
        assert all(p.exists() for p in expected)

    def test_no_list(self, asd_tree, capsys):
        root, _ = asd_tree

        PurgeController(Scanner(), Reporter(list_files=False)).run(root, RunMode.REPORT)
        out = capsys.readouterr().out

        assert "loop.wav.asd" not in out
        assert "total asd files: 3" in out

    def test_empty_result(self, tmp_path: Path, capsys):
        PurgeController(Scanner()).run(tmp_path, RunMode.REPORT)
        out = capsys.readouterr().out

        assert "total asd files: 0" in out
        assert "total asd files size: 0.0 Bytes" in out


class TestDryRunPurgeMode:
    """Tests for RunMode.DRY_RUN_PURGE."""

    def test_deletes_nothing(self, asd_tree, capsys):
        root, expected = asd_tree
        before = _all_files(root)

        outcome = PurgeController(Scanner()).run(root, RunMode.DRY_RUN_PURGE)
        out = capsys.readouterr().out

        assert outcome.deleted == []
        assert _all_files(root) == before

        listing = out.split("files that would be removed:\n", 1)[1]
        assert {Path(line) for line in listing.splitlines() if line} == set(expected)


class TestPurgeMode:
    """Tests for RunMode.PURGE."""

    def test_deletes_only_matches(self, asd_tree, capsys):
        root, expected = asd_tree
        untouched = _all_files(root) - set(expected)

        outcome = PurgeController(Scanner()).run(root, RunMode.PURGE)
        out = capsys.readouterr().out

        assert set(outcome.deleted) == set(expected)
        assert outcome.failed == []
        assert not any(p.exists() for p in expected)
        assert _all_files(root) == untouched
        assert "total asd files size: 2.3 KiB (deleted)" in out
        assert "removed 3 files" in out

    def test_failure_does_not_stop_run(self, tmp_path: Path, monkeypatch, caplog, capsys):
        stuck = tmp_path / "stuck.asd"
        other = tmp_path / "other.asd"
        stuck.write_bytes(b"11")
        other.write_bytes(b"2222")
        real_unlink = Path.unlink

        def unlink(self, *args, **kwargs):
            if self == stuck:
                raise PermissionError("read-only")
            return real_unlink(self, *args, **kwargs)

        monkeypatch.setattr(Path, "unlink", unlink)

        with caplog.at_level(logging.ERROR):
            outcome = PurgeController(Scanner()).run(tmp_path, RunMode.PURGE)
        out = capsys.readouterr().out

        assert outcome.failed == [stuck]
        assert outcome.deleted == [other]
        assert stuck.exists()
        assert not other.exists()
        assert "Could not remove" in caplog.text
        assert "total asd files size: 6.0 Bytes (deleted)" in out
        assert "failed to remove 1 files" in out

    def test_vanished_file_is_a_failure(self, tmp_path: Path, caplog):
        gone = tmp_path / "gone.asd"
        here = tmp_path / "here.asd"
        here.write_bytes(b"1")
        result = ScanResult(root=tmp_path, entries=[ScanEntry(gone, 5), ScanEntry(here, 1)])

        with caplog.at_level(logging.ERROR):
            outcome = PurgeController(FixedScanner(result)).run(tmp_path, RunMode.PURGE)

        assert outcome.failed == [gone]
        assert outcome.deleted == [here]
        assert "disappeared" in caplog.text
