"""Purge controller: scan, then report, preview or delete."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from asdpurge.purge.mode import RunMode
from asdpurge.purge.report import Reporter
from asdpurge.scanner import Scanner
from asdpurge.scanner.models import ScanResult

logger = logging.getLogger(__name__)


@dataclass
class PurgeOutcome:
    """What a run found and what it removed."""

    mode: RunMode
    result: ScanResult
    deleted: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)


class PurgeController:
    """Runs one scan and acts on it according to the run mode."""

    def __init__(self, scanner: Scanner, reporter: Reporter | None = None):
        self.scanner = scanner
        self.reporter = reporter or Reporter()

    def run(self, root: Path, mode: RunMode) -> PurgeOutcome:
        result = self.scanner.scan(root)
        outcome = PurgeOutcome(mode=mode, result=result)

        self.reporter.report_entries(result)

        if mode is RunMode.PURGE:
            self._delete_files(outcome)
            self.reporter.report_totals(result, deleted=True)
            self.reporter.report_removal(len(outcome.deleted), len(outcome.failed))
        elif mode is RunMode.DRY_RUN_PURGE:
            self.reporter.report_totals(result)
            self.reporter.report_would_remove(result.paths)
        else:
            self.reporter.report_totals(result)

        return outcome

    def _delete_files(self, outcome: PurgeOutcome) -> None:
        for path in outcome.result.paths:
            try:
                path.unlink()
            except FileNotFoundError:
                logger.error("File disappeared before it could be removed: %s", path)
                outcome.failed.append(path)
            except OSError as e:
                logger.error("Could not remove %s: %s", path, e)
                outcome.failed.append(path)
            else:
                logger.debug("Removed %s", path)
                outcome.deleted.append(path)
