"""Console reporting for scan and purge results."""

from pathlib import Path

import click

from asdpurge.formatting import format_size
from asdpurge.scanner.models import ScanResult


class Reporter:
    """Writes the run report to stdout."""

    def __init__(self, list_files: bool = True):
        self.list_files = list_files

    def report_entries(self, result: ScanResult) -> None:
        if not self.list_files:
            return
        for entry in result.entries:
            click.echo(f"({format_size(entry.size)})\t{_display_path(entry.path, result.root)}")

    def report_totals(self, result: ScanResult, deleted: bool = False) -> None:
        suffix = " (deleted)" if deleted else ""
        click.echo()
        click.echo(f"total asd files: {result.count}")
        click.echo(f"total asd files size: {format_size(result.total_bytes)}{suffix}")

    def report_would_remove(self, paths: list[Path]) -> None:
        click.echo()
        click.echo("files that would be removed:")
        for path in paths:
            click.echo(str(path))

    def report_removal(self, removed: int, failed: int) -> None:
        click.echo(f"removed {removed} files")
        if failed:
            click.echo(f"failed to remove {failed} files")


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
