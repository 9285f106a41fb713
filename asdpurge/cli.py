"""CLI interface for asdpurge."""

import logging
import sys
from pathlib import Path

import click

from asdpurge.config import Config
from asdpurge.purge import PurgeController, Reporter, UserCancelled, decide_run_mode
from asdpurge.purge.mode import Confirm, prompt_confirmation
from asdpurge.scanner import Scanner, ScanError
from asdpurge.scanner.backends import BACKEND_NAMES

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("root", type=click.Path(path_type=Path))
@click.option("--no-list", "-n", is_flag=True, help="Do not list individual files")
@click.option("--purge", is_flag=True, help="Delete the files found (asks for confirmation)")
@click.option("--dry-run", is_flag=True, help="Show what --purge would delete, delete nothing")
@click.option("--force", "-f", is_flag=True, help="Skip the confirmation prompt")
@click.option(
    "--backend",
    type=click.Choice(BACKEND_NAMES),
    default="native",
    help="Directory traversal backend",
)
@click.option("--verbose", "-v", is_flag=True, help="Log per-directory subtotals and debug output")
@click.pass_context
def cli(
    ctx: click.Context,
    root: Path,
    no_list: bool,
    purge: bool,
    dry_run: bool,
    force: bool,
    backend: str,
    verbose: bool,
) -> None:
    """Find .asd files under ROOT, report their total size and optionally purge them."""
    _configure_logging(verbose)

    config = Config(list_files=not no_list)
    config.scanner.backend = backend
    confirm: Confirm = (ctx.obj or {}).get("confirm", prompt_confirmation)

    if force:
        click.echo("WARN: running in force mode\n")
    if dry_run:
        click.echo("running with dry run. no files affected\n")

    try:
        mode = decide_run_mode(purge=purge, dry_run=dry_run, force=force, confirm=confirm)
    except UserCancelled:
        click.echo("aborted by user")
        sys.exit(0)
    except KeyboardInterrupt:
        sys.exit(130)

    click.echo(f"root dir: {root}")

    try:
        scanner = Scanner(config.scanner)
        controller = PurgeController(scanner, Reporter(list_files=config.list_files))
        controller.run(root, mode)
    except ScanError as e:
        logger.debug("Scan failed: %s", e, exc_info=True)
        click.echo(f"Error: {e.category}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
