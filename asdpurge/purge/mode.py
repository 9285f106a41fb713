"""Run mode decision and interactive confirmation."""

import sys
from collections.abc import Callable
from enum import Enum

import click

PROMPT = "purge mode will delete files. continue? (Y/n) "

Confirm = Callable[[], bool]


class RunMode(Enum):
    """What a run does with the files it finds."""

    REPORT = "report"
    DRY_RUN_PURGE = "dry-run-purge"
    PURGE = "purge"


class UserCancelled(Exception):
    """Raised when the user refuses the purge confirmation."""


def is_confirmation(line: str) -> bool:
    """Empty line or a leading y/Y confirms. EOF (no line at all) does not."""
    if not line:
        return False
    answer = line.rstrip("\r\n")
    return answer == "" or answer[0] in ("y", "Y")


def prompt_confirmation() -> bool:
    click.echo(PROMPT, nl=False)
    return is_confirmation(sys.stdin.readline())


def decide_run_mode(
    purge: bool,
    dry_run: bool,
    force: bool,
    confirm: Confirm = prompt_confirmation,
) -> RunMode:
    if not purge:
        return RunMode.REPORT

    if not force and not dry_run and not confirm():
        raise UserCancelled()

    return RunMode.DRY_RUN_PURGE if dry_run else RunMode.PURGE
