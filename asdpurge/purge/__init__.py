"""Run mode decision and purge execution."""

from asdpurge.purge.controller import PurgeController, PurgeOutcome
from asdpurge.purge.mode import RunMode, UserCancelled, decide_run_mode, prompt_confirmation
from asdpurge.purge.report import Reporter

__all__ = [
    "PurgeController",
    "PurgeOutcome",
    "Reporter",
    "RunMode",
    "UserCancelled",
    "decide_run_mode",
    "prompt_confirmation",
]
