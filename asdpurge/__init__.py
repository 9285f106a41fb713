"""asdpurge - find, measure and purge .asd files under a directory tree."""

__version__ = "0.1.0"

from asdpurge.purge import PurgeController, RunMode
from asdpurge.scanner import Scanner

__all__ = ["PurgeController", "RunMode", "Scanner"]
