"""Configuration module for asdpurge."""

from dataclasses import dataclass, field

TARGET_EXTENSION = ".asd"


@dataclass
class ScannerConfig:
    extension: str = TARGET_EXTENSION
    backend: str = "native"
    find_command: str = "find"


@dataclass
class Config:
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    list_files: bool = True
