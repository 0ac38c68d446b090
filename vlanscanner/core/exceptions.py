"""Exceptions that abort a scan run."""

from pathlib import Path


class VlanScannerError(Exception):
    """Base class for unrecoverable scanner errors."""


class CommandSpawnError(VlanScannerError):
    """The shell could not be started at all (missing binary, permissions)."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Cannot spawn shell for {command!r}: {reason}")


class ReportWriteError(VlanScannerError):
    """The scan report could not be encoded or written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write report {path}: {reason}")


class ReportReadError(VlanScannerError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read report {path}: {reason}")
