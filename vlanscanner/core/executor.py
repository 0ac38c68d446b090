"""Shell command execution with success/failure classification."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from vlanscanner.core.exceptions import CommandSpawnError
from vlanscanner.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    command: str
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Captured stdout on success, stderr on failure."""
        return self.stdout if self.ok else self.stderr


class CommandExecutor:
    """Runs one command at a time through the host shell.

    A nonzero exit status is a normal, recoverable result. Only a shell that
    cannot be started raises, as :class:`CommandSpawnError`.
    """

    def __init__(self, shell: str = "sh") -> None:
        self.shell = shell

    def run(self, command: str) -> CommandResult:
        try:
            proc = subprocess.run(
                [self.shell, "-c", command],
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            logger.error("Shell spawn failed", command=command, shell=self.shell, error=str(exc))
            raise CommandSpawnError(command, str(exc)) from exc

        result = CommandResult(
            command=command,
            returncode=proc.returncode,
            stdout=proc.stdout.decode("utf-8", errors="replace"),
            stderr=proc.stderr.decode("utf-8", errors="replace"),
        )
        logger.debug("Command finished", command=command, returncode=result.returncode)
        return result
