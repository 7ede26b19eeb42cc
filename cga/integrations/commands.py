"""External command execution for CGA.

Every call to gcloud, git and the package manager goes through a
CommandRunner, so workflow code never touches subprocess directly and
tests can substitute a fake runner with scripted output.
"""

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from cga.utils.errors import CommandFailedError
from cga.utils.logging import log_command, log_message


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful external command.

    Attributes:
        args: The argument vector that was executed
        returncode: Process exit status (always 0 for returned results)
        stdout: Captured standard output ("" when not captured)
        stderr: Captured standard error ("" when not captured)
    """

    args: tuple[str, ...]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def command(self) -> str:
        """The command line as a shell-quoted string."""
        return shlex.join(self.args)


class Runner(Protocol):
    """Anything that can run a command and return its captured output."""

    def run(
        self,
        args: list[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> CommandResult: ...


class CommandRunner:
    """Runs external commands with subprocess.

    Commands run without a shell and without a timeout. A non-zero exit
    status or a missing executable raises CommandFailedError.
    """

    def run(
        self,
        args: list[str],
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> CommandResult:
        """Run a command and return its result.

        Args:
            args: Argument vector, executable first
            cwd: Working directory for the command
            capture: Capture stdout/stderr. When False the command is
                attached to the terminal (needed for browser logins).

        Returns:
            CommandResult with captured output

        Raises:
            CommandFailedError: If the command cannot start or exits non-zero
        """
        command = shlex.join(args)
        log_message(f"Running: {command}" + (f" (cwd={cwd})" if cwd else ""))

        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                capture_output=capture,
                text=True,
            )
        except OSError as e:
            log_command(command, -1)
            raise CommandFailedError(command, None, str(e)) from e

        log_command(command, result.returncode)
        stdout = result.stdout or ""
        stderr = result.stderr or ""

        if result.returncode != 0:
            raise CommandFailedError(command, result.returncode, stderr)

        return CommandResult(
            args=tuple(args),
            returncode=result.returncode,
            stdout=stdout,
            stderr=stderr,
        )


__all__ = [
    "CommandResult",
    "CommandRunner",
    "Runner",
]
