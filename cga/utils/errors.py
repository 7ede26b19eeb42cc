"""Custom exceptions and exit codes for CGA.

This module defines the exit codes and exception hierarchy used throughout
the application. Every failure that stops the bootstrap workflow is a
CgaError subclass carrying the exit code the CLI should return.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    TOOL_NOT_INSTALLED = 2
    CONFIGURATION_ERROR = 3
    USER_CANCELLED = 4
    COMMAND_FAILED = 5


class CgaError(Exception):
    """Base exception for CGA errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        message: The error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class ToolNotInstalledError(CgaError):
    """A required external CLI (gcloud, git, npm) is missing from PATH."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.TOOL_NOT_INSTALLED


class ConfigurationError(CgaError):
    """Configuration value is malformed or a lookup has no entry."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.CONFIGURATION_ERROR


class UnknownRegionError(ConfigurationError):
    """Selected App Engine region has no known hostname abbreviation.

    Raised instead of building an appspot.com URL with a missing fragment.

    Attributes:
        region: The region code that could not be resolved
    """

    def __init__(self, region: str, exit_code: ExitCode | None = None) -> None:
        self.region = region
        super().__init__(
            f"No hostname abbreviation known for region '{region}'. "
            "Add it with REGION_ABBREVIATIONS=<region>=<abbr> in your config.",
            exit_code,
        )


class UserCancelledError(CgaError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User aborts a prompt (questionary returns None)
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


class CommandFailedError(CgaError):
    """External command exited non-zero or could not be started.

    Attributes:
        command: The command line that failed
        returncode: Process exit status (None when the executable was not found)
        stderr: Captured standard error, if any
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.COMMAND_FAILED

    def __init__(
        self,
        command: str,
        returncode: int | None = None,
        stderr: str = "",
        exit_code: ExitCode | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr

        if returncode is None:
            message = f"Could not run '{command}'"
        else:
            message = f"Command '{command}' failed with exit code {returncode}"
        detail = stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, exit_code)


class InvalidInputError(CgaError):
    """An operator answer reached a step without passing its validator."""


class ScaffoldError(CgaError):
    """Template scaffolding or project file generation failed."""


__all__ = [
    "ExitCode",
    "CgaError",
    "ToolNotInstalledError",
    "ConfigurationError",
    "UnknownRegionError",
    "UserCancelledError",
    "InvalidInputError",
    "CommandFailedError",
    "ScaffoldError",
]
