"""Utility modules for CGA.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration and CLI probing
"""

from cga.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_url,
    print_warning,
    show_banner,
)
from cga.utils.errors import (
    CgaError,
    CommandFailedError,
    ConfigurationError,
    ExitCode,
    InvalidInputError,
    ScaffoldError,
    ToolNotInstalledError,
    UnknownRegionError,
    UserCancelledError,
)
from cga.utils.logging import check_cli_installed, log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_url",
    "show_banner",
    # Errors
    "ExitCode",
    "CgaError",
    "CommandFailedError",
    "ConfigurationError",
    "InvalidInputError",
    "ScaffoldError",
    "ToolNotInstalledError",
    "UnknownRegionError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
    "check_cli_installed",
]
