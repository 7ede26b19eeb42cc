"""Logging configuration and shared CLI utilities for CGA.

This module provides file-based logging controlled by environment
variables, plus a helper to probe external CLI tools.

Environment Variables:
    CGA_LOG: Set to "true" to enable logging (default: "false")
    CGA_LOG_FILE: Path to log file (default: ~/.cga.log)
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path

# Environment variable configuration
LOG_ENABLED = os.environ.get("CGA_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("CGA_LOG_FILE", str(Path.home() / ".cga.log")))

# Module-level logger instance
_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure logging based on environment variables.

    Creates a logger that writes to the configured log file when
    CGA_LOG is set to "true". Otherwise, uses a NullHandler
    to suppress all log output.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("cga")

    # Clear any existing handlers
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger instance, creating it if necessary."""
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Log a message if logging is enabled.

    Messages are only written to the log file if CGA_LOG=true.

    Args:
        message: Message to log
    """
    logger = get_logger()
    logger.info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Log command execution with exit code.

    Args:
        command: The command that was executed
        exit_code: The exit code returned by the command
    """
    logger = get_logger()
    logger.info(f"COMMAND: {command} | EXIT_CODE: {exit_code}")


def check_cli_installed(cli_name: str) -> tuple[bool, str]:
    """Check if a CLI tool is installed and accessible.

    Looks up the CLI in PATH and runs --version.

    Args:
        cli_name: The CLI executable name (e.g. "gcloud", "git", "npm")

    Returns:
        (is_valid, message) tuple where message is the first line of the
        version output if installed, or an error message if not.
    """
    if shutil.which(cli_name):
        try:
            result = subprocess.run(
                [cli_name, "--version"],
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
                timeout=30,
            )
            log_command(f"{cli_name} --version", result.returncode)

            version_output = result.stdout.strip() or result.stderr.strip()
            if result.returncode == 0 and version_output:
                return True, version_output.splitlines()[0]

        except (OSError, subprocess.SubprocessError) as e:
            log_message(f"Failed to check {cli_name} CLI: {e}")

    return False, f"{cli_name} CLI is not installed or not in PATH"


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
    "log_command",
    "check_cli_installed",
]
