"""Git operations for CGA.

This module covers template scaffolding (a shallow clone with its
history removed) and the initial commit of the generated project.
"""

import shutil
from pathlib import Path

from cga.integrations.commands import Runner
from cga.utils.errors import ScaffoldError
from cga.utils.logging import log_message

INITIAL_COMMIT_MESSAGE = "initial"


def scaffold_template(runner: Runner, repository: str, target: Path) -> None:
    """Copy a template repository into a new directory.

    The template is cloned at depth 1 and its .git directory is removed,
    so the new project starts without the template's history.

    Args:
        runner: Command runner
        repository: Git URL of the template
        target: Directory to create; must not exist yet

    Raises:
        ScaffoldError: If target already exists
        CommandFailedError: If the clone fails
    """
    if target.exists():
        raise ScaffoldError(f"Target directory already exists: {target}")

    runner.run(["git", "clone", "--depth", "1", "--quiet", repository, str(target)])

    git_dir = target / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)
        log_message(f"Removed template history from {target}")


def init_repository(runner: Runner, directory: Path) -> None:
    """Run `git init` on a directory."""
    runner.run(["git", "init", "--quiet", str(directory)])


def stage_all(runner: Runner, directory: Path) -> None:
    """Stage every file in the repository at directory."""
    runner.run(["git", "-C", str(directory), "add", "."])


def commit(runner: Runner, directory: Path, message: str = INITIAL_COMMIT_MESSAGE) -> None:
    """Commit staged changes in the repository at directory."""
    runner.run(["git", "-C", str(directory), "commit", "--quiet", "-m", message])


__all__ = [
    "INITIAL_COMMIT_MESSAGE",
    "scaffold_template",
    "init_repository",
    "stage_all",
    "commit",
]
