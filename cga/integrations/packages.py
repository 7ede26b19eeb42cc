"""Dependency installation for scaffolded projects."""

from pathlib import Path

from cga.integrations.commands import Runner

# Extra arguments per package manager for `install`
INSTALL_FLAGS: dict[str, list[str]] = {
    "npm": ["--force", "--silent"],
}


def install_dependencies(runner: Runner, directory: Path, package_manager: str = "npm") -> None:
    """Run `<package_manager> install` inside directory."""
    flags = INSTALL_FLAGS.get(package_manager, [])
    runner.run([package_manager, "install", *flags], cwd=directory)


__all__ = [
    "INSTALL_FLAGS",
    "install_dependencies",
]
