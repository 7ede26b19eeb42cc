"""CLI interface for CGA.

This module provides the Typer-based command-line interface. The
bootstrap itself takes no parameters: everything it needs is asked
interactively while it runs.
"""

from pathlib import Path
from typing import Annotated

import typer

from cga.config.manager import ConfigManager
from cga.integrations.commands import CommandRunner
from cga.utils.console import (
    print_error,
    print_info,
    print_success,
    show_banner,
    show_version,
)
from cga.utils.errors import CgaError, ExitCode, ToolNotInstalledError, UserCancelledError
from cga.utils.logging import check_cli_installed, setup_logging
from cga.workflow.runner import run_bootstrap_workflow
from cga.workflow.state import BootstrapContext

# Create Typer app
app = typer.Typer(
    name="cga",
    help="CGA - Bootstrap a Google App Engine starter project",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path | None,
        typer.Option(
            "--directory",
            "-C",
            help="Parent directory for the new project (default: current directory)",
            file_okay=False,
            dir_okay=True,
            exists=True,
            resolve_path=True,
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """CGA - Bootstrap a Google App Engine starter project.

    Signs in to gcloud, creates a project and App Engine app, collects
    OAuth credentials, scaffolds the starter template with its .env files,
    commits it and installs dependencies.
    """
    setup_logging()

    try:
        show_banner()

        workdir = directory or Path.cwd()
        config = ConfigManager(start_dir=workdir)
        config.load()

        if show_config:
            config.show()
            raise typer.Exit()

        _check_prerequisites(config.settings.package_manager)

        ctx = BootstrapContext.create(
            CommandRunner(),
            settings=config.settings,
            workdir=workdir,
        )
        result = run_bootstrap_workflow(ctx)
        if not result.success:
            raise typer.Exit(result.exit_code)

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except CgaError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


def _check_prerequisites(package_manager: str) -> None:
    """Verify the external tools the workflow invokes are installed.

    Raises:
        ToolNotInstalledError: Naming every missing tool
    """
    missing: list[str] = []
    for tool in ("gcloud", "git", package_manager):
        installed, message = check_cli_installed(tool)
        if installed:
            print_success(f"{tool}: {message}")
        else:
            print_error(message)
            missing.append(tool)

    if missing:
        raise ToolNotInstalledError(f"Missing required tools: {', '.join(missing)}")


if __name__ == "__main__":
    app()
