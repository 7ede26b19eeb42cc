"""Rich-based console output for the bootstrap run.

Progress lines go to stdout so the operator can follow gcloud, git and
npm steps between prompts. Errors go to stderr. Console URLs for billing,
consent and OAuth setup print on their own line so terminals can link
them. Every status line is mirrored to the CGA_LOG file.
"""

from rich.console import Console
from rich.theme import Theme

from cga import __version__

# "step" marks external commands, "highlight" the labels of console URLs
custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

# Step narration and OAuth instructions
console = Console(theme=custom_theme)
# Failed gcloud/git/npm commands and missing tools
console_err = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    """Print error message in red."""
    from cga.utils.logging import log_message

    console_err.print(f"[error][[ERROR]][/error] [red]{message}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    from cga.utils.logging import log_message

    console.print(f"[success][[SUCCESS]][/success] [green]{message}[/green]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    from cga.utils.logging import log_message

    console.print(f"[warning][[WARNING]][/warning] [yellow]{message}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in blue/cyan."""
    from cga.utils.logging import log_message

    console.print(f"[info][[INFO]][/info] [cyan]{message}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Print step indicator with arrow."""
    console.print(f"[step]➜[/step] {message}")


def print_url(label: str, url: str) -> None:
    """Print a labelled URL on its own line so terminals can link it."""
    console.print(f"  [highlight]{label}[/highlight]")
    console.print(f"    {url}", soft_wrap=True)


def show_banner() -> None:
    """Display ASCII art banner."""
    banner = """
[bold magenta]  ____  ____    _
 / ___|/ ___|  / \\
| |   | |  _  / _ \\
| |___| |_| |/ ___ \\
 \\____|\\____/_/   \\_\\
[/bold magenta]
[bold cyan]Google App Engine Project Bootstrap[/bold cyan]
[white]Version {version}[/white]
"""
    console.print(banner.format(version=__version__))


def show_version() -> None:
    """Display version information."""
    from cga import REQUIRED_TOOLS

    console.print(f"[bold]CGA[/bold] v{__version__}")
    console.print()
    console.print("Requirements:")
    for tool in REQUIRED_TOOLS:
        console.print(f"  - {tool}")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_url",
    "show_banner",
    "show_version",
]
