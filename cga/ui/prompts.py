"""Interactive prompts for CGA.

This module provides Questionary-based user input prompts with
consistent styling and error handling.
"""

from collections.abc import Callable

import questionary
from questionary import Style

from cga.utils.errors import UserCancelledError
from cga.utils.logging import log_message

# A validator returns True to accept the value or a reason string to reject it
Validator = Callable[[str], bool | str]

# Custom style matching the application theme
custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def prompt_confirm(message: str, default: bool = True) -> bool:
    """Prompt for yes/no confirmation.

    Args:
        message: Question to ask
        default: Default value if user presses Enter

    Returns:
        True for yes, False for no

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt confirm: {message}")

    try:
        result = questionary.confirm(
            message,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled confirmation prompt")

        log_message(f"User response: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_input(
    message: str,
    default: str = "",
    *,
    validate: Validator | None = None,
    sensitive: bool = False,
) -> str:
    """Prompt for text input.

    The validator is evaluated by questionary on every submission; a
    reason string is shown under the prompt and the question is asked again.

    Args:
        message: Prompt message
        default: Default value
        validate: Optional validation function
        sensitive: Keep the answer out of the log file

    Returns:
        User input string

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt input: {message}")

    try:
        result = questionary.text(
            message,
            default=default,
            validate=validate,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled input prompt")

        if sensitive:
            log_message("User input: <hidden>")
        else:
            log_message(f"User input: {result[:50]}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


def prompt_select(
    message: str,
    choices: list[str],
    default: str | None = None,
) -> str:
    """Prompt for single selection from list.

    Args:
        message: Prompt message
        choices: List of choices
        default: Default selection

    Returns:
        Selected choice

    Raises:
        UserCancelledError: If user presses Ctrl+C
    """
    log_message(f"Prompt select: {message}")

    try:
        result = questionary.select(
            message,
            choices=choices,
            default=default,
            style=custom_style,
        ).ask()

        if result is None:
            raise UserCancelledError("User cancelled selection prompt")

        log_message(f"User selected: {result}")
        return result

    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")


__all__ = [
    "Validator",
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "prompt_select",
]
