"""UI components for CGA.

This package contains:
- prompts: Questionary-based user input prompts
"""

from cga.ui.prompts import (
    Validator,
    custom_style,
    prompt_confirm,
    prompt_input,
    prompt_select,
)

__all__ = [
    "Validator",
    "custom_style",
    "prompt_confirm",
    "prompt_input",
    "prompt_select",
]
