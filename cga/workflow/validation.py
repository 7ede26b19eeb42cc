"""Input validators for interactive prompts.

All validators share one contract: they take the raw answer and return
True to accept it or a reason string to reject it. questionary shows the
reason and asks again.
"""

from cga.ui.prompts import Validator
from cga.utils.errors import InvalidInputError
from cga.workflow.constants import MIN_INPUT_LENGTH, PROJECT_PREFIX


def min_length_validator(min_length: int = MIN_INPUT_LENGTH) -> Validator:
    """Build a validator rejecting answers shorter than min_length."""

    def validate(value: str) -> bool | str:
        if len(value) < min_length:
            return f"At least {min_length} characters"
        return True

    return validate


def make_project_id(name: str) -> str:
    """Derive the project identifier from a validated project name.

    Raises:
        InvalidInputError: If name fails the minimum length rule
    """
    verdict = min_length_validator()(name)
    if verdict is not True:
        raise InvalidInputError(f"Invalid project name '{name}': {verdict}")
    return f"{PROJECT_PREFIX}{name}"


__all__ = [
    "min_length_validator",
    "make_project_id",
]
