"""Test helper utilities for the CGA project."""

from tests.helpers.prompts import scripted_input

__all__ = ["scripted_input"]
