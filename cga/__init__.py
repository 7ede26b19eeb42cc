"""CGA - Interactive bootstrap for Google App Engine starter projects.

This package provides a Python CLI that provisions a Google Cloud project,
collects OAuth credentials and scaffolds a ready-to-deploy starter app.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "CGA"
REQUIRED_TOOLS = ("gcloud", "git", "npm")

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "REQUIRED_TOOLS",
]
