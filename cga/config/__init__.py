"""Configuration management for CGA.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

The configuration format is flat KEY=VALUE (environment variable style):

    TEMPLATE_REPOSITORY=git@github.com:acme/starter
    REGION_ABBREVIATIONS=me-west1=zf
"""

from cga.config.manager import ConfigManager
from cga.config.settings import CONFIG_FILE, Settings

__all__ = [
    "CONFIG_FILE",
    "ConfigManager",
    "Settings",
]
