"""Settings dataclass for CGA configuration.

This module defines the Settings dataclass that holds all configuration
values. Every value has a built-in default, so a missing config file
changes nothing about the workflow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from cga.utils.errors import ConfigurationError

DEFAULT_TEMPLATE_REPOSITORY = "git@github.com:nitedani/nestjs-next.js-starter"
DEFAULT_LOCAL_ORIGIN = "http://localhost:3000"
DEFAULT_PACKAGE_MANAGER = "npm"

_REGION_PAIR = re.compile(r"^([a-z0-9-]+)=([a-z]{2})$")


@dataclass
class Settings:
    """Configuration settings for CGA.

    All settings have sensible defaults and can be loaded from
    the configuration file (~/.cga-config).

    Attributes:
        template_repository: Git URL of the starter template to scaffold
        local_origin: Origin of the local dev server (OAuth origin and redirect)
        package_manager: Executable used to install dependencies
        region_abbreviations: Extra "region=abbr" pairs, comma separated
    """

    template_repository: str = DEFAULT_TEMPLATE_REPOSITORY
    local_origin: str = DEFAULT_LOCAL_ORIGIN
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    region_abbreviations: str = ""

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "TEMPLATE_REPOSITORY": "template_repository",
            "LOCAL_ORIGIN": "local_origin",
            "PACKAGE_MANAGER": "package_manager",
            "REGION_ABBREVIATIONS": "region_abbreviations",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key, or None if unknown."""
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    def get_region_abbreviations(self) -> dict[str, str]:
        """Parse REGION_ABBREVIATIONS into a region -> abbreviation dict.

        Format: ``europe-west3=ey,us-central=uc``. Whitespace around
        entries is ignored.

        Returns:
            Mapping of configured region codes to abbreviations (may be empty)

        Raises:
            ConfigurationError: If an entry is not a ``region=xx`` pair
        """
        result: dict[str, str] = {}
        for entry in self.region_abbreviations.split(","):
            entry = entry.strip()
            if not entry:
                continue
            match = _REGION_PAIR.match(entry)
            if not match:
                raise ConfigurationError(
                    f"Invalid REGION_ABBREVIATIONS entry '{entry}'. "
                    "Expected <region>=<two-letter abbreviation>."
                )
            region, abbreviation = match.groups()
            result[region] = abbreviation
        return result


# Default configuration file path
CONFIG_FILE = Path.home() / ".cga-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "DEFAULT_TEMPLATE_REPOSITORY",
    "DEFAULT_LOCAL_ORIGIN",
    "DEFAULT_PACKAGE_MANAGER",
]
