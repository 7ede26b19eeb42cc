"""Configuration manager for CGA.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Local Config (.cga in the working directory or its parents)
    3. Global Config (~/.cga-config)
    4. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from cga.config.settings import CONFIG_FILE, Settings
from cga.utils.console import console, print_header, print_info
from cga.utils.logging import log_message

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads configuration with cascading precedence.

    Security features:
    - Safe line-by-line parsing (no eval/exec)
    - Only known keys are read from the environment

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.cga-config file
        start_dir: Directory the local config search starts from (CWD if None)
        local_config_path: Path to discovered local .cga file (after load)
    """

    LOCAL_CONFIG_NAME = ".cga"
    GLOBAL_CONFIG_NAME = ".cga-config"

    def __init__(
        self,
        global_config_path: Path | None = None,
        start_dir: Path | None = None,
    ) -> None:
        self.global_config_path = global_config_path or CONFIG_FILE
        self.start_dir = start_dir
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults, so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values

        Raises:
            ConfigurationError: If REGION_ABBREVIATIONS is malformed
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        # Structured values must parse before the workflow makes any gcloud call
        self.settings.get_region_abbreviations()

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find local .cga config by traversing up from start_dir.

        start_dir is the parent directory of the new project (the CLI's
        --directory), falling back to CWD. Stops at the first .cga file,
        at a repository root (.git) or at the filesystem root.
        """
        current = self.start_dir or Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.is_file():
                return config_path

            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load KEY=VALUE pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        with path.open() as f:
            for line in f:
                line = line.strip()

                if not line or line.startswith("#"):
                    continue

                match = pattern.match(line)
                if match:
                    key, value = match.groups()

                    # Single quotes are literal; double quotes allow escapes
                    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                        value = self._unescape_value(value[1:-1])
                    elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                        value = value[1:-1]

                    self._raw_values[key] = value
                    self._config_sources[key] = source
                else:
                    logger.warning(f"Ignoring malformed line in {path}: {line}")

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Unescape backslash sequences in a double-quoted value."""
        return re.sub(r"\\(.)", r"\1", value)

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object."""
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore
        setattr(self.settings, attr, value)

    def get_source(self, key: str) -> str:
        """Return where a key's effective value came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        if self.local_config_path:
            print_info(f"Local config:  {self.local_config_path}")
        else:
            print_info("Local config:  (not found)")
        console.print()

        s = self.settings
        console.print("  [bold]Scaffolding:[/bold]")
        console.print(
            f"    Template Repository: {s.template_repository} "
            f"[dim]({self.get_source('TEMPLATE_REPOSITORY')})[/dim]"
        )
        console.print(
            f"    Package Manager: {s.package_manager} "
            f"[dim]({self.get_source('PACKAGE_MANAGER')})[/dim]"
        )
        console.print()

        console.print("  [bold]OAuth:[/bold]")
        console.print(
            f"    Local Origin: {s.local_origin} [dim]({self.get_source('LOCAL_ORIGIN')})[/dim]"
        )
        console.print()

        console.print("  [bold]Regions:[/bold]")
        console.print(
            f"    Extra Abbreviations: {s.region_abbreviations or '(none)'} "
            f"[dim]({self.get_source('REGION_ABBREVIATIONS')})[/dim]"
        )
        console.print()


__all__ = [
    "ConfigManager",
]
