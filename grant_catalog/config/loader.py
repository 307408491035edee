"""
YAML configuration loader with validation.

Loads runtime settings from YAML files with:
- Environment variable substitution
- Schema validation
- Default values
"""

import os
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml
import structlog

from grant_catalog.core.clock import DEFAULT_TIMEZONE

logger = structlog.get_logger(__name__)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variables in text.

    Supports formats:
    - ${VAR_NAME} - required, warning and empty string if missing
    - ${VAR_NAME:-default} - optional with default

    Args:
        text: Text with env var placeholders

    Returns:
        Text with substituted values
    """
    def replace(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        value = os.getenv(var_expr)
        if value is None:
            logger.warning("env_var_not_set", var=var_expr)
            return ""
        return value

    return re.sub(r"\$\{([^}]+)\}", replace, text)


@dataclass
class Settings:
    """Runtime settings for a catalog run."""

    timezone: str = DEFAULT_TIMEZONE

    # Browser
    launch_browser: bool = True
    headless: bool = True
    browser_args: list[str] = field(default_factory=lambda: ["--no-sandbox"])

    # Output
    output_format: str = "text"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """
        Create from dictionary (e.g., from YAML).

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")

        settings = cls(**data)
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid output_format: {self.output_format!r}")
        if str(self.log_level).upper() not in LOG_LEVEL_NAMES:
            raise ValueError(f"Invalid log_level: {self.log_level!r}")
        if not isinstance(self.browser_args, list):
            raise ValueError("browser_args must be a list")


class ConfigLoader:
    """
    Configuration loader for runtime settings.

    Loads YAML config files and validates against expected schema.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing config files
                       (defaults to current working directory)
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd()

    def load_file(self, filename: str) -> dict:
        """
        Load YAML config file.

        Args:
            filename: Config file name (relative to config_dir)

        Returns:
            Parsed config dict

        Raises:
            FileNotFoundError: If the file does not exist
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info("loading_config", file=str(filepath))

        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()

        content = substitute_env_vars(content)
        config = yaml.safe_load(content)

        return config or {}

    def load_settings(self, filename: str = "grant_catalog.yml") -> Settings:
        """
        Load the `settings:` mapping and merge it onto defaults.

        Args:
            filename: Config file name

        Returns:
            Settings object
        """
        config = self.load_file(filename)
        data = config.get("settings") or {}
        if not isinstance(data, dict):
            raise ValueError("'settings' must be a mapping")

        settings = Settings.from_dict(data)
        logger.debug("settings_loaded", **data)
        return settings


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Convenience function to load settings.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Settings (defaults when no path is given)
    """
    if not config_path:
        return Settings()

    path = Path(config_path)
    loader = ConfigLoader(str(path.parent))
    return loader.load_settings(path.name)
