"""Configuration utilities for awsid."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from rich.console import Console

console = Console(stderr=True)

CONFIG_DIR = Path.home() / ".awsid"
CONFIG_FILE_YAML = CONFIG_DIR / "config.yaml"

# Same location earlier releases read the alias list from.
DEFAULT_CACHE_FILE = Path.home() / ".aws" / "account_info"

DEFAULT_LOG_LEVEL = "WARNING"

ENV_PREFIX = "AWSID_"


@dataclass(frozen=True)
class LookupSettings:
    """
    Settings for one invocation, resolved once at startup.

    Precedence is command line, then environment, then config.yaml, then
    built-in defaults.
    """

    cache_path: Path
    profile: Optional[str] = None
    region: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    version: str = ""


class Config:
    """Manages the awsid YAML configuration file."""

    def __init__(self):
        """Initialize the configuration manager."""
        self.config_data: Dict[str, Any] = {}
        self._config_loaded = False

    def _ensure_config_loaded(self):
        """Ensure configuration is loaded from file."""
        if not self._config_loaded:
            self._load_config()
            self._config_loaded = True

    def reload_config(self):
        """Force reload configuration from file."""
        self._config_loaded = False
        self._ensure_config_loaded()

    def _load_config(self):
        """Load the configuration from file, treating a missing file as empty."""
        config_file_yaml = getattr(self, "_config_file_yaml", CONFIG_FILE_YAML)

        if not config_file_yaml.exists():
            self.config_data = {}
            return

        try:
            with open(config_file_yaml, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            console.print(
                f"[yellow]Warning: Configuration file {config_file_yaml} is not valid YAML: {e}[/yellow]"
            )
            data = {}
        except OSError as e:
            console.print(
                f"[yellow]Warning: Cannot read configuration file {config_file_yaml}: {e}[/yellow]"
            )
            data = {}

        if not isinstance(data, dict):
            console.print(
                f"[yellow]Warning: Configuration file {config_file_yaml} must contain a mapping[/yellow]"
            )
            data = {}

        self.config_data = data

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with dot notation support.

        Args:
            key: Configuration key (supports dot notation like "aws.profile")
            default: Default value if key doesn't exist

        Returns:
            Configuration value
        """
        self._ensure_config_loaded()

        value: Any = self.config_data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def _get_setting(self, key: str) -> Optional[str]:
        """Get a setting from the environment, falling back to the config file."""
        env_value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if env_value:
            return env_value
        value = self.get(key)
        return str(value) if value not in (None, "") else None

    def build_settings(
        self,
        profile: Optional[str] = None,
        region: Optional[str] = None,
        cache_file: Optional[str] = None,
        log_level: Optional[str] = None,
        version: str = "",
    ) -> LookupSettings:
        """
        Build the immutable settings for this invocation.

        Arguments given here come from the command line and take priority.
        """
        cache_value = cache_file or self._get_setting("cache_file")
        cache_path = (
            Path(os.path.expanduser(cache_value)) if cache_value else DEFAULT_CACHE_FILE
        )

        return LookupSettings(
            cache_path=cache_path,
            profile=profile or self._get_setting("profile"),
            region=region or self._get_setting("region"),
            log_level=(log_level or self._get_setting("log_level") or DEFAULT_LOG_LEVEL).upper(),
            version=version,
        )
