"""
User configuration management for Variantbox.

Settings are loaded from multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from variantbox.config.models import UserConfigData
from variantbox.core.errors import ConfigError
from variantbox.core.logging import get_struct_logger


logger = get_struct_logger(__name__)

ENV_PREFIX = "VARIANTBOX_"


class UserConfig:
    """Manages user-specific configuration for Variantbox using Pydantic Settings."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
        """
        self._config_path: Path | None = None
        self._config_paths = self._generate_config_paths(cli_config_path)
        self._cli_config_path = (
            Path(cli_config_path).expanduser() if cli_config_path else None
        )
        self._load_config()

    def _generate_config_paths(self, cli_config_path: str | Path | None) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if cli_config_path:
            config_paths.append(Path(cli_config_path).expanduser().resolve())

        config_paths.extend([Path.cwd() / "variantbox.yaml", Path.cwd() / ".variantbox.yml"])

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_root = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_root / "variantbox" / "config.yaml",
                config_root / "variantbox" / "config.yml",
            ]
        )
        return config_paths

    def _load_config(self) -> None:
        logger.debug(
            "config_search",
            paths=[str(p) for p in self._config_paths],
            env_vars=sorted(k for k in os.environ if k.startswith(ENV_PREFIX)),
        )

        if self._cli_config_path and not self._cli_config_path.exists():
            raise ConfigError(
                f"Config file not found: {self._cli_config_path}",
                path=self._cli_config_path,
            )

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = self._read_config_file(path)
                self._config_path = path
                logger.debug("user_config_loaded", path=str(path))
                break
        else:
            logger.debug("user_config_defaults")

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration in {self._config_path}: {e}",
                path=self._config_path,
            ) from e

    @staticmethod
    def _read_config_file(path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing config file {path}: {e}", path=path) from e
        except OSError as e:
            raise ConfigError(f"Error reading config file {path}: {e}", path=path) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config file format: {path}", path=path)
        return data

    @property
    def config_path(self) -> Path | None:
        """The file the configuration was loaded from, if any."""
        return self._config_path

    @property
    def data(self) -> UserConfigData:
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self._config, key, default)


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance."""
    return UserConfig(cli_config_path=cli_config_path)
