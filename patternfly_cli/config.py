"""Configuration and logging helpers.

The CLI works without any configuration.  An optional JSON file can point
it at different ``git``/``npm``/``npx`` executables, e.g. when ``npm`` is
replaced by ``yarn``::

    {
        "install_command": ["yarn", "install"]
    }

The file is looked up in this order: explicit ``--config`` path, the
``PATTERNFLY_CLI_CONFIG`` environment variable, ``.patternfly-cli.json`` in
the current working directory.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PATTERNFLY_CLI_CONFIG"
DEFAULT_CONFIG_NAME = ".patternfly-cli.json"


class CliConfig(BaseModel):
    """Settings for the external tools the CLI drives."""

    model_config = ConfigDict(extra = "forbid", frozen = True)

    git_executable: str = Field("git", description = "Executable used for cloning templates")
    install_command: tuple[str, ...] = Field(
            ("npm", "install"), description = "Command run in the new project to install dependencies"
            )
    npx_executable: str = Field("npx", description = "Executable used to run codemod packages")
    label_width: int = Field(20, ge = 1, description = "Column width of template names in `list`")

    @field_validator("install_command")
    @classmethod
    def _non_empty_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or not value[0]:
            raise ValueError("install_command must name an executable")
        return value


# ---------------------------------------------------------------------------
# Configuration helpers
# ---------------------------------------------------------------------------


def find_config_file(config_path: str | Path | None = None) -> Path | None:
    """Return the config file to use, or ``None`` when there is none."""
    if config_path is not None:
        cfg_file = Path(config_path).expanduser()
        if not cfg_file.is_file():
            raise ConfigError(f"Config file not found: {cfg_file}")
        return cfg_file

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        cfg_file = Path(env_path).expanduser()
        if not cfg_file.is_file():
            raise ConfigError(f"Config file not found: {cfg_file} (from ${CONFIG_ENV_VAR})")
        return cfg_file

    cfg_file = Path.cwd() / DEFAULT_CONFIG_NAME
    return cfg_file if cfg_file.is_file() else None


def load_config(config_path: str | Path | None = None) -> CliConfig:
    """Load JSON config, tolerant to a missing file.

    Parameters
    ----------
    config_path:
        Explicit path to a JSON configuration file.  When given, the file
        must exist.

    Returns
    -------
    CliConfig
        Parsed configuration, or the defaults when no file was found.
    """
    cfg_file = find_config_file(config_path)
    if cfg_file is None:
        log.debug("No config file found, using defaults")
        return CliConfig()

    log.debug("Loading config from %s", cfg_file)
    try:
        with cfg_file.open("r", encoding = "utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {cfg_file}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {cfg_file}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {cfg_file} must contain a JSON object")
    try:
        return CliConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {cfg_file}: {exc}") from exc


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(debug: bool = False) -> None:
    """Configure the root logger.

    User-facing progress is printed by the CLI itself, so only warnings are
    logged unless ``debug`` is set.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
            level = level, format = "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt = "%H:%M:%S", )
