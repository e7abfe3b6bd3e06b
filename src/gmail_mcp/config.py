"""Configuration settings for gmail-mcp using pydantic-settings."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from gmail_mcp.defaults import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT
from gmail_mcp.email.connectors.config import GmailConfig
from gmail_mcp.exceptions import ConfigError


def _home_dir() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise ConfigError("Cannot determine the home directory") from e


def default_config_dir() -> Path:
    """Return ~/.gmail-mcp.

    Raises:
        ConfigError: If the home directory cannot be determined.
    """
    return _home_dir() / ".gmail-mcp"


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that loads configuration from a YAML file.

    Looks for config file in the following order:
    1. GMAIL_MCP_CONFIG_FILE environment variable
    2. ./gmail-mcp.yaml (current directory)
    3. $XDG_CONFIG_HOME/gmail-mcp/config.yaml (defaults to ~/.config)
    """

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML config."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load and cache YAML config file."""
        if not hasattr(self, "_yaml_data"):
            self._yaml_data = self._read_yaml_file()
        return self._yaml_data

    def _read_yaml_file(self) -> dict[str, Any]:
        """Read YAML config from the first existing candidate path."""
        xdg_config = os.environ.get("XDG_CONFIG_HOME") or _home_dir() / ".config"
        config_paths = [
            os.environ.get("GMAIL_MCP_CONFIG_FILE"),
            Path.cwd() / "gmail-mcp.yaml",
            Path(xdg_config) / "gmail-mcp" / "config.yaml",
        ]

        for path in config_paths:
            if not path:
                continue
            path_obj = Path(path)
            if not path_obj.exists():
                continue
            try:
                with open(path_obj) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                mark = getattr(e, "problem_mark", None)
                location = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
                problem = getattr(e, "problem", None) or str(e)
                raise ConfigError(
                    f"Invalid YAML syntax in {path_obj}{location}: {problem}"
                ) from e
            except OSError as e:
                raise ConfigError(f"Cannot read config file {path_obj}: {e}") from e

            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path_obj} must contain a mapping")
            return data

        return {}


class Settings(BaseSettings):
    """Application settings loaded from environment variables with GMAIL_MCP_ prefix.

    Paths default to files under ~/.gmail-mcp:

        ~/.gmail-mcp/client_secret.json   OAuth client secret
        ~/.gmail-mcp/token.json           stored user token
        ~/.gmail-mcp/attachments/         saved attachments
    """

    model_config = SettingsConfigDict(env_prefix="GMAIL_MCP_")

    config_dir: Path = Field(default_factory=default_config_dir)
    credentials_file: Path | None = None
    token_file: Path | None = None
    attachments_dir: Path | None = None

    default_max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, le=MAX_RESULTS_LIMIT)
    log_level: str = "INFO"

    @field_validator("config_dir", "credentials_file", "token_file", "attachments_dir")
    @classmethod
    def _expand_user(cls, v: Path | None) -> Path | None:
        return v.expanduser() if v is not None else None

    @model_validator(mode="after")
    def _fill_paths(self) -> "Settings":
        if self.credentials_file is None:
            self.credentials_file = self.config_dir / "client_secret.json"
        if self.token_file is None:
            self.token_file = self.config_dir / "token.json"
        if self.attachments_dir is None:
            self.attachments_dir = self.config_dir / "attachments"
        return self

    @property
    def gmail(self) -> GmailConfig:
        """Connector configuration derived from these settings."""
        assert self.credentials_file is not None and self.token_file is not None
        return GmailConfig(credentials_file=self.credentials_file, token_file=self.token_file)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )


def _format_validation_error(error: ValidationError) -> str:
    """Convert a pydantic ValidationError into a one-line message."""
    messages = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "")
        messages.append(f"'{loc}': {msg}" if loc else msg)
    return "Invalid configuration: " + "; ".join(messages) if messages else str(error)


def get_settings_eager() -> Settings:
    """Load settings, failing fast with a readable message.

    Raises:
        ConfigError: If configuration is invalid or the home directory is unknown.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from e
