"""
Configuration management using Dynaconf and Pydantic.

Dynaconf loads settings from files (``settings.toml``, ``.secrets.toml``,
the user-scoped copies under ``~/.config/errvalue``) and ``ERRV_``-prefixed
environment variables. Pydantic validates the merged data into a typed
``ErrvalueSettings`` object.

``get_settings`` caches a single instance so every command sees the same
configuration within one process.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import toml
from dynaconf import Dynaconf
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

from .errors import ErrvalueError

console = Console()
logger = logging.getLogger(__name__)

# User-scoped config directory (XDG-style)
USER_CONFIG_DIR = Path.home() / ".config" / "errvalue"
USER_SETTINGS_FILE = USER_CONFIG_DIR / "settings.toml"
USER_SECRETS_FILE = USER_CONFIG_DIR / ".secrets.toml"

ENV_PREFIX = "ERRV"
SETTINGS_PATH_ENV = f"{ENV_PREFIX}_SETTINGS_PATH"


def make_loader() -> Dynaconf:
    """Build a fresh Dynaconf loader so each reload sees current files and env."""
    return Dynaconf(
        envvar_prefix=ENV_PREFIX,
        # Later files override earlier ones
        settings_files=[
            "settings.toml",
            ".secrets.toml",
            str(USER_SETTINGS_FILE),
            str(USER_SECRETS_FILE),
        ],
        load_dotenv=True,
    )


OutputFormat = Literal["text", "json"]


class ErrvalueSettings(BaseModel):
    """Validated application settings."""

    output_format: OutputFormat = Field(
        default="text", description="How the CLI renders an ErrorValue: text or json"
    )
    json_logs: bool = Field(default=False, description="Emit log records as JSON lines")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalize_output_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


_settings_instance: Optional[ErrvalueSettings] = None


def _known_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    # Dynaconf upper-cases keys; keep only the ones the model declares
    fields = ErrvalueSettings.model_fields
    return {k.lower(): v for k, v in data.items() if k.lower() in fields}


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for name in ErrvalueSettings.model_fields:
        value = os.getenv(f"{ENV_PREFIX}_{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def get_settings() -> ErrvalueSettings:
    """Get the application settings as a cached Pydantic model.

    Layers, lowest priority first: model defaults, Dynaconf files and
    environment, the JSON file named by ``ERRV_SETTINGS_PATH`` (used by tests),
    then explicit ``ERRV_<FIELD>`` environment variables.

    Raises:
        ErrvalueError: if the merged configuration does not validate.
    """
    global _settings_instance
    if _settings_instance is not None:
        return _settings_instance

    config_dict: Dict[str, Any] = {}
    config_dict.update(_known_fields(make_loader().as_dict() or {}))

    env_settings_path = os.getenv(SETTINGS_PATH_ENV)
    if env_settings_path:
        p = Path(env_settings_path)
        if p.exists():
            try:
                file_data = json.loads(p.read_text(encoding="utf-8")) or {}
            except (OSError, ValueError) as e:
                # Malformed file: fall through to the remaining layers
                logger.warning("Ignoring unreadable settings file %s: %s", p, e)
            else:
                if isinstance(file_data, dict):
                    config_dict.update(_known_fields(file_data))
                else:
                    logger.warning(
                        "Ignoring unreadable settings file %s: expected a JSON object", p
                    )

    config_dict.update(_env_overrides())

    try:
        _settings_instance = ErrvalueSettings(**config_dict)
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red]\n{e}")
        raise ErrvalueError(f"Invalid configuration: {e.error_count()} error(s)") from e
    return _settings_instance


def save_settings(new_settings: ErrvalueSettings) -> Path:
    """Persist settings and make them the active instance.

    Writes JSON to ``ERRV_SETTINGS_PATH`` when set, otherwise TOML to the
    user settings file. Returns the path written.
    """
    global _settings_instance
    data = new_settings.model_dump()
    env_settings_path = os.getenv(SETTINGS_PATH_ENV)
    if env_settings_path:
        target = Path(env_settings_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data), encoding="utf-8")
    else:
        target = USER_SETTINGS_FILE
        USER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        target.write_text(toml.dumps(data), encoding="utf-8")

    logger.debug("Saved settings to %s", target)
    _settings_instance = new_settings
    return target


def create_default_settings() -> ErrvalueSettings:
    """Create a default settings instance, useful for resets."""
    return ErrvalueSettings()


def reset_settings() -> None:
    """Reset in-memory settings (do not delete on-disk settings)."""
    global _settings_instance
    _settings_instance = None
