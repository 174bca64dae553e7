"""Runtime configuration state management."""

from typing import Any, Dict

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ddbridge.errors import ConfigError

ENV_PREFIX = "DDBRIDGE_"


class DDBridgeSettings(BaseSettings):
    """Settings read from DDBRIDGE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, extra="ignore")

    strict_sampling: bool = False
    debug: bool = False


# Global runtime configuration state, filled from the environment on first use
_config: Dict[str, Any] = {}


def load_from_env() -> Dict[str, Any]:
    """
    Replace the runtime configuration with values from the environment.

    Unset variables fall back to the defaults.

    Returns:
        A copy of the resulting configuration

    Raises:
        ConfigError: If a variable cannot be converted to its field type
    """
    try:
        settings = DDBridgeSettings()
    except ValidationError as exc:
        error = exc.errors()[0]
        name = f"{ENV_PREFIX}{str(error['loc'][0]).upper()}"
        raise ConfigError(f"invalid value for {name}", {"value": error.get("input")}) from exc

    _config.clear()
    _config.update(settings.model_dump())
    return dict(_config)


def ensure_loaded() -> None:
    if not _config:
        load_from_env()


def reset() -> None:
    """Forget the current configuration; the next read reloads the environment."""
    _config.clear()


def set_strict_sampling(value: bool) -> None:
    ensure_loaded()
    _config["strict_sampling"] = value


def get_strict_sampling() -> bool:
    ensure_loaded()
    return _config["strict_sampling"]


def set_debug(value: bool) -> None:
    ensure_loaded()
    _config["debug"] = value


def get_debug() -> bool:
    ensure_loaded()
    return _config["debug"]
