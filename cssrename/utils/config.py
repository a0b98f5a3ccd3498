import copy
import os
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from ..errors import ConfigError

LOG_LEVELS = ("debug", "info", "warning", "error")


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    return base / "cssrename"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "info",
    },
    "files": {
        "extensions": [".css"],
    },
    "summary": {
        "path": "changes-summary.json",
    },
}


def load_config() -> dict[str, Any]:
    config_path = get_config_path()
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                user_config = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        _merge_config(config, user_config)

    validate_config(config)
    return config


def save_config(config: dict[str, Any]) -> Path:
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    return config_path


def _merge_config(base: dict, override: dict) -> None:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_config(base[key], value)
        else:
            base[key] = value


def validate_config(config: dict[str, Any]) -> None:
    level = config["logging"].get("level")
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid logging.level {level!r}, expected one of: {', '.join(LOG_LEVELS)}"
        )

    extensions = config["files"].get("extensions")
    if not isinstance(extensions, list) or not all(
        isinstance(ext, str) and ext for ext in extensions
    ):
        raise ConfigError("files.extensions must be a list of non-empty strings")

    summary_path = config["summary"].get("path")
    if not isinstance(summary_path, str) or not summary_path:
        raise ConfigError("summary.path must be a non-empty string")


def require_setting(value: str | None, name: str) -> str:
    """Return a required setting, rejecting missing or blank values."""
    if value is None or not value.strip():
        raise ConfigError(f"{name} is not set")
    return value.strip()
