"""Configuration loading utilities for slugmin."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from slugmin.errors import ConfigError

_ENV_PREFIX = "SLUGMIN_"
_DEFAULT_CONFIG = Path("~/.slugmin/config.toml").expanduser()
STYLES = ("url", "filename")


_DEFAULT_SETTINGS: dict[str, Any] = {
    "style": "url",
    "preserve_case": False,
    "max_length": 0,
    "verbose": False,
    "quiet": False,
}


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace('"', '\\"')
    return f'"{escaped}"'


def render_config(settings: Mapping[str, Any]) -> str:
    lines = [f"# config_path: {settings.get('config_path', _DEFAULT_CONFIG)}"]
    for key in _DEFAULT_SETTINGS:
        lines.append(f"{key} = {_render_value(settings.get(key, _DEFAULT_SETTINGS[key]))}")
    return "\n".join(lines) + "\n"


def _coerce_env_value(key: str, value: str) -> Any:
    default = _DEFAULT_SETTINGS.get(key)
    if isinstance(default, bool):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    return value


def _resolve_config_path(cli_options: Mapping[str, Any] | None) -> Path:
    cli_options = dict(cli_options or {})
    raw_config_path = cli_options.get("config_path")
    return Path(raw_config_path).expanduser() if raw_config_path else _DEFAULT_CONFIG


def _load_file_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}


def _load_env_config() -> dict[str, Any]:
    config: dict[str, Any] = {}
    for env_key, raw_value in os.environ.items():
        if env_key.startswith(_ENV_PREFIX):
            normalized = env_key[len(_ENV_PREFIX) :].lower()
            if normalized in _DEFAULT_SETTINGS:
                config[normalized] = _coerce_env_value(normalized, raw_value)
    return config


def validate_settings(settings: Mapping[str, Any]) -> None:
    style = settings.get("style")
    if style not in STYLES:
        raise ConfigError(
            f"Unknown slug style: {style!r}",
            hint=f"Use one of: {', '.join(STYLES)}.",
        )
    max_length = settings.get("max_length")
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0:
        raise ConfigError(
            f"Invalid max_length: {max_length!r}",
            hint="Use a non-negative integer; 0 disables truncation.",
        )
    for key in ("preserve_case", "verbose", "quiet"):
        value = settings.get(key)
        if not isinstance(value, bool):
            raise ConfigError(
                f"Invalid {key}: {value!r}",
                hint=f"Set {key} to true or false (unquoted in TOML).",
            )


def get_config(cli_options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge defaults, the TOML file, ``SLUGMIN_*`` env vars and CLI options."""
    cli_options = dict(cli_options or {})
    config_path = _resolve_config_path(cli_options)

    file_config = {
        key: value
        for key, value in _load_file_config(config_path).items()
        if key in _DEFAULT_SETTINGS
    }
    env_config = _load_env_config()
    cli_config = {
        key: value
        for key, value in cli_options.items()
        if value is not None and key in _DEFAULT_SETTINGS
    }

    merged: dict[str, Any] = dict(_DEFAULT_SETTINGS)
    merged.update(file_config)
    merged.update(env_config)
    merged.update(cli_config)
    validate_settings(merged)

    merged["config_path"] = str(config_path)
    return merged
