"""Configuration loading: a JSON file plus environment overrides."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError
from .logger import LOG_LEVELS, LogLevel
from .types import Credentials

CONFIG_PATH_ENV = "DYNAPORK_CONFIG"
API_KEY_ENV = "PORKBUN_API_KEY"
API_SECRET_ENV = "PORKBUN_SECRET_API_KEY"
LOG_LEVEL_ENV = "DYNAPORK_LOG_LEVEL"
READ_TIMEOUT_ENV = "DYNAPORK_READ_TIMEOUT"


@dataclass(frozen=True)
class Config:
    credentials: Credentials
    log_level: LogLevel = "info"
    read_timeout: float = 60.0


def read_config(
    path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load configuration from ``path`` (or ``$DYNAPORK_CONFIG``) and the environment.

    Environment variables take precedence over values from the file.
    """
    env = os.environ if environ is None else environ
    path = path or env.get(CONFIG_PATH_ENV) or None

    values: dict[str, Any] = {}
    if path:
        values.update(_read_file(Path(path)))
    values.update(_read_env(env))

    api_key = values.get("api_key")
    api_secret = values.get("api_secret")
    if not api_key or not api_secret:
        raise ConfigError(
            f"Porkbun credentials are missing; set {API_KEY_ENV} and {API_SECRET_ENV} "
            "or provide a config file"
        )

    return Config(
        credentials=Credentials(api_key=api_key, api_secret=api_secret),
        log_level=_parse_log_level(values.get("log_level", "info")),
        read_timeout=_parse_timeout(values.get("read_timeout", 60.0)),
    )


def read_config_from_path(path: str | os.PathLike[str]) -> Config:
    return read_config(path, environ={})


def read_config_from_env(environ: Mapping[str, str] | None = None) -> Config:
    env = dict(os.environ if environ is None else environ)
    env.pop(CONFIG_PATH_ENV, None)
    return read_config(None, environ=env)


def _read_file(path: Path) -> dict[str, Any]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    values: dict[str, Any] = {}
    credentials = raw.get("credentials", {})
    if not isinstance(credentials, dict):
        raise ConfigError("'credentials' must be an object with api_key and api_secret")
    for key in ("api_key", "api_secret"):
        if key in credentials:
            if not isinstance(credentials[key], str):
                raise ConfigError(f"credentials.{key} must be a string")
            values[key] = credentials[key]

    for key in ("log_level", "read_timeout"):
        if key in raw:
            values[key] = raw[key]
    return values


def _read_env(env: Mapping[str, str]) -> dict[str, Any]:
    mapping = {
        API_KEY_ENV: "api_key",
        API_SECRET_ENV: "api_secret",
        LOG_LEVEL_ENV: "log_level",
        READ_TIMEOUT_ENV: "read_timeout",
    }
    return {field: env[name] for name, field in mapping.items() if env.get(name)}


def _parse_log_level(value: Any) -> LogLevel:
    level = str(value).lower()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level  # type: ignore[return-value]


def _parse_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"read_timeout must be a number, got {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"read_timeout must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"read_timeout must be positive, got {timeout}")
    return timeout


__all__ = ["Config", "read_config", "read_config_from_env", "read_config_from_path"]
