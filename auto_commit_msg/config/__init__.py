"""Configuration Management Package

Reads the optional TOML file (default: .auto-commit-msg.toml in the current
directory). Every field has a default, so a missing file is the same as an
empty one:

    trace = false

    [provider]
    base_url = "https://generativelanguage.googleapis.com/v1beta/openai/"
    api_key = "GEMINI_API_KEY"   # name of the env var holding the token

    [diff]
    short_model = "gemini-2.5-flash-lite"
    long_model = "gemini-2.5-flash"
    threshold = 200
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_FILENAME = ".auto-commit-msg.toml"

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_API_KEY_ENV = "GEMINI_API_KEY"
DEFAULT_SHORT_MODEL = "gemini-2.5-flash-lite"
DEFAULT_LONG_MODEL = "gemini-2.5-flash"
DEFAULT_THRESHOLD = 200


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


def _table(data: dict, key: str) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return value


def _string(data: dict, key: str, default: str, section: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{section}.{key} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ProviderConfig:
    """Where to send the diff and which env var holds the token."""
    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY_ENV

    @classmethod
    def from_dict(cls, data: dict) -> 'ProviderConfig':
        return cls(
            base_url=_string(data, "base_url", DEFAULT_BASE_URL, "provider"),
            api_key=_string(data, "api_key", DEFAULT_API_KEY_ENV, "provider"),
        )


@dataclass(frozen=True)
class DiffConfig:
    """Model choice by change size."""
    short_model: str = DEFAULT_SHORT_MODEL
    long_model: str = DEFAULT_LONG_MODEL
    threshold: int = DEFAULT_THRESHOLD  # inserted + deleted lines

    @classmethod
    def from_dict(cls, data: dict) -> 'DiffConfig':
        threshold = data.get("threshold", DEFAULT_THRESHOLD)
        # bool is an int subclass; `threshold = true` is a typo, not a number
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ConfigError(f"diff.threshold must be a non-negative integer, got {threshold!r}")
        return cls(
            short_model=_string(data, "short_model", DEFAULT_SHORT_MODEL, "diff"),
            long_model=_string(data, "long_model", DEFAULT_LONG_MODEL, "diff"),
            threshold=threshold,
        )


@dataclass(frozen=True)
class Config:
    """Complete configuration, immutable once loaded."""
    trace: bool = False
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    diff: DiffConfig = field(default_factory=DiffConfig)
    path: Optional[Path] = field(default=None, compare=False)  # file the values came from

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Optional[Path] = None) -> 'Config':
        """Build a Config from a parsed TOML document. Unknown keys are ignored."""
        trace = data.get("trace", False)
        if not isinstance(trace, bool):
            raise ConfigError(f"trace must be true or false, got {trace!r}")
        return cls(
            trace=trace,
            provider=ProviderConfig.from_dict(_table(data, "provider")),
            diff=DiffConfig.from_dict(_table(data, "diff")),
            path=path,
        )


def load_config(path: Path | str | None = None) -> Config:
    """Load config from `path`, falling back to defaults if it doesn't exist."""
    config_path = Path(path) if path is not None else Path.cwd() / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        return Config.from_dict({})

    try:
        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    return Config.from_dict(data, path=config_path)


__all__ = [
    "Config",
    "ConfigError",
    "ProviderConfig",
    "DiffConfig",
    "load_config",
    "DEFAULT_CONFIG_FILENAME",
]
