"""Locate, read, and update the Foreman profile file."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import tomli_w
import yaml

from tfforeman.config.models import ConfigInput, ProfileConfig, ResolvedConfig, SDKConfig
from tfforeman.constants import DEFAULT_CONFIG_DIR
from tfforeman.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "TFFOREMAN_CONFIG"
CONFIG_NAMES = ("config.yml", "config.yaml", "config.toml", "config.json")

_READERS: dict[str, Callable[[str], Any]] = {
    ".yml": yaml.safe_load,
    ".yaml": yaml.safe_load,
    ".json": json.loads,
    ".toml": tomllib.loads,
}

_WRITERS: dict[str, Callable[[dict[str, Any]], str]] = {
    ".yml": lambda data: yaml.safe_dump(data, sort_keys=False),
    ".yaml": lambda data: yaml.safe_dump(data, sort_keys=False),
    ".json": lambda data: json.dumps(data, indent=2) + "\n",
    ".toml": tomli_w.dumps,
}


def home_config_path() -> Path:
    """Profile file used when nothing else is configured."""

    base = Path(DEFAULT_CONFIG_DIR).expanduser()
    for name in CONFIG_NAMES:
        if (base / name).exists():
            return base / name
    return base / CONFIG_NAMES[0]


def _format_of(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _READERS:
        raise ConfigError(f"unsupported config file type '{suffix or path.name}' (use .yml, .json or .toml)")
    return suffix


def read_config(path: Path) -> SDKConfig:
    try:
        parsed = _READERS[_format_of(path)](path.read_text(encoding="utf-8")) or {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to parse config file '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise ConfigError(f"config file '{path}' must hold a mapping")
    try:
        return SDKConfig.model_validate(parsed)
    except ValueError as exc:
        raise ConfigError(f"invalid config file '{path}': {exc}") from exc


def load_config(config: ConfigInput | None = None, *, config_path: str | Path | None = None) -> ResolvedConfig:
    """Resolve the profile set a client should use.

    An in-memory config wins, then ``config_path``, then ``$TFFOREMAN_CONFIG``,
    then the file under ``~/.config/tfforeman``. A path that does not exist
    yields an empty config.
    """

    if isinstance(config, SDKConfig):
        return ResolvedConfig(source="runtime", data=config)
    if config is not None:
        return ResolvedConfig(source="runtime", data=SDKConfig.model_validate(config))

    if config_path is not None:
        source, path = "explicit-path", Path(config_path)
    elif os.getenv(CONFIG_ENV):
        source, path = f"env:{CONFIG_ENV}", Path(os.environ[CONFIG_ENV])
    else:
        source, path = "home", home_config_path()
    path = path.expanduser().resolve()

    if not path.exists():
        logger.debug("config file %s not found, using no profiles", path)
        return ResolvedConfig(source=f"{source}:missing", path=path, data=SDKConfig())

    logger.debug("reading profiles from %s", path)
    return ResolvedConfig(source=source, path=path, data=read_config(path))


def select_profile(config: SDKConfig, name: str | None = None) -> tuple[str, ProfileConfig]:
    """Pick the named profile, or the default one; an unknown explicit name is an error."""

    selected = name or config.default_profile or "default"
    found = config.profiles.get(selected)
    if found is not None:
        return selected, found
    if name is not None:
        raise ConfigError(f"profile '{selected}' not found")
    return selected, ProfileConfig()


def write_profile(path: Path, name: str, profile: ProfileConfig, *, make_default: bool = True) -> SDKConfig:
    """Add or replace one profile in the file at ``path``, creating it if needed."""

    path = path.expanduser()
    writer = _WRITERS[_format_of(path)]
    config = read_config(path) if path.exists() else SDKConfig()
    config.profiles[name] = profile
    if make_default or config.default_profile is None:
        config.default_profile = name

    data: dict[str, Any] = {"profiles": {key: value.to_file_data() for key, value in config.profiles.items()}}
    if config.default_profile is not None:
        data = {"default_profile": config.default_profile, **data}

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(writer(data), encoding="utf-8")
    path.chmod(0o600)
    logger.info("wrote profile '%s' to %s", name, path)
    return config
