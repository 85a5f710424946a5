"""Foreman server profiles read from ``~/.config/tfforeman`` or an explicit file."""

from tfforeman.config.loader import home_config_path, load_config, read_config, select_profile, write_profile
from tfforeman.config.models import ConfigInput, ProfileConfig, ResolvedConfig, SDKConfig

__all__ = [
    "ConfigInput",
    "ProfileConfig",
    "ResolvedConfig",
    "SDKConfig",
    "home_config_path",
    "load_config",
    "read_config",
    "select_profile",
    "write_profile",
]
