"""Config – settings, loaders and viewer wiring."""

from tableview.config.factory import build_viewer
from tableview.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    ViewerSettings,
)
from tableview.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
    "ViewerSettings",
    "build_viewer",
]
