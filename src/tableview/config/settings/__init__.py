"""Config settings – 12-factor env-based configuration."""
from tableview.config.settings.base import Settings
from tableview.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tableview.config.settings.viewer import ViewerSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "ViewerSettings"]
