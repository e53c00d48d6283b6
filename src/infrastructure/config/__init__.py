"""Configuration adapters for the infrastructure layer."""

from .settings_reader import SettingsConfigReader

__all__ = ["SettingsConfigReader"]
