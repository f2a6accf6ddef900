"""
Configuration management for Pixel Picker.

This module provides the ConfigStore that holds the application settings and
persists them as a JSON document.
"""

from .config_store import ConfigFileInfo, ConfigStore, default_config_path

__all__ = ['ConfigFileInfo', 'ConfigStore', 'default_config_path']
