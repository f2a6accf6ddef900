"""
Data models for the Pixel Picker configuration engine.

This module contains the value types stored in the configuration: color
formats, picked colors and global shortcuts.
"""

from .color_format import ColorFormat
from .picked_color import PickedColor
from .shortcut import ModifierFlag, Shortcut, ShortcutValidator, is_shortcut_valid

__all__ = [
    'ColorFormat',
    'PickedColor',
    'ModifierFlag',
    'Shortcut',
    'ShortcutValidator',
    'is_shortcut_valid'
]
