"""
Pixel Picker - configuration engine for a desktop color-picking utility.

This package owns the persisted application state (shortcut, chosen color
format, float precision, recent picks) and the JSON load/save contract that
the picker UI, hotkey handling and color sampler read and write through.
"""

__version__ = "1.0.0"
__author__ = "pixel-picker"
