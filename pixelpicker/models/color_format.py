"""
Color output formats the picker can copy to the clipboard.
"""

from enum import Enum
from typing import Any, Optional


class ColorFormat(Enum):
    """
    Textual color representations.

    Member values are the identifiers written to the config file, so they
    must never change once released.
    """
    GENERIC_HEX = "hex"
    GENERIC_RGB = "rgb"
    GENERIC_HSL = "hsl"
    CSS_HEX = "css-hex"
    CSS_RGB = "css-rgb"
    CSS_RGBA = "css-rgba"
    CSS_HSL = "css-hsl"
    CSS_HSLA = "css-hsla"
    NSCOLOR_SWIFT = "nscolor-swift"
    NSCOLOR_OBJC = "nscolor-objc"
    UICOLOR_SWIFT = "uicolor-swift"

    @classmethod
    def default(cls) -> 'ColorFormat':
        return cls.GENERIC_HEX

    @classmethod
    def parse(cls, value: Any) -> Optional['ColorFormat']:
        """Return the format for an identifier, or None if it is not one."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        """Get display-friendly format name."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ColorFormat.GENERIC_HEX: 'Hex',
    ColorFormat.GENERIC_RGB: 'RGB',
    ColorFormat.GENERIC_HSL: 'HSL',
    ColorFormat.CSS_HEX: 'CSS Hex',
    ColorFormat.CSS_RGB: 'CSS rgb()',
    ColorFormat.CSS_RGBA: 'CSS rgba()',
    ColorFormat.CSS_HSL: 'CSS hsl()',
    ColorFormat.CSS_HSLA: 'CSS hsla()',
    ColorFormat.NSCOLOR_SWIFT: 'NSColor (Swift)',
    ColorFormat.NSCOLOR_OBJC: 'NSColor (Objective-C)',
    ColorFormat.UICOLOR_SWIFT: 'UIColor (Swift)',
}
