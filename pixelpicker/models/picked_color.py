"""
Picked color model for the recent-picks history.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional

from .color_format import ColorFormat


COMPONENT_KEYS = ('red', 'green', 'blue', 'alpha')


@dataclass(frozen=True)
class PickedColor:
    """
    One previously sampled color.

    Attributes:
        red: Red component in [0, 1]
        green: Green component in [0, 1]
        blue: Blue component in [0, 1]
        alpha: Alpha component in [0, 1]
        format: Format that was active when the color was picked
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0
    format: ColorFormat = ColorFormat.GENERIC_HEX

    def __post_init__(self):
        """Validate the color after initialization."""
        self._validate()

    def _validate(self):
        """Validate color components."""
        for key in COMPONENT_KEYS:
            value = getattr(self, key)
            if not _is_component(value):
                raise ValueError(f"Invalid {key} component: {value!r}. Must be a number between 0 and 1")

        if not isinstance(self.format, ColorFormat):
            raise ValueError(f"Invalid format: {self.format!r}")

    @property
    def hex_string(self) -> str:
        """Get the color as #RRGGBB."""
        return '#' + ''.join(
            f"{round(getattr(self, key) * 255):02X}" for key in COMPONENT_KEYS[:3]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the pick to a dictionary for serialization."""
        return {
            'color': {key: float(getattr(self, key)) for key in COMPONENT_KEYS},
            'format': self.format.value
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional['PickedColor']:
        """
        Create a pick from a dictionary.

        Returns None instead of raising when the document is malformed, so a
        single bad entry can be skipped by the caller.
        """
        if not isinstance(data, dict):
            return None

        color = data.get('color')
        if not isinstance(color, dict):
            return None

        components = {}
        for key in COMPONENT_KEYS:
            value = color.get(key)
            if not _is_component(value):
                return None
            components[key] = float(value)

        color_format = ColorFormat.parse(data.get('format'))
        if color_format is None:
            return None

        return cls(format=color_format, **components)


def _is_component(value: Any) -> bool:
    # bool is a Real subclass
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return 0.0 <= value <= 1.0
