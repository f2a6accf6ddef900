"""
Global shortcut model and the default shortcut validity check.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Dict


class ModifierFlag(IntFlag):
    """
    Keyboard modifier bits.

    Bit positions match the device-independent modifier mask of the host
    event system, so stored masks can be handed to the hotkey layer as-is.
    """
    NONE = 0
    CAPS_LOCK = 1 << 16
    SHIFT = 1 << 17
    CONTROL = 1 << 18
    OPTION = 1 << 19
    COMMAND = 1 << 20
    NUMERIC_PAD = 1 << 21
    HELP = 1 << 22
    FUNCTION = 1 << 23


# Virtual key codes for F1-F20
FUNCTION_KEY_CODES = frozenset({
    122, 120, 99, 118, 96, 97, 98, 100, 101, 109,
    103, 111, 105, 107, 113, 106, 64, 79, 80, 90,
})

MAX_KEY_CODE = 0xFFFF
MAX_MASK = 2 ** 64 - 1


@dataclass(frozen=True)
class Shortcut:
    """
    A key code plus modifier mask identifying a global hotkey.

    Attributes:
        key_code: Virtual key code
        modifier_flags: Bitwise combination of ModifierFlag values
    """
    key_code: int
    modifier_flags: int

    def __post_init__(self):
        """Validate the shortcut after initialization."""
        self._validate()

    def _validate(self):
        """Validate shortcut fields."""
        for name in ('key_code', 'modifier_flags'):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= MAX_MASK):
                raise ValueError(f"Invalid {name}: {value!r}. Must be an unsigned integer")

    @property
    def modifiers(self) -> ModifierFlag:
        return ModifierFlag(self.modifier_flags)

    def is_function_key(self) -> bool:
        return self.key_code in FUNCTION_KEY_CODES

    def to_dict(self) -> Dict[str, Any]:
        """Convert shortcut to dictionary."""
        return {
            'keyCode': int(self.key_code),
            'modifierFlags': int(self.modifier_flags)
        }


ShortcutValidator = Callable[[Shortcut], bool]


def is_shortcut_valid(shortcut: Shortcut, allow_option_modifier: bool = False) -> bool:
    """
    Decide whether a shortcut is acceptable as a global hotkey.

    Function keys are accepted bare. Anything else needs command or control,
    or option when allow_option_modifier is set, so that plain typing is
    never hijacked.
    """
    if not (0 <= shortcut.key_code <= MAX_KEY_CODE):
        return False

    if shortcut.is_function_key():
        return True

    modifiers = shortcut.modifiers
    if modifiers & (ModifierFlag.COMMAND | ModifierFlag.CONTROL):
        return True

    return allow_option_modifier and bool(modifiers & ModifierFlag.OPTION)
