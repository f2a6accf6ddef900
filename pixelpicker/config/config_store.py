"""
Configuration store for loading and saving the picker's persistent state.
"""

import os
import json
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..error_handling import (
    ConfigDecodeError,
    ErrorCategory,
    OperationOutcome,
    report_outcome
)
from ..models import (
    ColorFormat,
    ModifierFlag,
    PickedColor,
    Shortcut,
    ShortcutValidator,
    is_shortcut_valid
)
from .field_parsers import parse_bool, parse_uint, parse_uint_in_range


CONFIG_ENV_VAR = "PIXELPICKER_CONFIG"
CONFIG_DIR_NAME = "pixel-picker"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> Path:
    """Get the default configuration file path based on environment and OS."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()

    if os.name == 'nt':  # Windows
        config_base = os.environ.get('APPDATA', os.path.expanduser('~'))
    else:  # Unix-like systems
        config_base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
    return Path(config_base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


@dataclass(frozen=True)
class ConfigFileInfo:
    """
    Snapshot of the config file on disk.

    Attributes:
        path: The save path
        exists: Whether a regular file is present at the path
        size: File size in bytes, 0 when absent
        modified: Last modification time, None when absent
        writable: Whether save() is expected to succeed
    """
    path: Path
    exists: bool
    writable: bool
    size: int = 0
    modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': str(self.path),
            'exists': self.exists,
            'writable': self.writable,
            'size': self.size,
            'modified': self.modified.isoformat(timespec='seconds') if self.modified else None
        }


class ConfigStore:
    """
    Owns the application configuration and its JSON persistence.

    One instance is created at startup with a fixed save path and handed to
    the UI, hotkey and sampling collaborators, which read and mutate it
    through the properties below. Not thread-safe: all access is expected
    from the main thread.
    """

    MAX_FLOAT_PRECISION = 12
    DEFAULT_FLOAT_PRECISION = 3
    MAX_RECENT_PICKS = 5
    DEFAULT_MODIFIER = ModifierFlag.CONTROL

    # Document key -> loader method
    _FIELD_LOADERS = {
        'paschaModeEnabled': '_load_pascha_mode',
        'concentrationModeModifier': '_load_concentration_modifier',
        'activatingShortcut': '_load_activating_shortcut',
        'chosenFormat': '_load_chosen_format',
        'floatPrecision': '_load_float_precision',
        'recentPicks': '_load_recent_picks',
    }

    def __init__(self, save_path: Optional[Union[str, Path]] = None,
                 shortcut_validator: Optional[ShortcutValidator] = None):
        """
        Initialize the configuration store with default values.

        Args:
            save_path: Location of the config file. If None, uses
                       default_config_path().
            shortcut_validator: Oracle deciding whether a shortcut may be
                                used as a global hotkey. Defaults to
                                is_shortcut_valid.
        """
        self.logger = logging.getLogger(__name__)
        self._save_path = Path(save_path) if save_path else default_config_path()
        self._shortcut_validator = shortcut_validator or is_shortcut_valid
        self._recent_picks = deque(maxlen=self.MAX_RECENT_PICKS)
        self.reset_state()

    @property
    def save_path(self) -> Path:
        return self._save_path

    # Accessors -----------------------------------------------------------

    @property
    def pascha_mode_enabled(self) -> bool:
        """Whether the picker preview is drawn square."""
        return self._pascha_mode_enabled

    @pascha_mode_enabled.setter
    def pascha_mode_enabled(self, enabled: bool):
        self._pascha_mode_enabled = bool(enabled)

    @property
    def concentration_mode_modifier(self) -> ModifierFlag:
        """Modifier held down to enter concentration mode."""
        return self._concentration_mode_modifier

    @concentration_mode_modifier.setter
    def concentration_mode_modifier(self, modifier: int):
        value = parse_uint(modifier)
        if value is None:
            raise ValueError(f"Invalid modifier mask: {modifier!r}. Must be a non-negative integer")
        self._concentration_mode_modifier = ModifierFlag(value)

    @property
    def activating_shortcut(self) -> Optional[Shortcut]:
        """The global shortcut that activates the picker, if any."""
        return self._activating_shortcut

    @activating_shortcut.setter
    def activating_shortcut(self, shortcut: Optional[Shortcut]):
        if shortcut is not None and not isinstance(shortcut, Shortcut):
            raise ValueError(f"Invalid shortcut: {shortcut!r}")
        if shortcut is not None and not self._shortcut_validator(shortcut):
            raise ValueError(f"Shortcut rejected by validator: {shortcut}")
        self._activating_shortcut = shortcut

    @property
    def chosen_format(self) -> ColorFormat:
        """Format used when copying a picked color."""
        return self._chosen_format

    @chosen_format.setter
    def chosen_format(self, color_format: Union[ColorFormat, str]):
        if not isinstance(color_format, ColorFormat):
            parsed = ColorFormat.parse(color_format)
            if parsed is None:
                raise ValueError(f"Unknown color format: {color_format!r}")
            color_format = parsed
        self._chosen_format = color_format

    @property
    def float_precision(self) -> int:
        """Number of decimal places used for float components."""
        return self._float_precision

    @float_precision.setter
    def float_precision(self, precision: int):
        value = parse_uint_in_range(precision, 0, self.MAX_FLOAT_PRECISION)
        if value is None:
            raise ValueError(
                f"Float precision must be between 1 and {self.MAX_FLOAT_PRECISION - 1}, got {precision!r}"
            )
        self._float_precision = value

    @property
    def recent_picks(self) -> Tuple[PickedColor, ...]:
        """Recent picks, oldest first."""
        return tuple(self._recent_picks)

    # Mutators ------------------------------------------------------------

    def add_recent_pick(self, color: PickedColor):
        """Append a pick, evicting the oldest once the history is full."""
        self._recent_picks.append(color)

    def clear_recent_picks(self):
        """Forget all recent picks."""
        self._recent_picks.clear()

    def reset_state(self):
        """Restore every setting to its default value."""
        self._pascha_mode_enabled = False
        self._concentration_mode_modifier = self.DEFAULT_MODIFIER
        self._activating_shortcut = None
        self._chosen_format = ColorFormat.default()
        self._float_precision = self.DEFAULT_FLOAT_PRECISION
        self._recent_picks.clear()

    # Loading -------------------------------------------------------------

    def load(self) -> OperationOutcome:
        """
        Load the configuration from the save path.

        State is reset first. A missing file is a normal cold start; any
        other failure is logged and leaves the defaults in place. Never
        raises.

        Returns:
            OperationOutcome describing what happened.
        """
        self.reset_state()

        try:
            text = self._save_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return report_outcome(self.logger, OperationOutcome.ok(
                'load', f"Configuration file not found at {self._save_path}, using defaults", cold_start=True
            ))
        except (OSError, UnicodeDecodeError) as e:
            return report_outcome(self.logger, OperationOutcome.failure(
                'load', ErrorCategory.READ,
                f"Failed to read config file {self._save_path}", exception=e
            ))

        try:
            self._apply_text(text)
        except ConfigDecodeError as e:
            return report_outcome(self.logger, OperationOutcome.failure(
                'load', ErrorCategory.DECODE,
                f"Failed to decode config file {self._save_path}", exception=e
            ))

        return report_outcome(self.logger, OperationOutcome.ok(
            'load', f"Loaded configuration from {self._save_path}"
        ))

    def load_from_text(self, text: str):
        """
        Load the configuration from a JSON string.

        Args:
            text: JSON document text.

        Raises:
            ConfigDecodeError: If the text is not a JSON object. State is
                               left untouched in that case.
        """
        self._apply_text(text)
        self.logger.info("Loaded configuration")

    def _apply_text(self, text: str):
        document = self._decode(text)
        self.reset_state()

        for key, value in document.items():
            loader = self._FIELD_LOADERS.get(key)
            if loader is None:
                self.logger.warning(f"Unknown key '{key}' encountered in configuration")
                continue
            getattr(self, loader)(value)

    @staticmethod
    def _decode(text: str) -> Dict[str, Any]:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigDecodeError(f"Malformed configuration JSON: {e.msg}", e.lineno, e.colno) from e
        except ValueError as e:
            # e.g. integer literals beyond the interpreter's digit limit
            raise ConfigDecodeError(f"Malformed configuration JSON: {e}") from e
        except RecursionError as e:
            raise ConfigDecodeError("Configuration JSON is nested too deeply") from e

        if not isinstance(document, dict):
            raise ConfigDecodeError(
                f"Configuration root must be a JSON object, got {type(document).__name__}"
            )
        return document

    def _warn_invalid(self, key: str, value: Any):
        self.logger.warning(f"Invalid value for '{key}': {value!r}, using default")

    def _load_pascha_mode(self, value: Any):
        enabled = parse_bool(value)
        if enabled is None:
            self._warn_invalid('paschaModeEnabled', value)
            enabled = False
        self._pascha_mode_enabled = enabled

    def _load_concentration_modifier(self, value: Any):
        mask = parse_uint(value)
        if mask is None:
            self._warn_invalid('concentrationModeModifier', value)
            self._concentration_mode_modifier = self.DEFAULT_MODIFIER
            return
        self._concentration_mode_modifier = ModifierFlag(mask)

    def _load_activating_shortcut(self, value: Any):
        # An empty object is how "no shortcut" is saved
        if value == {}:
            return
        if not isinstance(value, dict):
            self._warn_invalid('activatingShortcut', value)
            return

        key_code = parse_uint(value.get('keyCode'))
        modifier_flags = parse_uint(value.get('modifierFlags'))
        if key_code is None or modifier_flags is None:
            self._warn_invalid('activatingShortcut', value)
            return

        shortcut = Shortcut(key_code=key_code, modifier_flags=modifier_flags)
        if not self._shortcut_validator(shortcut):
            # Expected when the OS has since claimed the combination
            self.logger.debug(f"Discarding activating shortcut rejected by validator: {shortcut}")
            return
        self._activating_shortcut = shortcut

    def _load_chosen_format(self, value: Any):
        color_format = ColorFormat.parse(value)
        if color_format is None:
            self._warn_invalid('chosenFormat', value)
            color_format = ColorFormat.default()
        self._chosen_format = color_format

    def _load_float_precision(self, value: Any):
        precision = parse_uint_in_range(value, 0, self.MAX_FLOAT_PRECISION)
        if precision is None:
            self._warn_invalid('floatPrecision', value)
            precision = self.DEFAULT_FLOAT_PRECISION
        self._float_precision = precision

    def _load_recent_picks(self, value: Any):
        self._recent_picks.clear()
        if not isinstance(value, list):
            self._warn_invalid('recentPicks', value)
            return

        skipped = 0
        for entry in value:
            picked = PickedColor.from_dict(entry)
            if picked is None:
                skipped += 1
                continue
            self.add_recent_pick(picked)

        if skipped:
            self.logger.debug(f"Skipped {skipped} malformed recent pick(s)")

    # Saving --------------------------------------------------------------

    def to_document(self) -> Dict[str, Any]:
        """Convert the configuration to its JSON document form."""
        shortcut = self._activating_shortcut
        return {
            'paschaModeEnabled': self._pascha_mode_enabled,
            'concentrationModeModifier': int(self._concentration_mode_modifier),
            'activatingShortcut': shortcut.to_dict() if shortcut else {},
            'chosenFormat': self._chosen_format.value,
            'floatPrecision': self._float_precision,
            'recentPicks': [pick.to_dict() for pick in self._recent_picks]
        }

    def to_json(self) -> str:
        """Convert the configuration to JSON text."""
        return json.dumps(self.to_document(), indent=2, allow_nan=False)

    def save(self) -> OperationOutcome:
        """
        Save the configuration to the save path.

        Creates missing parent directories and overwrites the file in place.
        Failures are logged and returned, never raised.

        Returns:
            OperationOutcome describing what happened.
        """
        try:
            text = self.to_json()
        except (TypeError, ValueError) as e:
            return report_outcome(self.logger, OperationOutcome.failure(
                'save', ErrorCategory.SERIALIZATION, "Could not serialize configuration", exception=e
            ))

        config_dir = self._save_path.parent
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return report_outcome(self.logger, OperationOutcome.failure(
                'save', ErrorCategory.DIRECTORY,
                f"Failed to create config directory {config_dir}", exception=e
            ))

        try:
            self._save_path.write_text(text, encoding='utf-8')
        except OSError as e:
            return report_outcome(self.logger, OperationOutcome.failure(
                'save', ErrorCategory.WRITE,
                f"Failed to save configuration to {self._save_path}", exception=e
            ))

        return report_outcome(self.logger, OperationOutcome.ok(
            'save', f"Saved configuration to {self._save_path}"
        ))

    def get_config_info(self) -> ConfigFileInfo:
        """Describe the config file for diagnostics (`pixelpicker-config --info`)."""
        try:
            stat = self._save_path.stat()
        except FileNotFoundError:
            stat = None
        except OSError as e:
            self.logger.debug(f"Could not stat {self._save_path}: {e}")
            stat = None

        if stat is not None and self._save_path.is_file():
            return ConfigFileInfo(
                path=self._save_path,
                exists=True,
                size=stat.st_size,
                modified=datetime.fromtimestamp(stat.st_mtime),
                writable=os.access(self._save_path, os.W_OK)
            )

        # Nearest existing ancestor; save() creates the rest
        anchor = self._save_path.parent
        while not anchor.exists() and anchor != anchor.parent:
            anchor = anchor.parent
        return ConfigFileInfo(
            path=self._save_path,
            exists=False,
            writable=stat is None and anchor.is_dir() and os.access(anchor, os.W_OK)
        )
