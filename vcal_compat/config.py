"""
Configuration for vcal-compat.

Handles TOML file parsing and the process-wide debug switch read by the
converters' debug output.
"""

import tomllib
import os
import sys
from datetime import datetime
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


DEFAULT_TIMEZONE_ID = "TZ1"

# Debug output is off unless a config (or caller) enables it
_debug_enabled: bool = False


def set_debug(enabled: bool):
    """Enable or disable debug output for all converters."""
    global _debug_enabled
    _debug_enabled = enabled


def is_debug_enabled() -> bool:
    return _debug_enabled


def _debug_print(msg: str) -> None:
    if not _debug_enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] CONFIG: {msg}", file=sys.stderr)


@dataclass
class ConverterConfig:
    """Settings used by the document importer/exporter when calling the converters."""
    timezone_id: str = DEFAULT_TIMEZONE_ID  # TZID for timezones built from DAYLIGHT
    debug: bool = False

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'vcal-compat' / 'vcal-compat.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'ConverterConfig':
        """
        Load configuration from a TOML file.

        Args:
            config_path: File to read (default: XDG config location)

        Returns:
            The parsed configuration.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If a setting has the wrong type or is empty.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        section = data.get('Converter', {})
        timezone_id = section.get('timezone_id', DEFAULT_TIMEZONE_ID)
        debug = section.get('debug', False)

        if not isinstance(timezone_id, str) or not timezone_id:
            raise ValueError(f"timezone_id must be a non-empty string, got {timezone_id!r}")
        if not isinstance(debug, bool):
            raise ValueError(f"debug must be true or false, got {debug!r}")

        config = cls(timezone_id=timezone_id, debug=debug)
        _debug_print(f"Loaded {config_path}: timezone_id={timezone_id} debug={debug}")
        return config

    def apply(self):
        """Push the debug setting into the process-wide switch."""
        set_debug(self.debug)
