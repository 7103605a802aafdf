"""
================================================================================
Settings Module
================================================================================

Manages user preferences for the BMI calculator.

Features:
- Theme choice (dark / light)
- Animation speed multiplier
- Log level
- Save/load to JSON
- Validation

Measurements themselves are never stored; only how the screen looks.
================================================================================
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

try:
    from .styles.theme import THEMES, DEFAULT_THEME
    from .utils.constants import MIN_ANIMATION_SPEED, MAX_ANIMATION_SPEED
except ImportError:
    from styles.theme import THEMES, DEFAULT_THEME
    from utils.constants import MIN_ANIMATION_SPEED, MAX_ANIMATION_SPEED

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when settings content can't be turned into AppSettings."""


@dataclass
class AppSettings:
    """
    User preferences for the calculator window.

    Attributes:
        theme: Name of the color theme ('dark' or 'light')
        animation_speed: Multiplier applied to every animation (1.0 = normal)
        log_level: Name of the logging level
    """

    theme: str = DEFAULT_THEME
    animation_speed: float = 1.0
    log_level: str = "INFO"

    def validate(self) -> List[str]:
        """
        Validate settings and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if self.theme not in THEMES:
            issues.append(f"Unknown theme '{self.theme}' (choose from {sorted(THEMES)})")

        speed = self.animation_speed
        # Chained comparison is False for nan
        if not isinstance(speed, (int, float)) or not MIN_ANIMATION_SPEED <= speed <= MAX_ANIMATION_SPEED:
            issues.append(
                f"Animation speed must be between {MIN_ANIMATION_SPEED} and "
                f"{MAX_ANIMATION_SPEED}, got {speed!r}"
            )

        if str(self.log_level).upper() not in LOG_LEVELS:
            issues.append(f"Unknown log level '{self.log_level}'")

        return issues

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "theme": self.theme,
            "animation_speed": self.animation_speed,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AppSettings':
        """
        Create from dictionary.

        Raises:
            SettingsError: If the data isn't a mapping or fails validation
        """
        if not isinstance(data, dict):
            raise SettingsError(f"Settings must be a JSON object, got {type(data).__name__}")

        try:
            speed = float(data.get("animation_speed", 1.0))
        except (TypeError, ValueError):
            raise SettingsError(f"Invalid animation_speed: {data.get('animation_speed')!r}")

        settings = cls(
            theme=data.get("theme", DEFAULT_THEME),
            animation_speed=speed,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

        issues = settings.validate()
        if issues:
            raise SettingsError("; ".join(issues))
        return settings

    def save(self, filepath: str):
        """Save settings to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'AppSettings':
        """Load settings from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


# Default settings file location
DEFAULT_SETTINGS_PATH = Path.home() / ".bmi_gui" / "settings.json"


def get_default_settings(path: Path = DEFAULT_SETTINGS_PATH) -> AppSettings:
    """Get default settings (loads from file if it exists, otherwise creates new)."""
    if path.exists():
        try:
            return AppSettings.load(str(path))
        except (OSError, json.JSONDecodeError, SettingsError) as e:
            logger.warning("Ignoring settings file %s: %s", path, e)

    return AppSettings()


def save_default_settings(settings: AppSettings, path: Path = DEFAULT_SETTINGS_PATH):
    """Save as default settings."""
    settings.save(str(path))
    logger.info("Saved settings to %s", path)
