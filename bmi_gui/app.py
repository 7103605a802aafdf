"""
================================================================================
Application Entry Point
================================================================================

This module provides the main entry point for the BMI calculator.

Usage:
    python -m bmi_gui.app
    python -m bmi_gui.app --theme light --speed 1.5

Or:
    from bmi_gui.app import main
    main()

Design Philosophy:
    "The people who are crazy enough to think they can change the world
     are the ones who do." - Steve Jobs
"""

import argparse
import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

try:
    from .main_window import BmiCalculatorWindow
    from .settings import AppSettings, SettingsError, get_default_settings
    from .styles.theme import THEMES
except ImportError:
    from main_window import BmiCalculatorWindow
    from settings import AppSettings, SettingsError, get_default_settings
    from styles.theme import THEMES

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a stream handler on the root logger.

    Args:
        level: Logging level name
    """
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line flags that override the saved settings for one run."""
    parser = argparse.ArgumentParser(prog="bmi-gui", description="Animated BMI calculator")
    parser.add_argument("--theme", choices=sorted(THEMES), help="color theme")
    parser.add_argument("--speed", type=float, help="animation speed multiplier (1.0 = normal)")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Optional[AppSettings] = None) -> AppSettings:
    """
    Merge command-line overrides into the saved settings.

    Raises:
        SettingsError: If the merged settings are invalid
    """
    base = base or get_default_settings()
    data = base.to_dict()
    if args.theme is not None:
        data["theme"] = args.theme
    if args.speed is not None:
        data["animation_speed"] = args.speed
    if args.log_level is not None:
        data["log_level"] = args.log_level
    return AppSettings.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Launch the BMI calculator.

    Returns:
        Exit code (0 for success, 2 for bad settings)

    Example:
        >>> import sys
        >>> sys.exit(main())
    """
    args = parse_args(argv)

    try:
        settings = resolve_settings(args)
    except SettingsError as e:
        configure_logging()
        logger.error("Invalid settings: %s", e)
        return 2

    configure_logging(settings.log_level)
    logger.info("Starting with theme=%s speed=%s", settings.theme, settings.animation_speed)

    # Create application
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    app.setFont(QFont("Segoe UI", 10))

    # Create and show main window
    window = BmiCalculatorWindow(settings)
    window.show()

    # Run event loop
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
