"""
================================================================================
BMI GUI Package - Animated BMI Calculator
================================================================================

A single-screen calculator: type your height and weight, press Calculate,
and watch your Body Mass Index land on a colored scale.

Package Structure:
    bmi_gui/
    ├── __init__.py          # This file - package entry point
    ├── app.py               # Application launcher
    ├── main_window.py       # The calculator screen
    ├── animator.py          # Animation intents -> Qt animations
    ├── settings.py          # User preferences (theme, speed)
    ├── core/                # Business logic, no GUI imports
    │   ├── input_parser.py      # Text -> optional number
    │   ├── bmi_engine.py        # Formula, categories, scale mapping
    │   └── feedback.py          # Display state machine
    ├── styles/              # Visual design system
    │   └── theme.py         # Palettes, accents, styles
    ├── utils/               # Constants
    │   └── constants.py     # Bounds, thresholds, timings
    └── widgets/             # Custom UI components
        ├── animated_button.py   # Animated buttons
        ├── cards.py             # Cards and stat displays
        ├── indicators.py        # BMI scale, breathing background
        └── shake_frame.py       # Shake-on-invalid container

Usage:
    # Launch the application
    python -m bmi_gui.app

    # Or import and run programmatically
    from bmi_gui import main
    main()
"""

__version__ = "1.0.0"


def main(argv=None) -> int:
    """Launch the application (imports Qt only when called)."""
    from .app import main as _main
    return _main(argv)


__all__ = [
    'main',
]
