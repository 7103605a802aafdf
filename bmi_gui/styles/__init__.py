"""
================================================================================
Styles Package - Visual Design System
================================================================================

This package defines the visual language of the application, including
the two color themes, the category accents, and component styles.

Design Philosophy:
    "Design is not just what it looks like and feels like.
     Design is how it works." - Steve Jobs

Modules:
    theme: Palettes, accent tokens, fonts and stylesheet helpers
"""

try:
    from .theme import (
        # Palettes
        THEMES,
        DEFAULT_THEME,
        COLORS,
        # Accents
        ACCENTS,
        ACCENT_ORDER,
        # Typography
        FONT_FAMILY,
        # Helper functions
        apply_theme,
        accent_color,
        accent_at,
        get_button_style,
        get_card_style,
        get_input_style,
    )
except ImportError:
    from styles.theme import (
        THEMES,
        DEFAULT_THEME,
        COLORS,
        ACCENTS,
        ACCENT_ORDER,
        FONT_FAMILY,
        apply_theme,
        accent_color,
        accent_at,
        get_button_style,
        get_card_style,
        get_input_style,
    )

__all__ = [
    'THEMES',
    'DEFAULT_THEME',
    'COLORS',
    'ACCENTS',
    'ACCENT_ORDER',
    'FONT_FAMILY',
    'apply_theme',
    'accent_color',
    'accent_at',
    'get_button_style',
    'get_card_style',
    'get_input_style',
]
