"""
================================================================================
Theme - Application Visual Design System
================================================================================

This module defines the visual design system for the BMI calculator: two
interchangeable palettes, the category accent colors, and the stylesheet
helpers used by the widgets.

Design Philosophy:
    "Simplicity is the ultimate sophistication." - Leonardo da Vinci

Themes:
    - dark: Deep slate background with soft glowing orbs (default)
    - light: Airy gray-blue background with purple actions

Accents:
    Categories carry a theme-independent accent token ('sky', 'emerald',
    'amber', 'rose'). The token is resolved to a color here, so the
    business logic never has to know what a color looks like.
"""

from typing import Dict, List

# =============================================================================
# Color Palettes
# =============================================================================

THEMES: Dict[str, Dict[str, str]] = {
    'dark': {
        # Backgrounds
        'bg_main': '#020617',           # Slate 950 - main background
        'bg_card': '#0f172a',           # Slate 900 - card backgrounds
        'bg_input': '#0b1120',          # Input wells
        'track': '#1e293b',             # Empty part of the scale

        # Text
        'text_primary': '#ffffff',
        'text_secondary': '#cbd5e1',
        'text_muted': '#94a3b8',

        # Buttons
        'btn_primary': '#ffffff',
        'btn_primary_hover': '#e2e8f0',
        'btn_primary_text': '#0f172a',
        'btn_secondary': '#1e293b',
        'btn_secondary_hover': '#334155',
        'btn_secondary_text': '#ffffff',

        # Utility
        'border': '#1e293b',

        # Background orbs
        'orb_1': '#0ea5e9',
        'orb_2': '#d946ef',
        'orb_3': '#10b981',
    },
    'light': {
        'bg_main': '#f5f7fa',           # Light gray-blue - main background
        'bg_card': '#ffffff',           # Pure white - card backgrounds
        'bg_input': '#f8fafc',
        'track': '#dfe6e9',

        'text_primary': '#2d3436',
        'text_secondary': '#636e72',
        'text_muted': '#b2bec3',

        'btn_primary': '#6c5ce7',
        'btn_primary_hover': '#5b4cdb',
        'btn_primary_text': '#ffffff',
        'btn_secondary': '#dfe6e9',
        'btn_secondary_hover': '#b2bec3',
        'btn_secondary_text': '#2d3436',

        'border': '#dfe6e9',

        'orb_1': '#74b9ff',
        'orb_2': '#a29bfe',
        'orb_3': '#55efc4',
    },
}

DEFAULT_THEME: str = 'dark'

# Active palette. Updated in place by apply_theme() so that modules which
# imported COLORS see the switch.
COLORS: Dict[str, str] = dict(THEMES[DEFAULT_THEME])

# =============================================================================
# Category Accents
# =============================================================================

ACCENTS: Dict[str, str] = {
    'sky': '#38bdf8',
    'emerald': '#34d399',
    'amber': '#fbbf24',
    'rose': '#fb7185',
}

# Scale colors in category order (underweight -> obese); the scale blends
# between neighbours
ACCENT_ORDER: List[str] = ['sky', 'emerald', 'amber', 'rose']

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILY: str = "Segoe UI, Helvetica Neue, Arial, sans-serif"


# =============================================================================
# Theme Helpers
# =============================================================================

def apply_theme(name: str) -> Dict[str, str]:
    """
    Make a palette the active one.

    Call this before building widgets; existing stylesheets aren't rebuilt.

    Args:
        name: One of the keys of THEMES

    Returns:
        The active palette

    Raises:
        KeyError: If the theme doesn't exist
    """
    palette = THEMES[name]
    COLORS.clear()
    COLORS.update(palette)
    return COLORS


def accent_color(token: str) -> str:
    """Resolve an accent token to a hex color, falling back to muted text."""
    return ACCENTS.get(token, COLORS['text_muted'])


# =============================================================================
# Style Helper Functions
# =============================================================================

def get_button_style(color_scheme: str, bg_color: str = None, font_family: str = FONT_FAMILY) -> str:
    """
    Generate CSS stylesheet for animated buttons.

    Args:
        color_scheme: 'primary' or 'secondary'
        bg_color: Override for the background (used mid-animation)
        font_family: Font family to use

    Returns:
        CSS stylesheet string for QPushButton

    Example:
        >>> style = get_button_style('primary')
        >>> button.setStyleSheet(style)
    """
    bg = bg_color or COLORS.get(f'btn_{color_scheme}', COLORS['btn_primary'])
    text_color = COLORS.get(f'btn_{color_scheme}_text', COLORS['btn_primary_text'])

    return f"""
        QPushButton {{
            background-color: {bg};
            color: {text_color};
            border: none;
            border-radius: 14px;
            padding: 12px 20px;
            font-family: {font_family};
            font-weight: 600;
            font-size: 14px;
        }}
    """


def get_card_style(class_name: str = "FriendlyCard") -> str:
    """
    Generate CSS stylesheet for card widgets.

    Args:
        class_name: Widget class the selector applies to

    Returns:
        CSS stylesheet string
    """
    return f"""
        {class_name} {{
            background-color: {COLORS['bg_card']};
            border-radius: 24px;
            border: 1px solid {COLORS['border']};
        }}
    """


def get_input_style() -> str:
    """Generate CSS stylesheet for the height and weight fields."""
    return f"""
        QLineEdit {{
            background-color: {COLORS['bg_input']};
            color: {COLORS['text_primary']};
            border: 1px solid {COLORS['border']};
            border-radius: 14px;
            padding: 10px 14px;
            font-family: {FONT_FAMILY};
            font-size: 15px;
        }}
        QLineEdit:focus {{
            border-color: {COLORS['text_muted']};
        }}
    """


def accent_at(position: float) -> str:
    """
    Blend the scale colors at a fractional position along ACCENT_ORDER.

    Args:
        position: 0 is the first accent, 1 the second and so on; 1.5 lies
            halfway between emerald and amber. Clamped to the ends.

    Returns:
        Hex color string
    """
    last = len(ACCENT_ORDER) - 1
    position = max(0.0, min(float(position), float(last)))
    lower = int(position)
    upper = min(lower + 1, last)
    t = position - lower

    start = ACCENTS[ACCENT_ORDER[lower]]
    end = ACCENTS[ACCENT_ORDER[upper]]
    channels = []
    for i in (1, 3, 5):
        a = int(start[i:i + 2], 16)
        b = int(end[i:i + 2], 16)
        channels.append(round(a + (b - a) * t))
    return "#{:02x}{:02x}{:02x}".format(*channels)
