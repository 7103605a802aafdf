"""
================================================================================
Widgets Package - Custom UI Components
================================================================================

This package contains all custom widgets used on the calculator screen.
Each widget is self-contained and exposes its animatable state as Qt
properties, so the animation layer can drive it without special cases.

Design Philosophy:
    "The best interface is no interface." - Golden Krishna

Modules:
    animated_button: Buttons with press/hover animations
    cards: Container widgets, the revealable result card, stat displays
    indicators: BMI scale and breathing background
    shake_frame: Container that shakes its content on invalid input
"""

try:
    from .animated_button import AnimatedButton
    from .cards import FriendlyCard, ResultCard, StatDisplay, make_label
    from .indicators import BmiScaleWidget, OrbBackground
    from .shake_frame import ShakeFrame
except ImportError:
    from widgets.animated_button import AnimatedButton
    from widgets.cards import FriendlyCard, ResultCard, StatDisplay, make_label
    from widgets.indicators import BmiScaleWidget, OrbBackground
    from widgets.shake_frame import ShakeFrame

__all__ = [
    'AnimatedButton',
    'FriendlyCard',
    'ResultCard',
    'StatDisplay',
    'make_label',
    'BmiScaleWidget',
    'OrbBackground',
    'ShakeFrame',
]
