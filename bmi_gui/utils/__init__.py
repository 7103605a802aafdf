"""
================================================================================
Utils Package - Core Constants and Utilities
================================================================================

This package contains fundamental constants used throughout the
application. Keeping these centralized ensures the scale formula, the tick
labels and the animation timings never drift apart.

Modules:
    constants: Validation bounds, category thresholds, scale domain, timings
"""

try:
    from .constants import (
        # Validation bounds
        HEIGHT_MIN_CM,
        HEIGHT_MAX_CM,
        WEIGHT_MIN_KG,
        WEIGHT_MAX_KG,
        # Category thresholds
        NORMAL_THRESHOLD,
        OVERWEIGHT_THRESHOLD,
        OBESE_THRESHOLD,
        # Scale domain
        SCALE_MIN,
        SCALE_MAX,
        SCALE_SPAN,
    )
except ImportError:
    from utils.constants import (
        HEIGHT_MIN_CM,
        HEIGHT_MAX_CM,
        WEIGHT_MIN_KG,
        WEIGHT_MAX_KG,
        NORMAL_THRESHOLD,
        OVERWEIGHT_THRESHOLD,
        OBESE_THRESHOLD,
        SCALE_MIN,
        SCALE_MAX,
        SCALE_SPAN,
    )

__all__ = [
    'HEIGHT_MIN_CM',
    'HEIGHT_MAX_CM',
    'WEIGHT_MIN_KG',
    'WEIGHT_MAX_KG',
    'NORMAL_THRESHOLD',
    'OVERWEIGHT_THRESHOLD',
    'OBESE_THRESHOLD',
    'SCALE_MIN',
    'SCALE_MAX',
    'SCALE_SPAN',
]
