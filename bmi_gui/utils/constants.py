"""
================================================================================
Constants - Application-Wide Configuration Values
================================================================================

This module defines the domain constants and animation timings used
throughout the BMI calculator. Centralizing these values keeps the scale
math, the tick labels, and the feedback animations consistent with each
other.

Design Philosophy:
    "The details are not the details. They make the design." - Charles Eames
"""

from typing import Tuple

# =============================================================================
# Input Validation Bounds
# =============================================================================

# Physically plausible entries, not medical limits. Both ends are exclusive.
HEIGHT_MIN_CM: float = 40.0
HEIGHT_MAX_CM: float = 260.0
WEIGHT_MIN_KG: float = 10.0
WEIGHT_MAX_KG: float = 400.0

# =============================================================================
# Category Thresholds
# =============================================================================

# Lower bound of each band is inclusive
NORMAL_THRESHOLD: float = 18.5
OVERWEIGHT_THRESHOLD: float = 25.0
OBESE_THRESHOLD: float = 30.0

# =============================================================================
# Visual Scale Domain
# =============================================================================

# BMI values outside [SCALE_MIN, SCALE_MAX] saturate at the ends of the bar
SCALE_MIN: float = 10.0
SCALE_MAX: float = 40.0
SCALE_SPAN: float = SCALE_MAX - SCALE_MIN  # 30

# =============================================================================
# Feedback Animation Timings (milliseconds)
# =============================================================================

# Shake: five legs alternating sign with decreasing magnitude, 300 ms total
SHAKE_LEGS: Tuple[Tuple[float, int], ...] = (
    (-10.0, 60),
    (10.0, 60),
    (-8.0, 60),
    (8.0, 60),
    (0.0, 60),
)

# Retracting the card and fill after invalid input
COLLAPSE_DURATION_MS: int = 180

# Retracting everything on reset
RESET_DURATION_MS: int = 200

# Scale fill travelling to the new position
FILL_DURATION_MS: int = 500

# Result card reveal (spring-like overshoot)
REVEAL_DURATION_MS: int = 420

# Indicator pop: grow then settle
POP_PEAK_SCALE: float = 1.35
POP_LEGS: Tuple[Tuple[float, int], ...] = (
    (POP_PEAK_SCALE, 140),
    (1.0, 220),
)

# Background orb breathing period
ORB_PULSE_MS: int = 2400

# Accepted range of the animation speed multiplier (1.0 = normal)
MIN_ANIMATION_SPEED: float = 0.1
MAX_ANIMATION_SPEED: float = 10.0

# =============================================================================
# Display Text
# =============================================================================

EMPTY_VALUE_TEXT: str = "—"  # em dash placeholder shown before a result
IDLE_HINT_TEXT: str = "Enter your height and weight, then tap Calculate."
DISCLAIMER_TEXT: str = (
    "BMI is a screening metric and doesn’t directly measure body fat. "
    "Consider age, muscle mass, and health context."
)
