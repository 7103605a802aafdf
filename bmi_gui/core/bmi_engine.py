"""
================================================================================
BMI Engine - Validation, Formula and Classification
================================================================================

This module is the arithmetic heart of the calculator. It validates the
parsed height and weight, computes the Body Mass Index, classifies it into
one of four fixed categories and maps it onto the unit interval used by the
visual scale.

Design Philosophy:
    "Simplicity is prerequisite for reliability." - Edsger Dijkstra

Everything here is stateless. Malformed input never raises: the caller
always gets a definite outcome, either Accepted(result) or Rejected(reason).

Algorithm:
    1. Reject missing values and values outside the plausible bounds
    2. bmi = weight_kg / (height_cm / 100) ** 2, kept at full precision
    3. Classify with half-open bands (lower bound inclusive)
    4. scale_position = clamp((bmi - 10) / 30, 0, 1)
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

try:
    from ..utils.constants import (
        HEIGHT_MIN_CM, HEIGHT_MAX_CM, WEIGHT_MIN_KG, WEIGHT_MAX_KG,
        NORMAL_THRESHOLD, OVERWEIGHT_THRESHOLD, OBESE_THRESHOLD,
        SCALE_MIN, SCALE_MAX, SCALE_SPAN
    )
except ImportError:
    from utils.constants import (
        HEIGHT_MIN_CM, HEIGHT_MAX_CM, WEIGHT_MIN_KG, WEIGHT_MAX_KG,
        NORMAL_THRESHOLD, OVERWEIGHT_THRESHOLD, OBESE_THRESHOLD,
        SCALE_MIN, SCALE_MAX, SCALE_SPAN
    )

logger = logging.getLogger(__name__)


# =============================================================================
# Categories
# =============================================================================

class Category(Enum):
    """
    The four fixed BMI bands and their display metadata.

    Each member carries:
        label: Short display name
        range_label: Human-readable range of the band
        hint: One line of guidance for the user
        accent: Theme-independent color token
    """

    UNDERWEIGHT = (
        "Underweight",
        "< 18.5",
        "Try a nutrient-dense diet and strength training. If unsure, check with a clinician.",
        "sky",
    )
    NORMAL = (
        "Normal",
        "18.5 – 24.9",
        "Nice! Keep a balanced diet and regular activity to maintain.",
        "emerald",
    )
    OVERWEIGHT = (
        "Overweight",
        "25.0 – 29.9",
        "Consider small, sustainable changes: daily steps, protein-forward meals, and sleep.",
        "amber",
    )
    OBESE = (
        "Obese",
        "≥ 30.0",
        "A structured plan helps: nutrition, movement, and medical guidance if needed.",
        "rose",
    )

    def __init__(self, label: str, range_label: str, hint: str, accent: str):
        self.label = label
        self.range_label = range_label
        self.hint = hint
        self.accent = accent


# =============================================================================
# Outcomes
# =============================================================================

@dataclass(frozen=True)
class BmiResult:
    """
    A successful evaluation.

    Attributes:
        value: BMI at full precision (rounding is a display concern)
        category: The band the value falls in
        scale_position: Normalized position on the visual scale, in [0, 1]
    """

    value: float
    category: Category
    scale_position: float

    @property
    def display_value(self) -> str:
        """The BMI formatted for display, e.g. '23.0'."""
        return format_bmi(self.value)


@dataclass(frozen=True)
class Accepted:
    """Outcome of a valid evaluation."""

    result: BmiResult


@dataclass(frozen=True)
class Rejected:
    """Outcome of an invalid evaluation. The reason is for logs only."""

    reason: str


EvaluationOutcome = Union[Accepted, Rejected]

# Rejection reasons
MISSING_HEIGHT = "missing_height"
MISSING_WEIGHT = "missing_weight"
HEIGHT_OUT_OF_RANGE = "height_out_of_range"
WEIGHT_OUT_OF_RANGE = "weight_out_of_range"


# =============================================================================
# Pure Functions
# =============================================================================

def rejection_reason(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[str]:
    """
    Explain why a pair of inputs is invalid.

    Returns:
        One of the rejection reason constants, or None when the pair is valid
    """
    if height_cm is None:
        return MISSING_HEIGHT
    if weight_kg is None:
        return MISSING_WEIGHT
    if not HEIGHT_MIN_CM < height_cm < HEIGHT_MAX_CM:
        return HEIGHT_OUT_OF_RANGE
    if not WEIGHT_MIN_KG < weight_kg < WEIGHT_MAX_KG:
        return WEIGHT_OUT_OF_RANGE
    return None


def is_valid(height_cm: Optional[float], weight_kg: Optional[float]) -> bool:
    """Check that both values are present and strictly inside their bounds."""
    return rejection_reason(height_cm, weight_kg) is None


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """Compute BMI from height in centimetres and weight in kilograms."""
    return weight_kg / (height_cm / 100) ** 2


def classify(bmi: float) -> Category:
    """
    Classify a BMI value.

    Example:
        >>> classify(18.5).label
        'Normal'
    """
    if bmi < NORMAL_THRESHOLD:
        return Category.UNDERWEIGHT
    if bmi < OVERWEIGHT_THRESHOLD:
        return Category.NORMAL
    if bmi < OBESE_THRESHOLD:
        return Category.OVERWEIGHT
    return Category.OBESE


def scale_position(bmi: float) -> float:
    """Map BMI onto [0, 1]; values outside [10, 40] saturate at the ends."""
    return max(0.0, min(1.0, (bmi - SCALE_MIN) / SCALE_SPAN))


def format_bmi(bmi: float) -> str:
    """Format a BMI with one decimal place, rounding halves up."""
    return f"{math.floor(bmi * 10 + 0.5) / 10:.1f}"


def scale_ticks() -> List[Tuple[str, float]]:
    """
    Tick labels for the visual scale with their normalized positions.

    The ticks come from the same constants as scale_position(), so they
    can't disagree with where the indicator lands.

    Returns:
        List of (label, position) pairs from left to right
    """
    values = (SCALE_MIN, NORMAL_THRESHOLD, OVERWEIGHT_THRESHOLD, OBESE_THRESHOLD, SCALE_MAX)
    ticks = []
    for value in values:
        label = f"{value:g}"
        if value == SCALE_MAX:
            label += "+"
        ticks.append((label, scale_position(value)))
    return ticks


def evaluate(height_cm: Optional[float], weight_kg: Optional[float]) -> EvaluationOutcome:
    """
    Validate the inputs and, when valid, build a BmiResult.

    Args:
        height_cm: Parsed height, or None when the field was unusable
        weight_kg: Parsed weight, or None when the field was unusable

    Returns:
        Accepted(result) or Rejected(reason). Never raises.
    """
    reason = rejection_reason(height_cm, weight_kg)
    if reason is not None:
        return Rejected(reason)

    bmi = compute_bmi(height_cm, weight_kg)
    return Accepted(BmiResult(
        value=bmi,
        category=classify(bmi),
        scale_position=scale_position(bmi),
    ))


class BmiEngine:
    """
    Stateless facade over evaluate() that logs each evaluation.

    Example:
        >>> engine = BmiEngine()
        >>> outcome = engine.evaluate(172, 68)
        >>> outcome.result.display_value
        '23.0'
    """

    def evaluate(self, height_cm: Optional[float], weight_kg: Optional[float]) -> EvaluationOutcome:
        """Evaluate a pair of parsed inputs."""
        outcome = evaluate(height_cm, weight_kg)
        if isinstance(outcome, Accepted):
            logger.debug(
                "Accepted height=%s weight=%s bmi=%.3f category=%s",
                height_cm, weight_kg, outcome.result.value, outcome.result.category.label
            )
        else:
            logger.debug("Rejected height=%s weight=%s reason=%s", height_cm, weight_kg, outcome.reason)
        return outcome
