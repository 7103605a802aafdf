"""
================================================================================
Core Package - Business Logic
================================================================================

This package contains everything the calculator decides, with no GUI
imports: parsing what was typed, computing and classifying the BMI, and
the display state machine that turns outcomes into animation intents.

Design Philosophy:
    "The people who are crazy enough to think they can change the world
     are the ones who do." - Steve Jobs

Modules:
    input_parser: Free text to optional numbers
    bmi_engine: Validation, formula, classification, scale mapping
    feedback: Display state machine and animation intents
"""

try:
    from .input_parser import parse_number
    from .bmi_engine import (
        BmiEngine, BmiResult, Category, Accepted, Rejected, EvaluationOutcome,
        evaluate, is_valid, compute_bmi, classify, scale_position, format_bmi,
        scale_ticks
    )
    from .feedback import (
        FeedbackController, AnimationIntent, DisplayState, Phase, Target,
        Easing, ResetInstruction
    )
except ImportError:
    from core.input_parser import parse_number
    from core.bmi_engine import (
        BmiEngine, BmiResult, Category, Accepted, Rejected, EvaluationOutcome,
        evaluate, is_valid, compute_bmi, classify, scale_position, format_bmi,
        scale_ticks
    )
    from core.feedback import (
        FeedbackController, AnimationIntent, DisplayState, Phase, Target,
        Easing, ResetInstruction
    )

__all__ = [
    'parse_number',
    'BmiEngine',
    'BmiResult',
    'Category',
    'Accepted',
    'Rejected',
    'EvaluationOutcome',
    'evaluate',
    'is_valid',
    'compute_bmi',
    'classify',
    'scale_position',
    'format_bmi',
    'scale_ticks',
    'FeedbackController',
    'AnimationIntent',
    'DisplayState',
    'Phase',
    'Target',
    'Easing',
    'ResetInstruction',
]
