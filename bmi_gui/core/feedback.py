"""
================================================================================
Feedback Controller - Display State Machine
================================================================================

This module decides what the screen shows and which animations play.

Design Philosophy:
    "Design is not just what it looks like and feels like.
     Design is how it works." - Steve Jobs

The controller owns the only piece of mutable state on the screen, the
DisplayState, and expresses every visual side effect as a declarative
AnimationIntent (target, value, duration, easing). It never touches timers
or painters, so it runs the same under a test as under a real window.

State Machine:
    Idle     --calculate(Rejected)--> Invalid
    Idle     --calculate(Accepted)--> Result
    Invalid  --calculate(Rejected)--> Invalid   (collapse re-emitted)
    Invalid  --calculate(Accepted)--> Result
    Result   --calculate(Rejected)--> Invalid
    Result   --calculate(Accepted)--> Result
    any      --reset-------------->  Idle
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

try:
    from .bmi_engine import Accepted, BmiResult, Rejected
    from ..utils.constants import (
        SHAKE_LEGS, POP_LEGS, COLLAPSE_DURATION_MS, RESET_DURATION_MS,
        FILL_DURATION_MS, REVEAL_DURATION_MS, MIN_ANIMATION_SPEED, MAX_ANIMATION_SPEED
    )
except ImportError:
    from core.bmi_engine import Accepted, BmiResult, Rejected
    from utils.constants import (
        SHAKE_LEGS, POP_LEGS, COLLAPSE_DURATION_MS, RESET_DURATION_MS,
        FILL_DURATION_MS, REVEAL_DURATION_MS, MIN_ANIMATION_SPEED, MAX_ANIMATION_SPEED
    )

logger = logging.getLogger(__name__)


# =============================================================================
# Intent Vocabulary
# =============================================================================

class Easing(Enum):
    """Easing modes understood by the animation layer."""

    LINEAR = "linear"
    OUT_CUBIC = "out_cubic"
    SPRING = "spring"


class Target(Enum):
    """Visual properties an intent can drive."""

    SHAKE_OFFSET = "shake_offset"      # horizontal offset of the input card
    CARD_REVEAL = "card_reveal"        # 0 = hidden, 1 = fully revealed
    SCALE_FILL = "scale_fill"          # fill and indicator position, [0, 1]
    INDICATOR_POP = "indicator_pop"    # indicator scale factor
    ACCENT = "accent"                  # category color token


@dataclass(frozen=True)
class AnimationIntent:
    """
    A declarative instruction for the animation layer.

    Attributes:
        target: Which visual property to animate
        value: Final value (a float, or a color token for ACCENT)
        duration_ms: Total duration of the animation
        easing: Easing mode for single-leg intents
        sequence: (value, duration_ms) legs for multi-leg intents; empty
            for a single tween straight to value
    """

    target: Target
    value: Union[float, str]
    duration_ms: int
    easing: Easing = Easing.OUT_CUBIC
    sequence: Tuple[Tuple[float, int], ...] = ()


# =============================================================================
# Display State
# =============================================================================

class Phase(Enum):
    """The three display states."""

    IDLE = "idle"
    INVALID = "invalid"
    RESULT = "result"


@dataclass(frozen=True)
class DisplayState:
    """Current display state; result is set only in the RESULT phase."""

    phase: Phase
    result: Optional[BmiResult] = None

    @classmethod
    def idle(cls) -> 'DisplayState':
        return cls(Phase.IDLE)

    @classmethod
    def invalid(cls) -> 'DisplayState':
        return cls(Phase.INVALID)

    @classmethod
    def showing(cls, result: BmiResult) -> 'DisplayState':
        return cls(Phase.RESULT, result)


@dataclass(frozen=True)
class ResetInstruction:
    """
    What the caller must do after a reset.

    The controller doesn't own the text fields, so clearing them is
    handed back to whoever does.
    """

    clear_inputs: bool = True
    intents: Tuple[AnimationIntent, ...] = field(default_factory=tuple)


IntentListener = Callable[[Sequence[AnimationIntent]], None]


# =============================================================================
# Controller
# =============================================================================

class FeedbackController:
    """
    Owns the DisplayState and emits animation intents.

    Attributes:
        speed: Animation speed multiplier (2.0 plays everything twice as fast)

    Example:
        >>> controller = FeedbackController()
        >>> intents = controller.on_calculate(BmiEngine().evaluate(172, 68))
        >>> controller.state.phase
        <Phase.RESULT: 'result'>
    """

    def __init__(self, speed: float = 1.0, listener: Optional[IntentListener] = None):
        """
        Initialize the controller in the Idle state.

        Args:
            speed: Animation speed multiplier, between MIN_ANIMATION_SPEED
                and MAX_ANIMATION_SPEED
            listener: Optional callback receiving every emitted intent batch

        Raises:
            ValueError: If speed is outside that range (nan included)
        """
        if not MIN_ANIMATION_SPEED <= speed <= MAX_ANIMATION_SPEED:
            raise ValueError(
                f"Animation speed must be between {MIN_ANIMATION_SPEED} and "
                f"{MAX_ANIMATION_SPEED}, got {speed}"
            )

        self.speed = speed
        self._listener = listener
        self._state = DisplayState.idle()

    @property
    def state(self) -> DisplayState:
        """The current display state (read-only)."""
        return self._state

    def set_listener(self, listener: Optional[IntentListener]) -> None:
        """Replace the intent listener."""
        self._listener = listener

    # =========================================================================
    # Commands
    # =========================================================================

    def on_calculate(self, outcome) -> List[AnimationIntent]:
        """
        Apply the outcome of a Calculate press.

        Args:
            outcome: Accepted or Rejected from the engine

        Returns:
            The intents emitted for this transition

        Raises:
            TypeError: If outcome is neither Accepted nor Rejected
        """
        if isinstance(outcome, Rejected):
            intents = self._collapse_intents()
            self._transition(DisplayState.invalid())
        elif isinstance(outcome, Accepted):
            intents = self._reveal_intents(outcome.result)
            self._transition(DisplayState.showing(outcome.result))
        else:
            raise TypeError(f"Expected Accepted or Rejected, got {type(outcome).__name__}")

        self._emit(intents)
        return intents

    def on_reset(self) -> ResetInstruction:
        """
        Return to Idle, retracting the result card and the scale fill.

        Returns:
            Instruction to clear both inputs, carrying the emitted intents
        """
        intents = [
            self._intent(Target.CARD_REVEAL, 0.0, RESET_DURATION_MS),
            self._intent(Target.SCALE_FILL, 0.0, RESET_DURATION_MS),
        ]
        self._transition(DisplayState.idle())
        self._emit(intents)
        return ResetInstruction(clear_inputs=True, intents=tuple(intents))

    # =========================================================================
    # Intent Builders
    # =========================================================================

    def _collapse_intents(self) -> List[AnimationIntent]:
        """Shake the inputs and retract whatever result was showing."""
        return [
            self._sequence_intent(Target.SHAKE_OFFSET, SHAKE_LEGS, Easing.LINEAR),
            self._intent(Target.CARD_REVEAL, 0.0, COLLAPSE_DURATION_MS),
            self._intent(Target.SCALE_FILL, 0.0, COLLAPSE_DURATION_MS),
        ]

    def _reveal_intents(self, result: BmiResult) -> List[AnimationIntent]:
        """Reveal the card, then fill and pop together."""
        return [
            self._intent(Target.CARD_REVEAL, 1.0, REVEAL_DURATION_MS, Easing.SPRING),
            self._intent(Target.ACCENT, result.category.accent, FILL_DURATION_MS),
            self._intent(Target.SCALE_FILL, result.scale_position, FILL_DURATION_MS),
            self._sequence_intent(Target.INDICATOR_POP, POP_LEGS, Easing.OUT_CUBIC),
        ]

    def _intent(self, target: Target, value, duration_ms: int,
                easing: Easing = Easing.OUT_CUBIC) -> AnimationIntent:
        return AnimationIntent(target, value, self._scaled(duration_ms), easing)

    def _sequence_intent(self, target: Target, legs, easing: Easing) -> AnimationIntent:
        scaled = tuple((value, self._scaled(duration)) for value, duration in legs)
        return AnimationIntent(
            target=target,
            value=scaled[-1][0],
            duration_ms=sum(duration for _, duration in scaled),
            easing=easing,
            sequence=scaled,
        )

    def _scaled(self, duration_ms: int) -> int:
        return int(round(duration_ms / self.speed))

    # =========================================================================
    # Internals
    # =========================================================================

    def _transition(self, new_state: DisplayState) -> None:
        logger.debug("Display state %s -> %s", self._state.phase.value, new_state.phase.value)
        self._state = new_state

    def _emit(self, intents: Sequence[AnimationIntent]) -> None:
        if self._listener is not None:
            self._listener(intents)
