"""
================================================================================
Intent Player - Animation Intents to Qt Animations
================================================================================

This module is the bridge between the core's declarative animation intents
and Qt's property animation system.

Design Philosophy:
    "Details matter, it's worth waiting to get it right." - Steve Jobs

Each intent target is bound to one Qt property on one widget. Playing an
intent stops whatever was already running on that target and starts again
from the property's current value, so rapid repeated presses restart the
motion instead of queueing it.

Multi-leg intents (the shake, the pop) become a QSequentialAnimationGroup
of QPropertyAnimations, one per leg.
"""

import logging
from typing import Callable, Dict, Optional, Sequence, Tuple

from PyQt6.QtCore import (
    QObject, QPropertyAnimation, QSequentialAnimationGroup, QEasingCurve,
    QAbstractAnimation
)

try:
    from .core.feedback import AnimationIntent, Easing, Target
except ImportError:
    from core.feedback import AnimationIntent, Easing, Target

logger = logging.getLogger(__name__)

# Spring easing has no direct Qt equivalent; OutBack gives the same overshoot
EASING_CURVES: Dict[Easing, QEasingCurve.Type] = {
    Easing.LINEAR: QEasingCurve.Type.Linear,
    Easing.OUT_CUBIC: QEasingCurve.Type.OutCubic,
    Easing.SPRING: QEasingCurve.Type.OutBack,
}


class IntentPlayer(QObject):
    """
    Plays AnimationIntents on registered Qt properties.

    Example:
        >>> player = IntentPlayer()
        >>> player.register(Target.SCALE_FILL, scale_widget, b"fill")
        >>> player.register_setter(Target.ACCENT, scale_widget.set_accent)
        >>> controller = FeedbackController(listener=player.play)
    """

    def __init__(self, parent=None):
        """
        Initialize the player with no bindings.

        Args:
            parent: Parent QObject (optional)
        """
        super().__init__(parent)
        self._bindings: Dict[Target, Tuple[QObject, bytes]] = {}
        self._setters: Dict[Target, Callable] = {}
        self._running: Dict[Target, QAbstractAnimation] = {}

    # =========================================================================
    # Bindings
    # =========================================================================

    def register(self, target: Target, obj: QObject, prop: bytes) -> None:
        """
        Bind a target to an animatable Qt property.

        Args:
            target: The intent target
            obj: Object owning the property
            prop: Property name as bytes, e.g. b"fill"
        """
        self._bindings[target] = (obj, prop)

    def register_setter(self, target: Target, setter: Callable) -> None:
        """
        Bind a target to a callable that does its own animating.

        The callable receives the intent's value and its duration in ms. Used
        for values Qt can't interpolate, such as accent tokens.
        """
        self._setters[target] = setter

    # =========================================================================
    # Playback
    # =========================================================================

    def play(self, intents: Sequence[AnimationIntent]) -> None:
        """
        Start every intent in the batch. Intents in one batch run concurrently.

        Args:
            intents: Intents as emitted by the FeedbackController
        """
        for intent in intents:
            self.play_one(intent)

    def play_one(self, intent: AnimationIntent) -> None:
        """Start a single intent, superseding any running one on its target."""
        if intent.target in self._setters:
            self._setters[intent.target](intent.value, intent.duration_ms)
            return

        binding = self._bindings.get(intent.target)
        if binding is None:
            logger.debug("No binding for %s, skipping", intent.target.value)
            return

        self.stop(intent.target)
        obj, prop = binding

        if intent.duration_ms <= 0:
            obj.setProperty(prop.decode(), float(intent.value))
            return

        if intent.sequence:
            animation = QSequentialAnimationGroup(self)
            for value, duration in intent.sequence:
                animation.addAnimation(self._tween(obj, prop, value, duration, intent.easing))
        else:
            animation = self._tween(obj, prop, intent.value, intent.duration_ms, intent.easing)

        animation.finished.connect(lambda t=intent.target, a=animation: self._on_finished(t, a))
        self._running[intent.target] = animation
        animation.start()

    def stop(self, target: Target) -> None:
        """Stop the animation running on a target, leaving the property where it is."""
        animation = self._running.pop(target, None)
        if animation is not None:
            animation.stop()
            animation.deleteLater()

    def stop_all(self) -> None:
        """Stop every running animation."""
        for target in list(self._running):
            self.stop(target)

    def is_running(self, target: Target) -> bool:
        """Check whether an animation is currently playing on a target."""
        return target in self._running

    def animation_for(self, target: Target) -> Optional[QAbstractAnimation]:
        """The animation currently playing on a target, if any."""
        return self._running.get(target)

    # =========================================================================
    # Internals
    # =========================================================================

    def _tween(self, obj: QObject, prop: bytes, value, duration: int, easing: Easing) -> QPropertyAnimation:
        # No start value: each tween begins from wherever the property is
        animation = QPropertyAnimation(obj, prop, self)
        animation.setEndValue(float(value))
        animation.setDuration(max(1, int(duration)))
        animation.setEasingCurve(EASING_CURVES.get(easing, QEasingCurve.Type.OutCubic))
        return animation

    def _on_finished(self, target: Target, animation: QAbstractAnimation) -> None:
        if self._running.get(target) is animation:
            del self._running[target]
        animation.deleteLater()
