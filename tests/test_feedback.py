"""
Unit tests for the feedback controller.

Testing state transitions and the intent batches each transition emits.
"""

import pytest

from bmi_gui.core.bmi_engine import Accepted, Rejected, evaluate
from bmi_gui.core.feedback import (
    AnimationIntent,
    DisplayState,
    Easing,
    FeedbackController,
    Phase,
    Target,
)
from bmi_gui.utils.constants import SHAKE_LEGS


def by_target(intents):
    """Index a batch of intents by target."""
    return {intent.target: intent for intent in intents}


@pytest.fixture
def accepted() -> Accepted:
    outcome = evaluate(172, 68)
    assert isinstance(outcome, Accepted)
    return outcome


@pytest.fixture
def rejected() -> Rejected:
    return Rejected("height_out_of_range")


class TestInitialState:
    """Test the starting point."""

    def test_starts_idle(self) -> None:
        """Should start in Idle with no result."""
        controller = FeedbackController()
        assert controller.state == DisplayState.idle()
        assert controller.state.result is None

    @pytest.mark.parametrize("speed", [0, -1.0, float("nan"), float("inf"), 1e-300, 50.0])
    def test_rejects_unusable_speed(self, speed: float) -> None:
        """Should refuse a speed that would stall, reverse or overflow animations."""
        with pytest.raises(ValueError):
            FeedbackController(speed=speed)


class TestRejected:
    """Test transitions on invalid input."""

    def test_idle_to_invalid(self, rejected: Rejected) -> None:
        """Should shake and retract the result."""
        controller = FeedbackController()
        intents = controller.on_calculate(rejected)

        assert controller.state.phase is Phase.INVALID
        targets = by_target(intents)
        assert set(targets) == {Target.SHAKE_OFFSET, Target.CARD_REVEAL, Target.SCALE_FILL}
        assert targets[Target.CARD_REVEAL].value == 0.0
        assert targets[Target.SCALE_FILL].value == 0.0

    def test_shake_sequence(self, rejected: Rejected) -> None:
        """Should shake in five alternating, shrinking legs over 300 ms."""
        shake = by_target(FeedbackController().on_calculate(rejected))[Target.SHAKE_OFFSET]

        assert shake.sequence == SHAKE_LEGS
        assert len(shake.sequence) == 5
        assert shake.duration_ms == 300
        assert shake.value == 0.0
        assert shake.easing is Easing.LINEAR

        offsets = [value for value, _ in shake.sequence[:-1]]
        assert all(a * b < 0 for a, b in zip(offsets, offsets[1:]))
        assert [abs(v) for v in offsets] == sorted((abs(v) for v in offsets), reverse=True)

    def test_invalid_again_re_emits_collapse(self, rejected: Rejected) -> None:
        """Should emit the same batch when already Invalid."""
        controller = FeedbackController()
        first = controller.on_calculate(rejected)
        second = controller.on_calculate(rejected)

        assert controller.state.phase is Phase.INVALID
        assert first == second

    def test_result_to_invalid(self, accepted: Accepted, rejected: Rejected) -> None:
        """Should drop the result when invalid input follows a result."""
        controller = FeedbackController()
        controller.on_calculate(accepted)
        controller.on_calculate(rejected)

        assert controller.state.phase is Phase.INVALID
        assert controller.state.result is None


class TestAccepted:
    """Test transitions on valid input."""

    def test_invalid_to_result(self, accepted: Accepted, rejected: Rejected) -> None:
        """Should show the result with reveal, fill and pop."""
        controller = FeedbackController()
        controller.on_calculate(rejected)
        intents = controller.on_calculate(accepted)

        assert controller.state == DisplayState.showing(accepted.result)
        targets = by_target(intents)
        assert Target.CARD_REVEAL in targets
        assert Target.SCALE_FILL in targets
        assert Target.INDICATOR_POP in targets
        assert Target.SHAKE_OFFSET not in targets

    def test_fill_targets_scale_position(self, accepted: Accepted) -> None:
        """Should fill to the result's scale position in its accent."""
        targets = by_target(FeedbackController().on_calculate(accepted))

        assert targets[Target.SCALE_FILL].value == accepted.result.scale_position
        assert targets[Target.ACCENT].value == "emerald"
        assert targets[Target.CARD_REVEAL].value == 1.0
        assert targets[Target.CARD_REVEAL].easing is Easing.SPRING

    def test_pop_grows_then_settles(self, accepted: Accepted) -> None:
        """Should pop above 1.0 and come back to 1.0."""
        pop = by_target(FeedbackController().on_calculate(accepted))[Target.INDICATOR_POP]

        peak, settle = pop.sequence
        assert peak[0] > 1.0
        assert settle[0] == 1.0
        assert pop.value == 1.0

    def test_result_to_result(self, accepted: Accepted) -> None:
        """Should supersede a shown result with the new one."""
        controller = FeedbackController()
        controller.on_calculate(accepted)
        newer = evaluate(150, 120)
        controller.on_calculate(newer)

        assert controller.state.result == newer.result

    def test_rejects_unknown_outcome(self) -> None:
        """Should raise on something that isn't an outcome."""
        with pytest.raises(TypeError):
            FeedbackController().on_calculate(23.0)


class TestReset:
    """Test the reset command."""

    @pytest.mark.parametrize("setup", ["idle", "invalid", "result"])
    def test_reset_from_any_state(self, setup: str, accepted: Accepted, rejected: Rejected) -> None:
        """Should return to Idle and ask for the inputs to be cleared."""
        controller = FeedbackController()
        if setup == "invalid":
            controller.on_calculate(rejected)
        elif setup == "result":
            controller.on_calculate(accepted)

        instruction = controller.on_reset()

        assert controller.state == DisplayState.idle()
        assert instruction.clear_inputs is True
        targets = by_target(instruction.intents)
        assert targets[Target.SCALE_FILL].value == 0.0
        assert targets[Target.CARD_REVEAL].value == 0.0
        assert targets[Target.SCALE_FILL].duration_ms == 200


class TestListenerAndSpeed:
    """Test intent delivery and speed scaling."""

    def test_listener_receives_batches(self, accepted: Accepted, rejected: Rejected) -> None:
        """Should pass every batch to the listener."""
        batches = []
        controller = FeedbackController(listener=batches.append)

        first = controller.on_calculate(rejected)
        second = controller.on_calculate(accepted)
        controller.on_reset()

        assert len(batches) == 3
        assert list(batches[0]) == first
        assert list(batches[1]) == second
        assert all(isinstance(i, AnimationIntent) for batch in batches for i in batch)

    def test_set_listener(self, rejected: Rejected) -> None:
        """Should deliver to a listener attached later."""
        batches = []
        controller = FeedbackController()
        controller.set_listener(batches.append)
        controller.on_calculate(rejected)
        assert len(batches) == 1

    def test_speed_scales_durations(self, rejected: Rejected) -> None:
        """Should halve every duration at double speed."""
        shake = by_target(FeedbackController(speed=2.0).on_calculate(rejected))[Target.SHAKE_OFFSET]

        assert shake.duration_ms == 150
        assert all(duration == 30 for _, duration in shake.sequence)
