"""
End-to-end tests of the calculator screen.

Drives the real widgets: type, press Calculate or Reset, check what the
screen shows and which animations started.
"""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from bmi_gui.core.feedback import Phase, Target  # noqa: E402
from bmi_gui.main_window import BmiCalculatorWindow  # noqa: E402
from bmi_gui.settings import AppSettings  # noqa: E402
from bmi_gui.utils.constants import EMPTY_VALUE_TEXT, IDLE_HINT_TEXT  # noqa: E402


@pytest.fixture
def window(qapp):
    window = BmiCalculatorWindow(AppSettings())
    yield window
    window.close()


def enter(window: BmiCalculatorWindow, height: str, weight: str) -> None:
    window.height_input.setText(height)
    window.weight_input.setText(weight)


class TestInitialScreen:
    """Test the screen before any input."""

    def test_starts_idle(self, window: BmiCalculatorWindow) -> None:
        """Should show placeholders and the idle hint."""
        assert window.controller.state.phase is Phase.IDLE
        assert window.bmi_stat.value_label.text() == EMPTY_VALUE_TEXT
        assert window.hint_label.text() == IDLE_HINT_TEXT
        assert window.result_card.reveal == 0.0

    def test_light_theme(self, qapp) -> None:
        """Should build with the light theme too."""
        window = BmiCalculatorWindow(AppSettings(theme="light"))
        try:
            assert window.controller.state.phase is Phase.IDLE
        finally:
            window.close()
            from bmi_gui.styles.theme import apply_theme
            apply_theme("dark")


class TestTyping:
    """Test held values."""

    def test_parses_on_every_keystroke(self, window: BmiCalculatorWindow) -> None:
        """Should keep the parsed values without evaluating."""
        enter(window, "172", "68,5")
        assert window.height_value == 172
        assert window.weight_value == 68.5
        assert window.controller.state.phase is Phase.IDLE

    def test_garbage_is_absent(self, window: BmiCalculatorWindow) -> None:
        """Should hold None for unusable text."""
        enter(window, "abc", "")
        assert window.height_value is None
        assert window.weight_value is None


class TestCalculate:
    """Test pressing Calculate."""

    def test_normal_result(self, window: BmiCalculatorWindow) -> None:
        """172 cm / 68 kg should read 23.0, Normal."""
        enter(window, "172", "68")
        window.calculate_btn.click()

        assert window.controller.state.phase is Phase.RESULT
        assert window.bmi_stat.value_label.text() == "23.0"
        assert window.category_stat.value_label.text() == "Normal"
        assert window.category_stat.detail_label.text() == "18.5 – 24.9"
        assert window.scale.accent == "emerald"

        fill = window.player.animation_for(Target.SCALE_FILL)
        assert fill is not None
        assert fill.endValue() == pytest.approx(0.433, abs=1e-3)
        assert window.player.is_running(Target.INDICATOR_POP)
        assert window.player.is_running(Target.CARD_REVEAL)

    def test_obese_saturates(self, window: BmiCalculatorWindow) -> None:
        """150 cm / 120 kg should read Obese with the fill heading to the end."""
        enter(window, "150", "120")
        window.calculate_btn.click()

        assert window.category_stat.value_label.text() == "Obese"
        assert window.player.animation_for(Target.SCALE_FILL).endValue() == pytest.approx(1.0)

    def test_invalid_shakes(self, window: BmiCalculatorWindow) -> None:
        """30 cm should shake the inputs and retract the card."""
        enter(window, "30", "70")
        window.calculate_btn.click()

        assert window.controller.state.phase is Phase.INVALID
        assert window.bmi_stat.value_label.text() == EMPTY_VALUE_TEXT
        assert window.player.is_running(Target.SHAKE_OFFSET)
        assert window.player.animation_for(Target.CARD_REVEAL).endValue() == pytest.approx(0.0)

    def test_invalid_after_result_clears_text(self, window: BmiCalculatorWindow) -> None:
        """Should drop the shown result when the next input is invalid."""
        enter(window, "172", "68")
        window.calculate_btn.click()
        enter(window, "172", "")
        window.calculate_btn.click()

        assert window.controller.state.phase is Phase.INVALID
        assert window.hint_label.text() == IDLE_HINT_TEXT

    def test_rapid_presses_do_not_stack(self, window: BmiCalculatorWindow) -> None:
        """Should restart the shake rather than queue another."""
        enter(window, "", "")
        window.calculate_btn.click()
        first = window.player.animation_for(Target.SHAKE_OFFSET)
        window.calculate_btn.click()
        second = window.player.animation_for(Target.SHAKE_OFFSET)

        assert second is not first
        assert first.state() == first.State.Stopped

    def test_return_key_calculates(self, window: BmiCalculatorWindow) -> None:
        """Should calculate when Return is pressed in the weight field."""
        enter(window, "180", "90")
        window.weight_input.returnPressed.emit()
        assert window.controller.state.phase is Phase.RESULT
        assert window.bmi_stat.value_label.text() == "27.8"
        assert window.category_stat.value_label.text() == "Overweight"


class TestReset:
    """Test pressing Reset."""

    def test_reset_clears_everything(self, window: BmiCalculatorWindow) -> None:
        """Should clear the inputs and retract the fill to zero."""
        enter(window, "172", "68")
        window.calculate_btn.click()
        window.reset_btn.click()

        assert window.controller.state.phase is Phase.IDLE
        assert window.height_input.text() == ""
        assert window.weight_input.text() == ""
        assert window.height_value is None
        assert window.weight_value is None
        assert window.bmi_stat.value_label.text() == EMPTY_VALUE_TEXT
        assert window.player.animation_for(Target.SCALE_FILL).endValue() == pytest.approx(0.0)
