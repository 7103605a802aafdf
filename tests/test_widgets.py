"""
Tests for the custom widgets' animatable properties.
"""

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtTest import QTest  # noqa: E402
from PyQt6.QtWidgets import QLabel  # noqa: E402

from bmi_gui.styles.theme import (  # noqa: E402
    ACCENT_ORDER, ACCENTS, COLORS, THEMES, accent_at, accent_color, apply_theme
)
from bmi_gui.widgets import BmiScaleWidget, ResultCard, ShakeFrame, StatDisplay  # noqa: E402


class TestBmiScaleWidget:
    """Test the scale's indicator placement."""

    @pytest.fixture
    def scale(self, qapp) -> BmiScaleWidget:
        widget = BmiScaleWidget()
        widget.resize(300, widget.minimumHeight())
        return widget

    def test_indicator_follows_fill(self, scale: BmiScaleWidget) -> None:
        """Should center the indicator on the end of the fill."""
        scale.fill = 0.5
        assert scale.indicator_x() == pytest.approx(150 - BmiScaleWidget.INDICATOR_SIZE / 2)

    def test_indicator_stays_on_track(self, scale: BmiScaleWidget) -> None:
        """Should clamp the indicator to the track at both ends."""
        scale.fill = 0.0
        assert scale.indicator_x() == 0.0
        scale.fill = 1.0
        assert scale.indicator_x() == pytest.approx(300 - BmiScaleWidget.INDICATOR_SIZE)

    def test_accent(self, scale: BmiScaleWidget) -> None:
        """Should remember the accent token and switch at once without a duration."""
        scale.set_accent("amber")
        assert scale.accent == "amber"
        assert scale.tint == 2.0
        assert scale.current_color() == ACCENTS['amber']

    def test_uncolored_until_accent(self, scale: BmiScaleWidget) -> None:
        """Should paint muted before any result."""
        assert scale.current_color() == COLORS['text_muted']

    def test_accent_blends_over_duration(self, scale: BmiScaleWidget) -> None:
        """Should sweep the tint toward the new category instead of jumping."""
        scale.set_accent("emerald")
        scale.set_accent("rose", 60)
        assert scale.accent == "rose"
        assert scale.tint < 3.0

        QTest.qWait(300)

        assert scale.tint == pytest.approx(3.0)
        assert scale.current_color() == ACCENTS['rose']

    def test_unknown_accent(self, scale: BmiScaleWidget) -> None:
        """Should refuse tokens that aren't on the scale."""
        with pytest.raises(ValueError):
            scale.set_accent("plaid")

    def test_pop_property(self, scale: BmiScaleWidget) -> None:
        """Should expose pop as a Qt property."""
        scale.setProperty("pop", 1.35)
        assert scale.pop == pytest.approx(1.35)

    def test_paints_without_error(self, scale: BmiScaleWidget) -> None:
        """Should render at any fill."""
        scale.set_accent("rose")
        scale.fill = 0.8
        assert not scale.grab().isNull()


class TestShakeFrame:
    """Test the shake container."""

    def test_offset_moves_content(self, qapp) -> None:
        """Should shift the content inside the frame's padding."""
        frame = ShakeFrame(QLabel("fields"))
        frame.offset = -10
        margins = frame.layout().contentsMargins()
        assert margins.left() == ShakeFrame.PADDING - 10
        assert margins.right() == ShakeFrame.PADDING + 10

    def test_offset_is_clamped(self, qapp) -> None:
        """Should never push the content past its padding."""
        frame = ShakeFrame(QLabel("fields"))
        frame.offset = 100
        assert frame.layout().contentsMargins().right() == 0


class TestResultCard:
    """Test the reveal property."""

    def test_hidden_by_default(self, qapp) -> None:
        """Should start fully transparent."""
        card = ResultCard()
        assert card.reveal == 0.0
        assert card.graphicsEffect().opacity() == 0.0

    def test_reveal_clamps_opacity(self, qapp) -> None:
        """Should keep opacity in range while a spring overshoots."""
        card = ResultCard()
        card.reveal = 1.1
        assert card.graphicsEffect().opacity() == 1.0
        card.reveal = 1.0
        assert card.main_layout.contentsMargins().top() == ResultCard.MARGIN


class TestStatDisplay:
    """Test value coloring."""

    def test_value_color_defaults_to_primary_text(self, qapp) -> None:
        """Should color the value only when asked to."""
        stat = StatDisplay("Category", "—")
        stat.set_value("Normal", ACCENTS['emerald'])
        assert ACCENTS['emerald'] in stat.value_label.styleSheet()

        stat.set_value("—")
        assert stat.value_label.text() == "—"
        assert COLORS['text_primary'] in stat.value_label.styleSheet()


class TestTheme:
    """Test theme switching."""

    def test_apply_theme_updates_in_place(self) -> None:
        """Should switch the palette seen by existing importers."""
        palette = COLORS
        apply_theme("light")
        try:
            assert palette is COLORS
            assert COLORS['bg_main'] == THEMES['light']['bg_main']
        finally:
            apply_theme("dark")

    def test_accent_color(self) -> None:
        """Should resolve tokens and fall back for unknown ones."""
        assert accent_color("emerald") == ACCENTS['emerald']
        assert accent_color("plaid") == COLORS['text_muted']

    def test_accent_at_stops(self) -> None:
        """Should hit each accent exactly at its position."""
        for position, token in enumerate(ACCENT_ORDER):
            assert accent_at(position) == ACCENTS[token]

    def test_accent_at_blends(self) -> None:
        """Should mix neighbouring accents channel by channel."""
        # sky #38bdf8 -> emerald #34d399
        assert accent_at(0.5) == "#36c8c8"

    def test_accent_at_clamps(self) -> None:
        """Should hold the end colors outside the scale."""
        assert accent_at(-1) == ACCENTS['sky']
        assert accent_at(7.5) == ACCENTS['rose']

    def test_themes_share_keys(self) -> None:
        """Should define the same palette keys in every theme."""
        assert set(THEMES['dark']) == set(THEMES['light'])
