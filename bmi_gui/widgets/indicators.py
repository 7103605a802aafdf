"""
================================================================================
Indicator Widgets - Scale and Background Display
================================================================================

This module provides the BMI scale (a filled track with a moving, popping
indicator and tick labels) and the softly breathing background.

Design Philosophy:
    "Make it simple. Make it memorable. Make it inviting to look at.
     Make it fun to read." - Leo Burnett

The scale widget exposes three animatable properties: 'fill', 'pop' and
'tint'. Tint is a position along the category colors, so moving from
Normal to Obese sweeps through amber on the way.
It measures its own width, so callers only ever hand it normalized
positions in [0, 1].
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, QRectF, pyqtProperty
from PyQt6.QtGui import QPainter, QColor, QBrush, QFont, QFontMetrics

try:
    from ..core.bmi_engine import scale_ticks
    from ..styles.theme import ACCENT_ORDER, COLORS, accent_at
    from ..utils.constants import ORB_PULSE_MS
except ImportError:
    from core.bmi_engine import scale_ticks
    from styles.theme import ACCENT_ORDER, COLORS, accent_at
    from utils.constants import ORB_PULSE_MS


class BmiScaleWidget(QWidget):
    """
    Horizontal BMI scale with a colored fill and a round indicator.

    Features:
        - Fill width follows the 'fill' property (0 to 1)
        - Indicator rides the end of the fill and never leaves the track
        - Indicator grows and settles through the 'pop' property
        - Color blends toward the category accent through the 'tint' property
        - Tick labels placed at their true positions on the scale

    Example:
        >>> scale = BmiScaleWidget()
        >>> scale.set_accent("emerald")
        >>> scale.fill = 0.43
    """

    TRACK_HEIGHT = 12
    INDICATOR_SIZE = 16
    TICK_GAP = 10

    def __init__(self, parent=None):
        """
        Initialize the scale.

        Args:
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self._fill = 0.0
        self._pop = 1.0
        self._accent = None
        self._tint = 0.0

        self._tint_anim = QPropertyAnimation(self, b"tint")
        self._tint_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        self._tick_font = QFont("Segoe UI", 8)
        self._ticks = scale_ticks()

        tick_height = QFontMetrics(self._tick_font).height()
        self.setMinimumHeight(self.INDICATOR_SIZE * 2 + self.TICK_GAP + tick_height)
        self.setMinimumWidth(200)

    # =========================================================================
    # Qt Properties for Animation
    # =========================================================================

    @pyqtProperty(float)
    def fill(self) -> float:
        """Get the current fill fraction."""
        return self._fill

    @fill.setter
    def fill(self, value: float) -> None:
        """Set the fill fraction and trigger repaint."""
        self._fill = value
        self.update()

    @pyqtProperty(float)
    def pop(self) -> float:
        """Get the current indicator scale factor."""
        return self._pop

    @pop.setter
    def pop(self, value: float) -> None:
        """Set the indicator scale factor and trigger repaint."""
        self._pop = value
        self.update()

    @pyqtProperty(float)
    def tint(self) -> float:
        """Get the current color position along ACCENT_ORDER."""
        return self._tint

    @tint.setter
    def tint(self, value: float) -> None:
        """Set the color position and trigger repaint."""
        self._tint = value
        self.update()

    # =========================================================================
    # Public Methods
    # =========================================================================

    @property
    def accent(self) -> str:
        """The accent token currently coloring the fill, or None."""
        return self._accent

    def set_accent(self, token: str, duration_ms: int = 0) -> None:
        """
        Color the fill and indicator with a category accent.

        The color blends from wherever it is now, passing through the
        accents in between.

        Args:
            token: Accent token such as 'emerald'
            duration_ms: Blend time (0 switches immediately)

        Raises:
            ValueError: If the token isn't one of ACCENT_ORDER
        """
        position = float(ACCENT_ORDER.index(token))
        self._accent = token
        self._tint_anim.stop()

        if duration_ms <= 0:
            self.tint = position
            return

        self._tint_anim.setDuration(int(duration_ms))
        self._tint_anim.setStartValue(self._tint)
        self._tint_anim.setEndValue(position)
        self._tint_anim.start()

    def current_color(self) -> str:
        """Hex color the fill is painted with right now."""
        return accent_at(self._tint) if self._accent else COLORS['text_muted']

    def indicator_x(self) -> float:
        """Left edge of the indicator in pixels for the current width and fill."""
        width = self.width()
        x = width * self._fill - self.INDICATOR_SIZE / 2
        return max(0.0, min(x, max(0.0, width - self.INDICATOR_SIZE)))

    # =========================================================================
    # Painting
    # =========================================================================

    def paintEvent(self, event) -> None:
        """Paint the track, fill, indicator and tick labels."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        width = self.width()
        track_top = self.INDICATOR_SIZE - self.TRACK_HEIGHT / 2
        radius = self.TRACK_HEIGHT / 2
        color = QColor(self.current_color())

        # Track
        painter.setBrush(QBrush(QColor(COLORS['track'])))
        painter.drawRoundedRect(QRectF(0, track_top, width, self.TRACK_HEIGHT), radius, radius)

        # Fill
        fill_width = width * max(0.0, min(1.0, self._fill))
        if fill_width > 0:
            painter.setBrush(QBrush(color))
            painter.drawRoundedRect(QRectF(0, track_top, fill_width, self.TRACK_HEIGHT), radius, radius)

        # Indicator, only once there's something to point at
        if self._fill > 0:
            size = self.INDICATOR_SIZE * self._pop
            center_x = self.indicator_x() + self.INDICATOR_SIZE / 2
            center_y = self.INDICATOR_SIZE
            painter.setBrush(QBrush(color))
            painter.drawEllipse(QRectF(center_x - size / 2, center_y - size / 2, size, size))

        # Tick labels
        painter.setFont(self._tick_font)
        painter.setPen(QColor(COLORS['text_muted']))
        metrics = QFontMetrics(self._tick_font)
        baseline = self.INDICATOR_SIZE * 2 + self.TICK_GAP + metrics.ascent()
        for label, position in self._ticks:
            text_width = metrics.horizontalAdvance(label)
            x = max(0.0, min(width * position - text_width / 2, width - text_width))
            painter.drawText(int(x), int(baseline), label)

        painter.end()


class OrbBackground(QWidget):
    """
    Window background with three softly breathing color orbs.

    The orbs scale between 0.96x and 1.04x in a slow loop. This creates
    an organic, living feel without distracting from the content.

    Example:
        >>> background = OrbBackground()
        >>> window.setCentralWidget(background)
        >>> background.start()
    """

    def __init__(self, parent=None):
        """
        Initialize the background.

        Args:
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self._pulse = 0.0
        self._setup_animation()

    def _setup_animation(self) -> None:
        """Initialize the breathing animation."""
        self._pulse_anim = QPropertyAnimation(self, b"pulse")
        self._pulse_anim.setDuration(ORB_PULSE_MS * 2)  # out and back
        self._pulse_anim.setKeyValueAt(0.0, 0.0)
        self._pulse_anim.setKeyValueAt(0.5, 1.0)
        self._pulse_anim.setKeyValueAt(1.0, 0.0)
        self._pulse_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._pulse_anim.setLoopCount(-1)  # Loop indefinitely

    @pyqtProperty(float)
    def pulse(self) -> float:
        """Get the current pulse value (0 to 1)."""
        return self._pulse

    @pulse.setter
    def pulse(self, value: float) -> None:
        """Set the pulse value and trigger repaint."""
        self._pulse = value
        self.update()

    def start(self) -> None:
        """Start breathing."""
        self._pulse_anim.start()

    def stop(self) -> None:
        """Stop breathing and rest at the smallest size."""
        self._pulse_anim.stop()
        self._pulse = 0.0
        self.update()

    def paintEvent(self, event) -> None:
        """Paint the background and the orbs."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(COLORS['bg_main']))
        painter.setPen(Qt.PenStyle.NoPen)

        scale = 0.96 + 0.08 * self._pulse
        w, h = self.width(), self.height()
        orbs = (
            (COLORS['orb_1'], -96, -96, 288, 50),
            (COLORS['orb_2'], w - 224, 40, 320, 38),
            (COLORS['orb_3'], 40, h - 288, 288, 26),
        )
        for color_hex, x, y, size, alpha in orbs:
            color = QColor(color_hex)
            color.setAlpha(alpha)
            painter.setBrush(QBrush(color))
            scaled = size * scale
            offset = (size - scaled) / 2
            painter.drawEllipse(QRectF(x + offset, y + offset, scaled, scaled))

        painter.end()
