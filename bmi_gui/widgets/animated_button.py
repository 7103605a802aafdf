"""
================================================================================
Animated Button Widget
================================================================================

A custom button with smooth press and hover animations that provides
satisfying tactile feedback to users.

Design Philosophy:
    "Details matter, it's worth waiting to get it right." - Steve Jobs

The button responds to user interaction with:
    - Scale animation on press (shrinks slightly)
    - Color transition on hover

Used for the Calculate action and the compact Reset button in the header.
"""

from PyQt6.QtWidgets import QPushButton
from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, QRectF, pyqtProperty
from PyQt6.QtGui import QFont, QColor, QPainter, QBrush, QPen

try:
    from ..styles.theme import COLORS, get_button_style
except ImportError:
    from styles.theme import COLORS, get_button_style


class AnimatedButton(QPushButton):
    """
    A button with smooth press and hover animations.

    Attributes:
        color_scheme: The color scheme ('primary' or 'secondary')

    Example:
        >>> btn = AnimatedButton("Calculate", "primary")
        >>> btn.clicked.connect(my_handler)
    """

    PRESSED_SCALE = 0.95

    def __init__(self, text: str, color_scheme: str = "primary", parent=None):
        """
        Initialize the animated button.

        Args:
            text: Button label text
            color_scheme: 'primary' or 'secondary'
            parent: Parent widget (optional)
        """
        super().__init__(text, parent)

        self.color_scheme = color_scheme
        self._scale = 1.0
        self._bg_color = QColor(COLORS[f'btn_{color_scheme}'])

        self.setFont(QFont("Segoe UI", 11, QFont.Weight.DemiBold))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(46)
        self._update_style()
        self._setup_animations()

    def _setup_animations(self) -> None:
        """Initialize the animation objects."""
        self._scale_anim = QPropertyAnimation(self, b"scale")
        self._scale_anim.setDuration(100)
        self._scale_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        self._color_anim = QPropertyAnimation(self, b"bgColor")
        self._color_anim.setDuration(150)
        self._color_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

    def _update_style(self) -> None:
        """Update the button stylesheet based on current color."""
        self.setStyleSheet(get_button_style(self.color_scheme, self._bg_color.name()))

    def _text_color(self) -> QColor:
        return QColor(COLORS[f'btn_{self.color_scheme}_text'])

    # =========================================================================
    # Qt Properties for Animation
    # =========================================================================

    @pyqtProperty(float)
    def scale(self) -> float:
        """Get the current scale factor."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        """Set the scale factor and trigger repaint."""
        self._scale = value
        self.update()

    @pyqtProperty(QColor)
    def bgColor(self) -> QColor:
        """Get the current background color."""
        return self._bg_color

    @bgColor.setter
    def bgColor(self, value: QColor) -> None:
        """Set the background color and update style."""
        self._bg_color = value
        self._update_style()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _animate_color(self, key: str) -> None:
        self._color_anim.stop()
        self._color_anim.setStartValue(self._bg_color)
        self._color_anim.setEndValue(QColor(COLORS[key]))
        self._color_anim.start()

    def _animate_scale(self, start: float, end: float) -> None:
        self._scale_anim.stop()
        self._scale_anim.setStartValue(start)
        self._scale_anim.setEndValue(end)
        self._scale_anim.start()

    def enterEvent(self, event) -> None:
        """Handle mouse enter - transition to hover color."""
        self._animate_color(f'btn_{self.color_scheme}_hover')
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        """Handle mouse leave - transition back to base color."""
        self._animate_color(f'btn_{self.color_scheme}')
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:
        """Handle mouse press - scale down for tactile feedback."""
        self._animate_scale(1.0, self.PRESSED_SCALE)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        """Handle mouse release - scale back to normal."""
        self._animate_scale(self.PRESSED_SCALE, 1.0)
        super().mouseReleaseEvent(event)

    def paintEvent(self, event) -> None:
        """
        Paint the button, applying the press scale when it isn't 1.0.

        Stylesheets can't express a transform, so the scaled state is
        drawn by hand.
        """
        if self._scale == 1.0:
            super().paintEvent(event)
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width() * self._scale
        h = self.height() * self._scale
        rect = QRectF((self.width() - w) / 2, (self.height() - h) / 2, w, h)

        painter.setBrush(QBrush(self._bg_color))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRoundedRect(rect, 14, 14)

        painter.setPen(QPen(self._text_color()))
        painter.setFont(self.font())
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()
