"""
================================================================================
Card Widgets - Container Components
================================================================================

Card widgets provide visual grouping for related UI elements.
They feature rounded corners, a subtle border, and clean typography.

Design Philosophy:
    "Design is a funny word. Some people think design means how it looks.
     But of course, if you dig deeper, it's really how it works." - Steve Jobs

The ResultCard adds a single animatable 'reveal' property: at 0 the card
is transparent and its content sits a little lower, at 1 it's fully
visible in place.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QFrame, QWidget, QVBoxLayout, QLabel, QGraphicsOpacityEffect
)
from PyQt6.QtCore import Qt, pyqtProperty
from PyQt6.QtGui import QFont

try:
    from ..styles.theme import COLORS, get_card_style
except ImportError:
    from styles.theme import COLORS, get_card_style


def make_label(text: str, size: int, color_key: str, bold: bool = False) -> QLabel:
    """
    Create a transparent label in the active palette.

    Args:
        text: Initial text
        size: Point size
        color_key: Key into COLORS
        bold: Use a semi-bold weight
    """
    label = QLabel(text)
    weight = QFont.Weight.DemiBold if bold else QFont.Weight.Normal
    label.setFont(QFont("Segoe UI", size, weight))
    label.setStyleSheet(f"color: {COLORS[color_key]}; background: transparent; border: none;")
    return label


class FriendlyCard(QFrame):
    """
    A card widget with rounded corners.

    Features:
        - Rounded corners (24px radius)
        - Optional title and subtitle header
        - Card background from the active theme

    Example:
        >>> card = FriendlyCard("Enter your details", "Metric units (cm, kg).")
        >>> card.add_widget(my_field)
    """

    MARGIN = 20

    def __init__(self, title: str = "", subtitle: str = "", parent=None):
        """
        Initialize the card widget.

        Args:
            title: Optional title displayed at the top of the card
            subtitle: Optional muted line under the title
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self.title = title

        self.setStyleSheet(get_card_style(type(self).__name__))

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(self.MARGIN, self.MARGIN, self.MARGIN, self.MARGIN)
        self.main_layout.setSpacing(14)

        if title:
            self.main_layout.addWidget(make_label(title, 13, 'text_primary', bold=True))
        if subtitle:
            self.main_layout.addWidget(make_label(subtitle, 10, 'text_secondary'))

    def add_widget(self, widget: QWidget) -> None:
        """Add a widget to the card's layout."""
        self.main_layout.addWidget(widget)

    def add_layout(self, layout) -> None:
        """Add a layout to the card's layout."""
        self.main_layout.addLayout(layout)


class ResultCard(FriendlyCard):
    """
    The card holding the BMI readout, with a fade-and-slide reveal.

    Example:
        >>> card = ResultCard()
        >>> card.reveal = 1.0   # fully shown
    """

    # Vertical travel of the content while revealing
    SLIDE_DISTANCE = 18

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self._reveal = 0.0

        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)
        self._apply_reveal()

    @pyqtProperty(float)
    def reveal(self) -> float:
        """Get the reveal progress (0 hidden, 1 shown)."""
        return self._reveal

    @reveal.setter
    def reveal(self, value: float) -> None:
        """Set the reveal progress and update opacity and slide."""
        self._reveal = value
        self._apply_reveal()

    def _apply_reveal(self) -> None:
        # Spring easing overshoots past 1; opacity can't
        self._opacity.setOpacity(max(0.0, min(1.0, self._reveal)))
        shift = round(self.SLIDE_DISTANCE * (1.0 - self._reveal))
        self.main_layout.setContentsMargins(
            self.MARGIN, self.MARGIN + shift, self.MARGIN, max(0, self.MARGIN - shift)
        )


class StatDisplay(QWidget):
    """
    A caption over a value, like "Your BMI" over "23.0".

    Example:
        >>> stat = StatDisplay("Category", "—", align_right=True)
        >>> stat.set_value("Normal", "#34d399")
    """

    def __init__(self, caption: str, value: str = "", value_size: int = 28,
                 align_right: bool = False, parent=None):
        """
        Initialize the stat display.

        Args:
            caption: Small text above the value
            value: Initial value text
            value_size: Point size of the value
            align_right: Right-align the text (for the category column)
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        alignment = Qt.AlignmentFlag.AlignRight if align_right else Qt.AlignmentFlag.AlignLeft

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.caption_label = make_label(caption, 10, 'text_secondary')
        self.caption_label.setAlignment(alignment)
        layout.addWidget(self.caption_label)

        self.value_label = make_label(value, value_size, 'text_primary', bold=True)
        self.value_label.setAlignment(alignment)
        layout.addWidget(self.value_label)

        self.detail_label = make_label("", 9, 'text_muted')
        self.detail_label.setAlignment(alignment)
        layout.addWidget(self.detail_label)

    def set_value(self, value: str, color: Optional[str] = None) -> None:
        """
        Update the displayed value.

        Args:
            value: New value text
            color: Optional text color (defaults to primary text)
        """
        self.value_label.setText(value)
        self.value_label.setStyleSheet(
            f"color: {color or COLORS['text_primary']}; background: transparent; border: none;"
        )

    def set_detail(self, text: str) -> None:
        """Set the muted line below the value."""
        self.detail_label.setText(text)
