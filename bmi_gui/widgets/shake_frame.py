"""
================================================================================
Shake Frame - Invalid Input Feedback
================================================================================

A container that can nudge its content sideways. Driven through the
'offset' property, a quick left-right sequence reads as a friendly "no".

Design Philosophy:
    "Fail fast, fail often, but always fail forward." - John Maxwell

The offset moves the content inside the frame's margins, so the shake
never pushes neighbouring widgets around.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout
from PyQt6.QtCore import pyqtProperty


class ShakeFrame(QWidget):
    """
    Wraps a single widget and shifts it horizontally on demand.

    Example:
        >>> frame = ShakeFrame(input_card)
        >>> frame.offset = -10   # content sits 10px to the left
    """

    # Room on each side for the largest shake leg
    PADDING = 12

    def __init__(self, content: QWidget, parent=None):
        """
        Initialize the frame.

        Args:
            content: The widget to shake
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self._offset = 0.0
        self.content = content

        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(0)
        self._layout.addWidget(content)
        self._apply_offset()

    @pyqtProperty(float)
    def offset(self) -> float:
        """Get the horizontal offset in pixels."""
        return self._offset

    @offset.setter
    def offset(self, value: float) -> None:
        """Set the horizontal offset and move the content."""
        self._offset = value
        self._apply_offset()

    def _apply_offset(self) -> None:
        shift = max(-self.PADDING, min(self.PADDING, round(self._offset)))
        self._layout.setContentsMargins(self.PADDING + shift, 0, self.PADDING - shift, 0)
