"""
================================================================================
Main Window - Application Core
================================================================================

This module contains the single calculator screen. It ties the widgets to
the core: text fields feed the parser, the Calculate button feeds the
engine, and the feedback controller's intents drive the animations.

Design Philosophy:
    "Simplicity is the ultimate sophistication." - Leonardo da Vinci
    "That's been one of my mantras - focus and simplicity." - Steve Jobs

The window is organized top to bottom:
    - Header: title and Reset button
    - Input card: height, weight, Calculate (shakes on invalid input)
    - Result card: BMI value, category, scale, hint (fades in on success)
    - Disclaimer

The interface should feel intuitive without requiring a manual.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QStatusBar,
    QScrollArea
)
from PyQt6.QtCore import Qt

# Internal modules - support both package and direct execution
try:
    from .animator import IntentPlayer
    from .core import (
        BmiEngine, FeedbackController, Phase, Target, parse_number
    )
    from .settings import AppSettings
    from .styles.theme import COLORS, FONT_FAMILY, accent_color, apply_theme, get_input_style
    from .utils.constants import EMPTY_VALUE_TEXT, IDLE_HINT_TEXT, DISCLAIMER_TEXT
    from .widgets import (
        AnimatedButton, FriendlyCard, ResultCard, StatDisplay, BmiScaleWidget,
        OrbBackground, ShakeFrame, make_label
    )
except ImportError:
    from animator import IntentPlayer
    from core import (
        BmiEngine, FeedbackController, Phase, Target, parse_number
    )
    from settings import AppSettings
    from styles.theme import COLORS, FONT_FAMILY, accent_color, apply_theme, get_input_style
    from utils.constants import EMPTY_VALUE_TEXT, IDLE_HINT_TEXT, DISCLAIMER_TEXT
    from widgets import (
        AnimatedButton, FriendlyCard, ResultCard, StatDisplay, BmiScaleWidget,
        OrbBackground, ShakeFrame, make_label
    )

logger = logging.getLogger(__name__)


class BmiCalculatorWindow(QMainWindow):
    """
    The calculator screen.

    The window provides:
        - Height and weight entry with comma or period decimals
        - Animated result card with category, range and guidance
        - Colored scale with a popping indicator
        - Shake feedback for invalid input
        - One-tap reset

    Example:
        >>> app = QApplication(sys.argv)
        >>> window = BmiCalculatorWindow()
        >>> window.show()
        >>> sys.exit(app.exec())
    """

    def __init__(self, settings: Optional[AppSettings] = None):
        """
        Initialize the main window.

        Args:
            settings: User preferences (defaults are used when omitted)
        """
        super().__init__()
        self.settings = settings or AppSettings()
        apply_theme(self.settings.theme)

        self.setWindowTitle("BMI Calculator")
        self.setMinimumSize(440, 760)

        # Held values, re-parsed on every keystroke
        self.height_value: Optional[float] = None
        self.weight_value: Optional[float] = None

        self.engine = BmiEngine()
        self.player = IntentPlayer(self)
        self.controller = FeedbackController(
            speed=self.settings.animation_speed, listener=self.player.play
        )

        self._build_ui()
        self._bind_animations()
        self._render_state()

    # =========================================================================
    # UI Building
    # =========================================================================

    def _build_ui(self) -> None:
        """Build the complete user interface."""
        self._apply_global_styles()

        self.background = OrbBackground()
        self.setCentralWidget(self.background)
        outer = QVBoxLayout(self.background)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setStyleSheet("QScrollArea { border: none; background: transparent; }")
        outer.addWidget(scroll)

        content = QWidget()
        content.setObjectName("content")
        content.setStyleSheet("QWidget#content { background: transparent; }")
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 40, 20, 28)
        layout.setSpacing(20)

        layout.addLayout(self._build_header())
        self.shake_frame = ShakeFrame(self._build_input_card())
        layout.addWidget(self.shake_frame)
        layout.addWidget(self._build_result_card())

        disclaimer = make_label(DISCLAIMER_TEXT, 9, 'text_muted')
        disclaimer.setWordWrap(True)
        layout.addWidget(disclaimer)
        layout.addStretch()

        scroll.setWidget(content)
        self._build_status_bar()
        self.background.start()

    def _apply_global_styles(self) -> None:
        """Apply window-wide styles."""
        self.setStyleSheet(f"""
            QMainWindow {{
                background-color: {COLORS['bg_main']};
            }}
            QLabel {{
                font-family: {FONT_FAMILY};
            }}
            QStatusBar {{
                background-color: {COLORS['bg_card']};
                color: {COLORS['text_secondary']};
                font-family: {FONT_FAMILY};
                font-size: 11px;
                padding: 6px;
            }}
        """)

    def _build_header(self) -> QHBoxLayout:
        """Build the title row with the Reset button."""
        header = QHBoxLayout()

        titles = QVBoxLayout()
        titles.setSpacing(2)
        titles.addWidget(make_label("BMI Calculator", 10, 'text_secondary'))
        titles.addWidget(make_label("Know your number", 22, 'text_primary', bold=True))
        header.addLayout(titles)
        header.addStretch()

        self.reset_btn = AnimatedButton("↻", "secondary")
        self.reset_btn.setFixedSize(46, 46)
        self.reset_btn.setToolTip("Reset")
        self.reset_btn.setAccessibleName("Reset")
        self.reset_btn.clicked.connect(self._on_reset)
        header.addWidget(self.reset_btn, alignment=Qt.AlignmentFlag.AlignTop)

        return header

    def _build_input_card(self) -> FriendlyCard:
        """Build the height/weight entry card."""
        card = FriendlyCard("Enter your details", "Metric units (cm, kg). Reasonable ranges only.")

        self.height_input = self._build_field(card, "Height", "e.g. 172", "cm")
        self.height_input.textChanged.connect(self._on_height_changed)

        self.weight_input = self._build_field(card, "Weight", "e.g. 68", "kg")
        self.weight_input.textChanged.connect(self._on_weight_changed)
        self.weight_input.returnPressed.connect(self._on_calculate)

        self.calculate_btn = AnimatedButton("Calculate", "primary")
        self.calculate_btn.setAccessibleName("Calculate BMI")
        self.calculate_btn.clicked.connect(self._on_calculate)
        card.add_widget(self.calculate_btn)

        return card

    def _build_field(self, card: FriendlyCard, caption: str, placeholder: str, unit: str) -> QLineEdit:
        """Add a captioned numeric field with a unit suffix to a card."""
        card.add_widget(make_label(caption.upper(), 9, 'text_secondary'))

        row = QHBoxLayout()
        field = QLineEdit()
        field.setPlaceholderText(placeholder)
        field.setStyleSheet(get_input_style())
        row.addWidget(field, stretch=1)
        row.addWidget(make_label(unit, 11, 'text_secondary'))
        card.add_layout(row)

        return field

    def _build_result_card(self) -> ResultCard:
        """Build the result card with value, category and scale."""
        self.result_card = ResultCard()

        top = QHBoxLayout()
        self.bmi_stat = StatDisplay("Your BMI", EMPTY_VALUE_TEXT, value_size=30)
        top.addWidget(self.bmi_stat)
        top.addStretch()
        self.category_stat = StatDisplay("Category", EMPTY_VALUE_TEXT, value_size=13, align_right=True)
        top.addWidget(self.category_stat, alignment=Qt.AlignmentFlag.AlignTop)
        self.result_card.add_layout(top)

        self.result_card.add_widget(make_label("Range", 10, 'text_secondary'))
        self.scale = BmiScaleWidget()
        self.result_card.add_widget(self.scale)

        self.hint_label = make_label(IDLE_HINT_TEXT, 10, 'text_secondary')
        self.hint_label.setWordWrap(True)
        self.result_card.add_widget(self.hint_label)

        return self.result_card

    def _build_status_bar(self) -> None:
        """Build the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Enter your height and weight to get started.")

    def _bind_animations(self) -> None:
        """Connect intent targets to widget properties."""
        self.player.register(Target.SHAKE_OFFSET, self.shake_frame, b"offset")
        self.player.register(Target.CARD_REVEAL, self.result_card, b"reveal")
        self.player.register(Target.SCALE_FILL, self.scale, b"fill")
        self.player.register(Target.INDICATOR_POP, self.scale, b"pop")
        self.player.register_setter(Target.ACCENT, self.scale.set_accent)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_height_changed(self, text: str) -> None:
        """Re-parse the height on every keystroke."""
        self.height_value = parse_number(text)

    def _on_weight_changed(self, text: str) -> None:
        """Re-parse the weight on every keystroke."""
        self.weight_value = parse_number(text)

    def _on_calculate(self) -> None:
        """Evaluate the held values and hand the outcome to the controller."""
        outcome = self.engine.evaluate(self.height_value, self.weight_value)
        self.controller.on_calculate(outcome)
        self._render_state()

        state = self.controller.state
        if state.phase is Phase.RESULT:
            logger.info("BMI %s (%s)", state.result.display_value, state.result.category.label)
            self.status_bar.showMessage(
                f"BMI {state.result.display_value}: {state.result.category.label}"
            )
        else:
            logger.info("Invalid input: %s", outcome.reason)
            self.status_bar.showMessage("Please enter a height of 40-260 cm and a weight of 10-400 kg.")

    def _on_reset(self) -> None:
        """Return to the empty state."""
        instruction = self.controller.on_reset()
        if instruction.clear_inputs:
            self.height_input.clear()
            self.weight_input.clear()
        self._render_state()

        logger.info("Reset")
        self.status_bar.showMessage("Cleared. Enter your height and weight to get started.")

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_state(self) -> None:
        """Update the text of the result card from the display state."""
        state = self.controller.state

        if state.phase is Phase.RESULT:
            result = state.result
            category = result.category
            self.bmi_stat.set_value(result.display_value)
            self.category_stat.set_value(category.label, accent_color(category.accent))
            self.category_stat.set_detail(category.range_label)
            self.hint_label.setText(category.hint)
        else:
            self.bmi_stat.set_value(EMPTY_VALUE_TEXT)
            self.category_stat.set_value(EMPTY_VALUE_TEXT, COLORS['text_secondary'])
            self.category_stat.set_detail("")
            self.hint_label.setText(IDLE_HINT_TEXT)

    def closeEvent(self, event) -> None:
        """Stop animations before closing."""
        self.player.stop_all()
        self.background.stop()
        super().closeEvent(event)
