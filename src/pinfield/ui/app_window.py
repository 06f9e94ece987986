"""
AppWindow — demo QMainWindow hosting a PinFieldWidget.

Manages:
  - direction toggle (LTR / RTL)
  - clear button
  - success / failure feedback against the configured demo code
"""
from PyQt5.QtWidgets import (
    QCheckBox, QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget,
)
from PyQt5.QtCore import Qt

from pinfield.config.settings import settings
from pinfield.ui.appearance import Appearance
from pinfield.ui.components.pin_field_widget import PinFieldWidget
from pinfield.utils.logger import logger
from pinfield.utils.validators import validate_code


class AppWindow(QMainWindow):
    """Root demo window."""

    def __init__(self):
        super().__init__()
        self._setup_ui()
        self._wire_signals()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle(settings.APP_TITLE)
        self.resize(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        instruction = QLabel(
            f"Enter the {settings.SLOT_COUNT}-character code:"
        )
        instruction.setAlignment(Qt.AlignCenter)
        layout.addWidget(instruction)

        appearance = Appearance(
            token_focus_color="#1f538d",
            back_border_color="#aaaaaa",
            back_border_focus_color="#1f538d",
            back_active_color="#fafafa",
        )
        self._pin_widget = PinFieldWidget(appearance=appearance)
        self._pin_widget.setMinimumHeight(settings.FONT_SIZE + 24)
        layout.addWidget(self._pin_widget)

        row = QHBoxLayout()
        self._rtl_box = QCheckBox("Right-to-left")
        row.addWidget(self._rtl_box)
        row.addStretch()
        self._clear_btn = QPushButton("Clear")
        row.addWidget(self._clear_btn)
        layout.addLayout(row)

        self._status_label = QLabel("")
        self._status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._status_label)
        layout.addStretch()

        self.setCentralWidget(central)
        self._pin_widget.setFocus()

    def _wire_signals(self):
        self._pin_widget.pin_entered.connect(self._on_pin_entered)
        self._rtl_box.toggled.connect(self._on_direction_toggled)
        self._clear_btn.clicked.connect(self._on_clear_clicked)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_pin_entered(self, code: str):
        ok, message = validate_code(code, self._pin_widget.configuration())
        if not ok:
            self._set_status(message, "#c0392b")
            return

        if code == settings.DEMO_CODE:
            logger.info("Demo code accepted")
            self._set_status("Code accepted", "#1a7a1a")
            self._pin_widget.animate_success(code)
        else:
            logger.info("Demo code rejected")
            self._set_status("Wrong code, try again", "#c0392b")
            self._pin_widget.animate_failure(self._pin_widget.clear)

    def _on_direction_toggled(self, checked: bool):
        self._pin_widget.setLayoutDirection(Qt.RightToLeft if checked else Qt.LeftToRight)
        self._pin_widget.setFocus()

    def _on_clear_clicked(self):
        self._set_status("", "#333")
        self._pin_widget.clear()

    def _set_status(self, msg: str, color: str):
        self._status_label.setStyleSheet(f"color: {color};")
        self._status_label.setText(msg)
