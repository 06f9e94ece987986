"""
Pin field widget — segmented code entry backed by PinFieldEngine.

A transparent QLineEdit laid over the slot row owns the raw text and the
keyboard; the row of labels only renders what the engine publishes.
"""
from typing import Callable, List, Optional

from PyQt5.QtWidgets import (
    QApplication, QGraphicsOpacityEffect, QHBoxLayout, QLabel, QLineEdit,
    QMenu, QWidget,
)
from PyQt5.QtCore import (
    QEasingCurve, QEvent, QPoint, QPropertyAnimation, Qt, pyqtSignal,
)
from PyQt5.QtGui import QKeySequence

from pinfield.config.settings import settings
from pinfield.core.configuration import PinConfiguration
from pinfield.core.engine import PinFieldEngine, RenderModel
from pinfield.core.event_bus import PinEvents
from pinfield.core.types import Direction
from pinfield.ui.appearance import Appearance
from pinfield.ui.qt_scheduler import QtTimerScheduler
from pinfield.utils.logger import logger

_SHAKE_OFFSETS = [-14, 14, -14, 14, -8, 8, -4, 4, 0]
_SHAKE_MS = 600
_FADE_MS = 200

# Edits other than paste are refused
_BLOCKED_SHORTCUTS = (
    QKeySequence.Copy, QKeySequence.Cut, QKeySequence.Undo,
    QKeySequence.Redo, QKeySequence.SelectAll,
)


class _CodeLineEdit(QLineEdit):
    """Invisible input buffer; Paste is its only editing action."""

    def _build_context_menu(self) -> QMenu:
        menu = QMenu(self)
        paste = menu.addAction("Paste")
        paste.setEnabled(bool(QApplication.clipboard().text()))
        paste.triggered.connect(self.paste)
        return menu

    def contextMenuEvent(self, event):
        self._build_context_menu().exec_(event.globalPos())

    def keyPressEvent(self, event):
        if any(event.matches(seq) for seq in _BLOCKED_SHORTCUTS):
            event.ignore()
            return
        super().keyPressEvent(event)


class PinFieldWidget(QWidget):
    """
    Fixed-length code entry with placeholder tokens and RTL support.

    Emits pin_entered(str) with the code in reading order each time the
    engine sees every slot filled.
    """

    pin_entered = pyqtSignal(str)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        config: Optional[PinConfiguration] = None,
        appearance: Optional[Appearance] = None,
    ):
        super().__init__(parent)
        self._appearance = appearance or Appearance()
        self._labels: List[QLabel] = []
        self._animation = None
        self._opacity = None

        self._setup_ui()

        self._engine = PinFieldEngine(
            self,
            config or settings.default_configuration(),
            clipboard=self,
            direction_provider=self._layout_direction,
            scheduler=QtTimerScheduler(self),
            observer=self,
            kerning=self._appearance.kerning,
            focus_delay_ms=settings.FOCUS_DELAY_MS,
        )
        self._engine.events.subscribe(PinEvents.RENDER_UPDATED, self._render)
        self._engine.events.subscribe(PinEvents.FOCUS_UPDATED, self._render)

        self._input.textEdited.connect(self._on_text_edited)
        self._engine.reload()

    def _setup_ui(self):
        # The row is always laid out left to right; mirroring happens in the engine
        self._row = QWidget(self)
        self._row.setLayoutDirection(Qt.LeftToRight)
        self._row_layout = QHBoxLayout(self._row)
        self._row_layout.setContentsMargins(0, 0, 0, 0)
        self._row_layout.setSpacing(0)
        self._row_layout.setAlignment(Qt.AlignCenter)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._row)

        self._input = _CodeLineEdit(self)
        self._input.setStyleSheet(
            "background: transparent; color: transparent; border: none;"
            " selection-background-color: transparent;"
        )
        self._input.setAttribute(Qt.WA_MacShowFocusRect, False)
        self._input.setInputMethodHints(Qt.ImhPreferNumbers)
        self.setFocusProxy(self._input)
        self._input.raise_()

    # ------------------------------------------------------------------
    # Engine collaborators
    # ------------------------------------------------------------------

    def read_raw(self) -> str:
        return self._input.text()

    def write_raw(self, text: str) -> None:
        if self._input.text() != text:
            # setText() does not emit textEdited, so no pass is re-entered
            self._input.setText(text)
        self._input.setCursorPosition(len(text))

    def read_clipboard_string(self) -> Optional[str]:
        clipboard = QApplication.clipboard()
        if clipboard is None:
            return None
        return clipboard.text() or None

    def on_complete(self, code: str) -> None:
        logger.debug("Pin field complete")
        self.pin_entered.emit(code)

    def _layout_direction(self) -> Direction:
        if self.layoutDirection() == Qt.RightToLeft:
            return Direction.RTL
        return Direction.LTR

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def engine(self) -> PinFieldEngine:
        return self._engine

    def configuration(self) -> PinConfiguration:
        return self._engine.config

    def set_configuration(self, config: PinConfiguration) -> None:
        self._engine.set_configuration(config)

    def appearance(self) -> Appearance:
        return self._appearance

    def set_appearance(self, appearance: Appearance) -> None:
        self._appearance = appearance
        self._engine.set_kerning(appearance.kerning)

    def get_pin(self) -> str:
        return self._engine.code

    def clear(self) -> None:
        self._engine.clear()
        self._input.setFocus()

    def set_enabled(self, enabled: bool) -> None:
        self._input.setEnabled(enabled)
        self._row.setEnabled(enabled)

    def animate_failure(self, completion: Optional[Callable[[], None]] = None) -> None:
        """Shake the row horizontally, then call completion."""
        self._stop_animation()
        origin = self._row.pos()
        animation = QPropertyAnimation(self._row, b"pos", self)
        animation.setDuration(_SHAKE_MS)
        animation.setEasingCurve(QEasingCurve.Linear)
        steps = len(_SHAKE_OFFSETS)
        animation.setStartValue(origin)
        for i, dx in enumerate(_SHAKE_OFFSETS, start=1):
            animation.setKeyValueAt(i / steps, origin + QPoint(dx, 0))
        if completion is not None:
            animation.finished.connect(completion)
        self._animation = animation
        animation.start()

    def animate_success(self, text: str, completion: Optional[Callable[[], None]] = None) -> None:
        """Fade the row out, show ``text`` in place of the slots, fade back in."""
        self._stop_animation()
        self._opacity = QGraphicsOpacityEffect(self._row)
        self._row.setGraphicsEffect(self._opacity)

        fade_out = QPropertyAnimation(self._opacity, b"opacity", self)
        fade_out.setDuration(_FADE_MS)
        fade_out.setStartValue(1.0)
        fade_out.setEndValue(0.0)

        def _fade_in():
            self._show_plain_text(text)
            fade_in = QPropertyAnimation(self._opacity, b"opacity", self)
            fade_in.setDuration(_FADE_MS)
            fade_in.setStartValue(0.0)
            fade_in.setEndValue(1.0)
            if completion is not None:
                fade_in.finished.connect(completion)
            self._animation = fade_in
            fade_in.start()

        fade_out.finished.connect(_fade_in)
        self._animation = fade_out
        fade_out.start()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(self, model: RenderModel) -> None:
        self._ensure_labels(len(model.descriptors))
        font = self._appearance.font.font(self._appearance.font_size)
        for label, slot in zip(self._labels, model.descriptors):
            label.setFont(font)
            label.setText(slot.content)
            label.setStyleSheet(self._appearance.slot_style(slot))

    def _show_plain_text(self, text: str) -> None:
        for index, label in enumerate(self._labels):
            label.setText(text[index] if index < len(text) else "")
            label.setStyleSheet(f"color: {self._appearance.text_color}; background: transparent;")

    def _ensure_labels(self, count: int) -> None:
        while len(self._labels) > count:
            label = self._labels.pop()
            self._row_layout.removeWidget(label)
            label.deleteLater()
        while len(self._labels) < count:
            label = QLabel(self._row)
            label.setAlignment(Qt.AlignCenter)
            label.setAttribute(Qt.WA_TransparentForMouseEvents)
            self._labels.append(label)
            self._row_layout.addWidget(label)

    def _stop_animation(self) -> None:
        if self._animation is not None:
            self._animation.stop()
            self._animation = None

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def _on_text_edited(self, _text: str) -> None:
        self._engine.on_input_changed()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._input.setGeometry(self.rect())
        self._input.raise_()

    def changeEvent(self, event):
        super().changeEvent(event)
        # Qt can deliver this while the base constructor is still running
        engine = getattr(self, "_engine", None)
        if engine is not None and event.type() == QEvent.LayoutDirectionChange:
            engine.reload()
