"""
PinFieldEngine — one synchronous recompute pass per input change.

Pass order:
  read raw → RTL paste correction → sanitize → write back → build slots →
  publish render model → schedule focus → check completion

The focus pass runs one scheduler tick later; a newer input change cancels
it, and a generation counter discards any call that still slips through.
"""
from typing import Callable, Optional, Protocol, Tuple
from dataclasses import dataclass

from pinfield.core.completion import CompletionDetector, CompletionObserver
from pinfield.core.configuration import PinConfiguration
from pinfield.core.cursor import CursorTracker
from pinfield.core.event_bus import EventBus, PinEvents
from pinfield.core.paste import maybe_reverse_for_paste
from pinfield.core.sanitizer import sanitize
from pinfield.core.scheduling import Scheduler, ScheduledCall
from pinfield.core.segment_model import SegmentModelBuilder, DEFAULT_KERNING
from pinfield.core.types import Direction, FocusState, SlotDescriptor
from pinfield.utils.logger import logger

DEFAULT_FOCUS_DELAY_MS = 10


class TextBuffer(Protocol):
    """External raw text holder (the platform text field)."""

    def read_raw(self) -> str: ...

    def write_raw(self, text: str) -> None: ...


class ClipboardReader(Protocol):
    def read_clipboard_string(self) -> Optional[str]: ...


class StringTextBuffer:
    """In-memory TextBuffer for headless hosts and tests."""

    def __init__(self, text: str = ""):
        self.text = text
        self.writes = 0

    def read_raw(self) -> str:
        return self.text

    def write_raw(self, text: str) -> None:
        self.text = text
        self.writes += 1


@dataclass(frozen=True)
class RenderModel:
    """Snapshot handed to renderers on every publish."""
    descriptors: Tuple[SlotDescriptor, ...]
    sanitized: str
    direction: Direction
    focus: Optional[FocusState] = None

    @property
    def text(self) -> str:
        """Slot contents joined in visual order."""
        return "".join(d.content for d in self.descriptors)


class PinFieldEngine:
    """
    Headless state engine behind a segmented code field.

    The host calls on_input_changed() whenever its text buffer changes and
    renders the RenderModel published on ``events``.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        config: Optional[PinConfiguration] = None,
        *,
        clipboard: Optional[ClipboardReader] = None,
        direction_provider: Optional[Callable[[], Direction]] = None,
        scheduler: Optional[Scheduler] = None,
        observer: Optional[CompletionObserver] = None,
        kerning: float = DEFAULT_KERNING,
        focus_delay_ms: int = DEFAULT_FOCUS_DELAY_MS,
    ):
        self._buffer = buffer
        self._config = config.copy() if config is not None else PinConfiguration()
        self._clipboard = clipboard
        self._direction_provider = direction_provider or (lambda: Direction.LTR)
        self._scheduler = scheduler
        self._focus_delay_ms = focus_delay_ms

        self._builder = SegmentModelBuilder(kerning)
        self._tracker = CursorTracker()
        self._completion = CompletionDetector(observer)
        self.events = EventBus()

        self._sanitized = ""
        self._direction = Direction.LTR
        self._model = RenderModel(descriptors=(), sanitized="", direction=Direction.LTR)
        self._pending: Optional[ScheduledCall] = None
        self._generation = 0
        self._in_pass = False

    # ------------------------------------------------------------------
    # Configuration surface
    # ------------------------------------------------------------------

    @property
    def config(self) -> PinConfiguration:
        """A copy of the active configuration; change it through the setters."""
        return self._config.copy()

    def set_configuration(self, config: PinConfiguration) -> None:
        self._config = config.copy()
        logger.debug(f"Pin field configuration set: {self._config!r}")
        self.on_input_changed()

    def set_slot_count(self, slot_count: int) -> None:
        self._config.set_slot_count(slot_count)
        self.on_input_changed()

    def set_valid_characters(self, valid_characters) -> None:
        self._config.set_valid_characters(valid_characters)
        self.on_input_changed()

    def set_token(self, token: str) -> None:
        self._config.set_token(token)
        self.on_input_changed()

    @property
    def kerning(self) -> float:
        return self._builder.kerning

    def set_kerning(self, kerning: float) -> None:
        self._builder.kerning = kerning
        self.on_input_changed()

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    @property
    def observer(self) -> Optional[CompletionObserver]:
        return self._completion.observer

    def set_observer(self, observer: Optional[CompletionObserver]) -> None:
        """Register the completion observer; only a weak reference is kept."""
        self._completion.set_observer(observer)

    def set_clipboard(self, clipboard: Optional[ClipboardReader]) -> None:
        self._clipboard = clipboard

    def set_direction_provider(self, provider: Callable[[], Direction]) -> None:
        self._direction_provider = provider

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def sanitized(self) -> str:
        return self._sanitized

    @property
    def direction(self) -> Direction:
        """Direction used by the last pass."""
        return self._direction

    @property
    def model(self) -> RenderModel:
        return self._model

    @property
    def descriptors(self) -> Tuple[SlotDescriptor, ...]:
        return self._model.descriptors

    @property
    def focus(self) -> Optional[FocusState]:
        return self._model.focus

    @property
    def code(self) -> str:
        """Entered characters in reading order."""
        if self._direction is Direction.RTL:
            return self._sanitized[::-1]
        return self._sanitized

    @property
    def is_complete(self) -> bool:
        return len(self._sanitized) == self._config.slot_count

    @property
    def has_pending_focus(self) -> bool:
        return self._pending is not None

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def on_input_changed(self) -> RenderModel:
        """Run one full recompute pass and return the published model."""
        if self._in_pass:
            logger.debug("Pin field pass already running, nested change ignored")
            return self._model

        self._in_pass = True
        try:
            direction = self._direction_provider()
            raw = self._buffer.read_raw() or ""

            if self._clipboard is not None:
                raw = maybe_reverse_for_paste(raw, self._clipboard.read_clipboard_string(), direction)

            sanitized = sanitize(raw, self._config)
            self._buffer.write_raw(sanitized)

            self._sanitized = sanitized
            self._direction = direction
            descriptors = self._builder.build(sanitized, self._config, direction)
            self._model = RenderModel(
                descriptors=descriptors,
                sanitized=sanitized,
                direction=direction,
            )
            logger.debug(
                f"Pin field pass: {len(sanitized)}/{self._config.slot_count} "
                f"filled, direction={direction.name}"
            )
            self.events.publish(PinEvents.RENDER_UPDATED, self._model)

            self._schedule_focus()

            code = self._completion.check(sanitized, self._config, direction)
            if code is not None:
                self.events.publish(PinEvents.COMPLETED, code)
        finally:
            self._in_pass = False

        return self._model

    # Alias matching the renderer-side naming
    reload = on_input_changed

    def clear(self) -> RenderModel:
        """Empty the buffer and re-render."""
        self._buffer.write_raw("")
        return self.on_input_changed()

    def cancel_pending(self) -> None:
        """Drop any deferred focus pass."""
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _schedule_focus(self) -> None:
        self.cancel_pending()
        generation = self._generation

        if self._scheduler is None:
            self._apply_focus(generation)
            return

        self._pending = self._scheduler.schedule(
            self._focus_delay_ms, lambda: self._apply_focus(generation)
        )

    def _apply_focus(self, generation: int) -> None:
        if generation != self._generation:
            logger.debug("Stale focus pass discarded")
            return
        self._pending = None

        focus = self._tracker.locate(self._sanitized, self._config, self._direction)
        descriptors = self._tracker.apply(self._model.descriptors)
        self._model = RenderModel(
            descriptors=descriptors,
            sanitized=self._sanitized,
            direction=self._direction,
            focus=focus,
        )
        self.events.publish(PinEvents.FOCUS_UPDATED, self._model)
