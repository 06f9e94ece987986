"""
Headless input/state engine for segmented one-time-code entry.

Nothing in this package imports Qt; rendering surfaces consume the
descriptors and focus state it publishes.
"""
from pinfield.core.types import Direction, ColorRole, SlotDescriptor, FocusState
from pinfield.core.configuration import PinConfiguration, ConfigurationError
from pinfield.core.sanitizer import sanitize
from pinfield.core.segment_model import SegmentModelBuilder, build, DEFAULT_KERNING
from pinfield.core.cursor import CursorTracker, locate, apply_focus
from pinfield.core.completion import CompletionDetector, check_completion
from pinfield.core.paste import maybe_reverse_for_paste
from pinfield.core.scheduling import Scheduler, ScheduledCall, ManualScheduler
from pinfield.core.event_bus import EventBus, PinEvents
from pinfield.core.engine import (
    PinFieldEngine, RenderModel, TextBuffer, ClipboardReader, StringTextBuffer,
)

__all__ = [
    "Direction", "ColorRole", "SlotDescriptor", "FocusState",
    "PinConfiguration", "ConfigurationError",
    "sanitize",
    "SegmentModelBuilder", "build", "DEFAULT_KERNING",
    "CursorTracker", "locate", "apply_focus",
    "CompletionDetector", "check_completion",
    "maybe_reverse_for_paste",
    "Scheduler", "ScheduledCall", "ManualScheduler",
    "EventBus", "PinEvents",
    "PinFieldEngine", "RenderModel", "TextBuffer", "ClipboardReader", "StringTextBuffer",
]
