"""
pinfield — segmented one-time-code entry.

The headless engine lives in pinfield.core; pinfield.ui holds the PyQt5
widget that renders it.
"""
from pinfield.core import (
    ColorRole, ConfigurationError, Direction, FocusState, PinConfiguration,
    PinFieldEngine, RenderModel, SlotDescriptor, StringTextBuffer,
)

__version__ = "1.0.0"

__all__ = [
    "ColorRole", "ConfigurationError", "Direction", "FocusState",
    "PinConfiguration", "PinFieldEngine", "RenderModel", "SlotDescriptor",
    "StringTextBuffer", "__version__",
]
