"""
Value types shared by the engine and its renderers.
"""
from enum import Enum, auto
from typing import Optional
from dataclasses import dataclass


class Direction(Enum):
    """Layout direction, supplied by the host platform on every call."""
    LTR = auto()
    RTL = auto()


class ColorRole(Enum):
    INACTIVE = auto()        # empty slot background
    ACTIVE = auto()          # slot holding an entered character
    TOKEN = auto()           # placeholder glyph
    TOKEN_FOCUSED = auto()   # placeholder glyph under the cursor


@dataclass(frozen=True)
class SlotDescriptor:
    """
    Display state of one slot, stored at its visual (left-to-right) index.

    kern_override is the spacing to apply after the glyph; None means the
    renderer's own default.
    """
    content: str
    color_role: ColorRole
    kern_override: Optional[float] = None
    is_token: bool = False
    focused: bool = False

    @property
    def background_role(self) -> ColorRole:
        """Role used for the slot background (token slots render inactive)."""
        return ColorRole.INACTIVE if self.is_token else ColorRole.ACTIVE


@dataclass(frozen=True)
class FocusState:
    """Cursor position within the code and the visual slot it lands on."""
    cursor_offset: int
    focused_slot_index: int
