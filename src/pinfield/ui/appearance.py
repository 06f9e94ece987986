"""
Visual styling for the pin field: glyph colours, kerning and slot backgrounds.
"""
from typing import Optional
from dataclasses import dataclass, field

from pinfield.config.settings import settings
from pinfield.core.types import ColorRole, SlotDescriptor
from pinfield.ui.fonts import MonospacedFont


@dataclass
class Appearance:
    """
    Colours are CSS colour strings (Qt stylesheet syntax). Optional focus and
    active colours fall back to their plain counterparts when unset.
    """
    font: MonospacedFont = MonospacedFont.MENLO
    font_size: int = field(default_factory=lambda: settings.FONT_SIZE)
    token_color: str = "#9e9e9e"
    token_focus_color: Optional[str] = None
    text_color: str = "#212121"
    kerning: float = field(default_factory=lambda: settings.KERNING)
    back_color: str = "transparent"
    back_border_color: str = "transparent"
    back_border_width: int = 1
    back_corner_radius: int = 4
    back_offset: int = 4
    back_focus_color: Optional[str] = None
    back_border_focus_color: Optional[str] = None
    back_active_color: Optional[str] = None
    back_border_active_color: Optional[str] = None

    def color_for_role(self, role: ColorRole) -> str:
        """Foreground colour of a slot glyph."""
        if role is ColorRole.TOKEN_FOCUSED:
            return self.token_focus_color or self.token_color
        if role is ColorRole.TOKEN:
            return self.token_color
        return self.text_color

    def background_for(self, slot: SlotDescriptor) -> str:
        if slot.focused:
            return self.back_focus_color or self.back_color
        if slot.background_role is ColorRole.ACTIVE:
            return self.back_active_color or self.back_color
        return self.back_color

    def border_for(self, slot: SlotDescriptor) -> str:
        if slot.focused:
            return self.back_border_focus_color or self.back_border_color
        if slot.background_role is ColorRole.ACTIVE:
            return self.back_border_active_color or self.back_border_color
        return self.back_border_color

    def slot_style(self, slot: SlotDescriptor) -> str:
        """Stylesheet for the label rendering one slot."""
        style = (
            f"color: {self.color_for_role(slot.color_role)};"
            f" background: {self.background_for(slot)};"
            f" border: {self.back_border_width}px solid {self.border_for(slot)};"
            f" border-radius: {self.back_corner_radius}px;"
        )
        if slot.kern_override is not None:
            style += f" margin-right: {slot.kern_override:g}px;"
        return style + f" padding: 0 {self.back_offset // 2}px;"
