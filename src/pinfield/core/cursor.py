"""
Cursor placement and slot focus.

The cursor always sits right after the last entered character; the slot it
lands on is the focused one.
"""
from dataclasses import replace
from typing import Sequence, Tuple

from pinfield.core.configuration import PinConfiguration
from pinfield.core.types import ColorRole, Direction, FocusState, SlotDescriptor


def locate(sanitized: str, config: PinConfiguration, direction: Direction) -> FocusState:
    """
    Compute the cursor offset and the focused visual slot.

    Args:
        sanitized: Sanitized code text
        config: Active configuration
        direction: Layout direction

    Returns:
        FocusState with the offset in [0, slot_count] and the focused
        index clamped to [0, slot_count - 1]
    """
    slot_count = config.slot_count
    offset = min(len(sanitized), slot_count)

    if direction is Direction.RTL:
        index = slot_count - offset - 1
    else:
        index = offset
    index = max(0, min(index, slot_count - 1))

    return FocusState(cursor_offset=offset, focused_slot_index=index)


def apply_focus(
    descriptors: Sequence[SlotDescriptor],
    focus: FocusState,
) -> Tuple[SlotDescriptor, ...]:
    """
    Mark the focused slot; a placeholder under the cursor turns TOKEN_FOCUSED.

    Entered characters keep their colour role when focused.
    """
    result = []
    for index, slot in enumerate(descriptors):
        if index != focus.focused_slot_index:
            result.append(replace(slot, focused=False, color_role=_unfocused_role(slot)))
        elif slot.is_token:
            result.append(replace(slot, focused=True, color_role=ColorRole.TOKEN_FOCUSED))
        else:
            result.append(replace(slot, focused=True))
    return tuple(result)


def _unfocused_role(slot: SlotDescriptor) -> ColorRole:
    if slot.color_role is ColorRole.TOKEN_FOCUSED:
        return ColorRole.TOKEN
    return slot.color_role


class CursorTracker:
    """Holds the last computed focus; recomputed from scratch on every call."""

    def __init__(self):
        self.focus = None

    def locate(self, sanitized: str, config: PinConfiguration, direction: Direction) -> FocusState:
        self.focus = locate(sanitized, config, direction)
        return self.focus

    def apply(self, descriptors: Sequence[SlotDescriptor]) -> Tuple[SlotDescriptor, ...]:
        if self.focus is None:
            return tuple(descriptors)
        return apply_focus(descriptors, self.focus)
