"""
Per-slot display model.

Slots are evaluated in logical (reading) order and written at their visual
index, which is mirrored under RTL so the renderer can always lay the row
out left to right.
"""
from typing import List, Optional, Tuple

from pinfield.core.configuration import PinConfiguration
from pinfield.core.types import ColorRole, Direction, SlotDescriptor

DEFAULT_KERNING = 20.0


def visual_index(logical_index: int, slot_count: int, direction: Direction) -> int:
    """Map a logical slot index to its left-to-right render position."""
    if direction is Direction.RTL:
        return slot_count - logical_index - 1
    return logical_index


def trailing_logical_index(slot_count: int, direction: Direction) -> int:
    """Logical slot that gets no trailing kerning."""
    return 0 if direction is Direction.RTL else slot_count - 1


class SegmentModelBuilder:
    """Builds the ordered slot descriptors for one render pass."""

    def __init__(self, kerning: float = DEFAULT_KERNING):
        self.kerning = kerning

    def build(
        self,
        sanitized: str,
        config: PinConfiguration,
        direction: Direction,
    ) -> Tuple[SlotDescriptor, ...]:
        slot_count = config.slot_count
        kern_fix_index = trailing_logical_index(slot_count, direction)
        slots: List[Optional[SlotDescriptor]] = [None] * slot_count

        for i in range(slot_count):
            if i < len(sanitized):
                content, role, is_token = sanitized[i], ColorRole.ACTIVE, False
            else:
                content, role, is_token = config.token, ColorRole.TOKEN, True

            # Trailing kerning would push the centred row off balance
            kern = 0.0 if i == kern_fix_index else self.kerning

            slots[visual_index(i, slot_count, direction)] = SlotDescriptor(
                content=content,
                color_role=role,
                kern_override=kern,
                is_token=is_token,
            )

        return tuple(slots)


def build(
    sanitized: str,
    config: PinConfiguration,
    direction: Direction,
    kerning: float = DEFAULT_KERNING,
) -> Tuple[SlotDescriptor, ...]:
    """Build descriptors with a throwaway builder."""
    return SegmentModelBuilder(kerning).build(sanitized, config, direction)
