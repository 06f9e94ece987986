"""
RTL paste correction.
"""
from typing import Optional

from pinfield.core.types import Direction


def maybe_reverse_for_paste(
    current_raw: str,
    clipboard_snapshot: Optional[str],
    direction: Direction,
) -> str:
    """
    Reverse freshly pasted text under RTL so it reads in slot order.

    "Freshly pasted" is approximated by the buffer being equal to the
    clipboard. Typed text that happens to match the clipboard is reversed
    as well; the buffer alone cannot tell the two apart.

    Args:
        current_raw: Current contents of the text buffer
        clipboard_snapshot: Clipboard text, or None if it holds no text
        direction: Layout direction

    Returns:
        Adjusted raw text
    """
    if direction is Direction.RTL and clipboard_snapshot is not None \
            and clipboard_snapshot == current_raw:
        return current_raw[::-1]
    return current_raw
