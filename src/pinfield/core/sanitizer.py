"""
Input sanitizing: keep accepted characters, truncate to the slot count.
"""
from typing import Iterable

from pinfield.core.configuration import PinConfiguration


def sanitize(raw: Iterable[str], config: PinConfiguration) -> str:
    """
    Filter raw input against the configured alphabet and length.

    Characters outside ``config.valid_set`` are dropped, relative order is
    preserved, and anything past ``config.slot_count`` accepted characters is
    discarded. Neither case is an error.

    Args:
        raw: Raw text (or any iterable of characters) from the input buffer
        config: Active configuration

    Returns:
        Sanitized code text
    """
    if not raw:
        return ""

    valid = config.valid_set
    kept = []
    for char in raw:
        if char in valid:
            kept.append(char)
            if len(kept) == config.slot_count:
                break
    return "".join(kept)
