"""
Validation utilities for pin field configuration values and entered codes.
"""
from typing import Iterable, Tuple


def validate_slot_count(slot_count: int) -> Tuple[bool, str]:
    """
    Validate the number of character slots.

    Args:
        slot_count: Number of slots in the code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(slot_count, bool) or not isinstance(slot_count, int):
        return False, "Number of characters must be an integer"

    if slot_count < 1:
        return False, "Number of characters must be >= 1"

    return True, ""


def validate_valid_characters(valid_characters: Iterable[str]) -> Tuple[bool, str]:
    """
    Validate the alphabet of accepted characters.

    Args:
        valid_characters: String or iterable of single characters

    Returns:
        Tuple of (is_valid, error_message)
    """
    if valid_characters is None:
        return False, "There must be at least 1 valid character"

    characters = list(valid_characters)
    if not characters:
        return False, "There must be at least 1 valid character"

    for char in characters:
        if not isinstance(char, str) or len(char) != 1:
            return False, f"Valid characters must be single characters, got {char!r}"

    return True, ""


def validate_token(token: str, valid_characters: Iterable[str]) -> Tuple[bool, str]:
    """
    Validate the placeholder token against the alphabet.

    Args:
        token: Placeholder character shown in empty slots
        valid_characters: Accepted characters

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(token, str) or len(token) != 1:
        return False, f"Token must be a single character, got {token!r}"

    if token in set(valid_characters):
        return False, f"Valid characters can't contain token \"{token}\""

    return True, ""


def validate_code(code: str, config) -> Tuple[bool, str]:
    """
    Validate a finished code against a configuration.

    Args:
        code: Code string to check
        config: PinConfiguration the code was entered with

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code:
        return False, "Code is required"

    invalid = [c for c in code if c not in config.valid_set]
    if invalid:
        return False, f"Code contains invalid characters: {''.join(invalid)}"

    if len(code) != config.slot_count:
        return False, f"Code must be exactly {config.slot_count} characters"

    return True, ""
