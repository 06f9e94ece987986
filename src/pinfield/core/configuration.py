"""
Pin field configuration: slot count, accepted alphabet and placeholder token.
"""
from typing import FrozenSet, Iterable

from pinfield.utils.validators import (
    validate_slot_count, validate_valid_characters, validate_token,
)

NO_BREAK_SPACE = "\u00a0"


class ConfigurationError(ValueError):
    """Raised when a configuration value violates its invariants."""


class PinConfiguration:
    """
    Validated slot count / alphabet / token triple.

    Every setter re-validates all three values and raises ConfigurationError
    on the spot; a rejected assignment leaves the previous values untouched.
    """

    def __init__(
        self,
        slot_count: int = 4,
        valid_characters: Iterable[str] = "0123456789",
        token: str = "•",
    ):
        self._slot_count = 0
        self._valid_characters = ""
        self._valid_set: FrozenSet[str] = frozenset()
        self._token = ""
        self._assign(slot_count, valid_characters, token)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def slot_count(self) -> int:
        return self._slot_count

    @property
    def valid_characters(self) -> str:
        """Accepted characters, in the order they were given."""
        return self._valid_characters

    @property
    def valid_set(self) -> FrozenSet[str]:
        return self._valid_set

    @property
    def token(self) -> str:
        return self._token

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_slot_count(self, slot_count: int) -> None:
        self._assign(slot_count, self._valid_characters, self._token)

    def set_valid_characters(self, valid_characters: Iterable[str]) -> None:
        self._assign(self._slot_count, valid_characters, self._token)

    def set_token(self, token: str) -> None:
        self._assign(self._slot_count, self._valid_characters, token)

    def copy(self, **changes) -> "PinConfiguration":
        """Return a new configuration with some values replaced."""
        return PinConfiguration(
            slot_count=changes.get('slot_count', self._slot_count),
            valid_characters=changes.get('valid_characters', self._valid_characters),
            token=changes.get('token', self._token),
        )

    def _assign(self, slot_count, valid_characters, token) -> None:
        ok, message = validate_slot_count(slot_count)
        if not ok:
            raise ConfigurationError(message)

        if isinstance(valid_characters, str):
            characters = valid_characters
        else:
            characters = None if valid_characters is None else list(valid_characters)
        ok, message = validate_valid_characters(characters)
        if not ok:
            raise ConfigurationError(message)
        # Keep first-seen order, drop duplicates
        ordered = "".join(dict.fromkeys(characters))

        # A plain space would collapse in the rendered row
        if token == " ":
            token = NO_BREAK_SPACE
        ok, message = validate_token(token, ordered)
        if not ok:
            raise ConfigurationError(message)

        self._slot_count = slot_count
        self._valid_characters = ordered
        self._valid_set = frozenset(ordered)
        self._token = token

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, PinConfiguration):
            return NotImplemented
        return (
            self._slot_count == other._slot_count
            and self._valid_set == other._valid_set
            and self._token == other._token
        )

    # Mutable through the setters, so never usable as a dict or set key
    __hash__ = None

    def __repr__(self):
        return (
            f"PinConfiguration(slot_count={self._slot_count}, "
            f"valid_characters={self._valid_characters!r}, token={self._token!r})"
        )
