"""Tests for pinfield.core.configuration.PinConfiguration."""

import pytest

from pinfield.core.configuration import ConfigurationError, PinConfiguration, NO_BREAK_SPACE


class TestDefaults:

    def test_defaults_match_numeric_four_digit_code(self):
        config = PinConfiguration()
        assert config.slot_count == 4
        assert config.valid_characters == "0123456789"
        assert config.token == "•"

    def test_valid_set_is_frozenset_of_characters(self):
        config = PinConfiguration(valid_characters="abc")
        assert config.valid_set == frozenset("abc")

    def test_iterable_alphabet_accepted(self):
        config = PinConfiguration(valid_characters=["x", "y"])
        assert config.valid_characters == "xy"

    def test_duplicate_characters_collapsed_in_order(self):
        config = PinConfiguration(valid_characters="abca")
        assert config.valid_characters == "abc"


class TestRejection:

    def test_token_inside_alphabet_rejected(self):
        with pytest.raises(ConfigurationError):
            PinConfiguration(valid_characters="0123456789", token="5")

    @pytest.mark.parametrize("count", [0, -1])
    def test_slot_count_below_one_rejected(self, count):
        with pytest.raises(ConfigurationError, match=">= 1"):
            PinConfiguration(slot_count=count)

    def test_non_integer_slot_count_rejected(self):
        with pytest.raises(ConfigurationError):
            PinConfiguration(slot_count=2.5)

    def test_empty_alphabet_rejected(self):
        with pytest.raises(ConfigurationError, match="at least 1"):
            PinConfiguration(valid_characters="")

    def test_multi_character_token_rejected(self):
        with pytest.raises(ConfigurationError):
            PinConfiguration(token="**")

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestSetters:

    def test_set_slot_count(self):
        config = PinConfiguration()
        config.set_slot_count(6)
        assert config.slot_count == 6

    def test_set_slot_count_invalid_keeps_previous(self):
        config = PinConfiguration(slot_count=5)
        with pytest.raises(ConfigurationError):
            config.set_slot_count(0)
        assert config.slot_count == 5

    def test_set_valid_characters_revalidates_token(self):
        config = PinConfiguration(valid_characters="0123456789", token="x")
        with pytest.raises(ConfigurationError):
            config.set_valid_characters("xyz")
        assert config.valid_characters == "0123456789"

    def test_set_token_revalidates_against_alphabet(self):
        config = PinConfiguration()
        with pytest.raises(ConfigurationError):
            config.set_token("7")
        assert config.token == "•"

    def test_space_token_stored_as_no_break_space(self):
        config = PinConfiguration()
        config.set_token(" ")
        assert config.token == NO_BREAK_SPACE

    def test_copy_with_changes(self):
        config = PinConfiguration(slot_count=4)
        other = config.copy(slot_count=8)
        assert other.slot_count == 8
        assert config.slot_count == 4
        assert other.valid_set == config.valid_set


def test_equality_ignores_alphabet_order():
    assert PinConfiguration(valid_characters="ab") == PinConfiguration(valid_characters="ba")


def test_configuration_is_unhashable():
    with pytest.raises(TypeError):
        hash(PinConfiguration())
    with pytest.raises(TypeError):
        {PinConfiguration(): "key"}
