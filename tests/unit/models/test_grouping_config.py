"""Test the grouping configuration model and presets."""
import pytest
from pydantic import ValidationError

from digit_group.errors import DigitGroupError, UnknownPresetError
from digit_group.models.grouping import GROUPING_PRESETS, GroupingConfig, get_preset


class TestGroupingConfig:
    def test_defaults_are_commas(self, commas_config):
        assert commas_config.decimal_mark == "."
        assert commas_config.grouping_delimiter == ","
        assert commas_config.first_group_size == 3
        assert commas_config.group_size == 3
        assert commas_config.group_fractional_part is False

    def test_apply(self, commas_config):
        assert commas_config.apply("-123456789.123456") == "-123,456,789.123456"

    def test_apply_si(self, si_config):
        assert si_config.apply("123456789.01234") == "123 456 789.012 34"

    def test_empty_delimiter_allowed(self):
        config = GroupingConfig(grouping_delimiter="")
        assert config.apply("1234567.5") == "1234567.5"

    def test_zero_group_size_rejected(self):
        with pytest.raises(ValidationError):
            GroupingConfig(group_size=0)

    def test_zero_first_group_size_rejected(self):
        with pytest.raises(ValidationError):
            GroupingConfig(first_group_size=0)

    def test_string_size_rejected(self):
        with pytest.raises(ValidationError):
            GroupingConfig(group_size="3")

    def test_empty_decimal_mark_rejected(self):
        with pytest.raises(ValidationError):
            GroupingConfig(decimal_mark="")

    def test_long_delimiter_rejected(self):
        with pytest.raises(ValidationError):
            GroupingConfig(grouping_delimiter=",,")

    def test_frozen(self, commas_config):
        with pytest.raises(ValidationError):
            commas_config.group_size = 2


class TestPresets:
    def test_registered_names(self):
        assert sorted(GROUPING_PRESETS) == ["chinese", "commas", "indian", "si"]

    def test_commas(self):
        assert get_preset("commas").apply("123456789") == "123,456,789"

    def test_si(self):
        assert get_preset("si").apply("-123456789.1234567") == "-123 456 789.123 456 7"

    def test_indian(self):
        assert get_preset("indian").apply("1234567.89") == "12,34,567.89"

    def test_chinese(self):
        assert get_preset("chinese").apply("1234567.89") == "123,4567.89"

    def test_case_insensitive(self):
        assert get_preset("SI") == get_preset("si")

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError, match="available: chinese, commas, indian, si"):
            get_preset("swiss")

    def test_unknown_preset_error_types(self):
        with pytest.raises(KeyError):
            get_preset("swiss")
        with pytest.raises(DigitGroupError):
            get_preset("swiss")
