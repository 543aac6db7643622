import pytest

from validation_builder.core.utils import (
    format_allowed_values,
    format_bound,
    parse_allowed_values,
    parse_bound,
)


class TestAllowedValues:
    def test_split_trim_and_drop_empties(self):
        assert parse_allowed_values(" a, b ,, c ,") == ("a", "b", "c")

    def test_blank_input(self):
        assert parse_allowed_values("") == ()
        assert parse_allowed_values(None) == ()
        assert parse_allowed_values(" , ") == ()

    def test_format(self):
        assert format_allowed_values(("a", "b")) == "a, b"
        assert format_allowed_values(None) == ""


class TestBounds:
    def test_blank_means_unset(self):
        assert parse_bound("") is None
        assert parse_bound("   ") is None
        assert parse_bound(None) is None

    def test_zero_is_kept(self):
        assert parse_bound("0") == 0
        assert isinstance(parse_bound("0"), int)

    def test_integer_and_float_literals(self):
        assert parse_bound(" -5 ") == -5
        assert parse_bound("2.5") == 2.5
        assert parse_bound("1e3") == 1000.0
        assert parse_bound("+7") == 7
        assert parse_bound(".5") == 0.5
        assert parse_bound("5.") == 5.0

    @pytest.mark.parametrize("text", ["abc", "1,5", "nan", "inf", "1_000", "\u0661\u0662", "0x10", "1e999", "--1"])
    def test_rejects_non_numbers(self, text):
        with pytest.raises(ValueError):
            parse_bound(text)

    def test_format(self):
        assert format_bound(None) == ""
        assert format_bound(0) == "0"
        assert format_bound(10.0) == "10"
        assert format_bound(0.25) == "0.25"
