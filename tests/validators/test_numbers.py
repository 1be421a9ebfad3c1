"""Tests for numeric parameter parsing"""
import pytest

from app.core.errors import ValidationError
from app.validators.numbers import parse_number


class TestParseNumber:

    @pytest.mark.parametrize("raw, expected", [("10", 10.0), ("2.5", 2.5), ("0", 0.0), ("-3", -3.0)])
    def test_parses_numbers(self, raw, expected):
        assert parse_number(raw, "price") == expected

    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent_values(self, raw):
        assert parse_number(raw, "price") is None

    @pytest.mark.parametrize("raw", ["abc", "1e", "nan", "inf"])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_number(raw, "rating", location="path")

        error = exc_info.value.errors[0]
        assert error.param == "rating"
        assert error.location == "path"
        assert exc_info.value.status_code == 400
