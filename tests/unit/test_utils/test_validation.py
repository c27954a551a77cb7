"""
Unit tests for input validation helpers
"""

import pytest

from utils.validation import QueryValidator, DataValidator
from utils.exceptions import ValidationError


@pytest.mark.unit
class TestQueryValidator:

    @pytest.mark.parametrize("value,expected", [
        ("12", 12),
        (" 7", 7),
        ("2.7", 2),
        ("3abc", 3),
        ("-4", -4),
        (5, 5),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ])
    def test_parse_int(self, value, expected):
        assert QueryValidator.parse_int(value) == expected

    @pytest.mark.parametrize("value,expected", [("3", 3), ("0", 11), ("-1", 11), ("x", 11), (None, 11)])
    def test_positive_int(self, value, expected):
        assert QueryValidator.positive_int(value, 11) == expected

    def test_parse_int_oversized_digit_string(self):
        assert QueryValidator.parse_int("9" * 5000) is None
        assert QueryValidator.positive_int("9" * 5000, 11) == 11


@pytest.mark.unit
class TestDataValidator:

    def test_valid_quote_passes(self):
        DataValidator.validate_new_quote({"text": "t", "author": "a"})

    def test_missing_fields_named(self):
        with pytest.raises(ValidationError) as exc_info:
            DataValidator.validate_new_quote({"text": ""})
        assert exc_info.value.context["missing_fields"] == ["text", "author"]
        assert exc_info.value.status_code == 400
