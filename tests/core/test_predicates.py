"""
Tests for the built-in rule predicates.
"""

from datetime import datetime

import pytest

from fieldrules.core.exceptions import RuleParameterError
from fieldrules.core.predicates import (
    BUILTIN_PREDICATES,
    as_text,
    date,
    email,
    integer,
    json_text,
    max_length,
    min_length,
    regex,
    required,
    url,
)


def test_builtin_names():
    """Test the fixed set of built-in rule names."""
    assert set(BUILTIN_PREDICATES) == {
        "required",
        "email",
        "max",
        "min",
        "json",
        "url",
        "date",
        "integer",
        "regex",
    }


def test_builtin_table_is_read_only():
    """Test the built-in table cannot be modified."""
    with pytest.raises(TypeError):
        BUILTIN_PREDICATES["custom"] = required  # type: ignore[index]


def test_as_text():
    """Test scalar values render to the text the predicates check."""
    assert as_text("abc") == "abc"
    assert as_text(12345) == "12345"
    assert as_text(True) == "true"


def test_required():
    """Test required passes on any non-empty text."""
    assert required("x", ())
    assert required(" ", ())
    assert not required("", ())


@pytest.mark.parametrize("value", ["user@example.com", "first.last@sub.example.org", "a@[10.0.0.1]"])
def test_email_valid(value):
    """Test well-formed addresses pass."""
    assert email(value, ())


@pytest.mark.parametrize("value", ["not-an-email", "user@", "@example.com", "user@example", "a b@example.com"])
def test_email_invalid(value):
    """Test malformed addresses fail."""
    assert not email(value, ())


def test_max_boundary():
    """Test max passes up to and including the limit."""
    assert max_length("abcde", ("5",))
    assert max_length("abcd", ("5",))
    assert not max_length("abcdef", ("5",))


def test_min_boundary():
    """Test min passes from the limit upwards."""
    assert min_length("abcde", ("5",))
    assert min_length("abcdef", ("5",))
    assert not min_length("abcd", ("5",))


def test_length_rules_use_text_length_of_numbers():
    """Test numeric values are measured by their rendered length."""
    assert max_length(12345, ("5",))
    assert not max_length(123456, ("5",))


def test_length_rules_with_unusable_params_fail():
    """Test missing, empty and non-numeric lengths fail the value instead of raising."""
    assert not max_length("abc", ())
    assert not min_length("abc", ())
    assert not max_length("abc", ("",))
    assert min_length("abc", ("",))
    assert not max_length("abc", ("ten",))
    assert not min_length("abc", ("ten",))


def test_json():
    """Test JSON syntax checking."""
    assert json_text('{"a": [1, 2, 3]}', ())
    assert json_text("42", ())
    assert not json_text("{a: 1}", ())
    assert not json_text("{'a': 1}", ())


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "[Infinity]", '{"a": NaN}'])
def test_json_rejects_non_standard_constants(value):
    """Test NaN and Infinity literals are not accepted as JSON."""
    assert not json_text(value, ())


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com",
        "http://www.example.org/path/to/page",
        "https://example.com/search?q=term&page=2",
        "example.co.uk",
        "ftp://files.example.net/pub",
        "http://192.168.1.1:8080/admin",
    ],
)
def test_url_valid(value):
    """Test URL-shaped values pass."""
    assert url(value, ())


@pytest.mark.parametrize("value", ["not a url", "example", "http://"])
def test_url_invalid(value):
    """Test values without a host fail."""
    assert not url(value, ())


@pytest.mark.parametrize(
    "value",
    [
        "2024-01-15",
        "2024-01-15T10:30:00",
        "2024-01-15T10:30:00+02:00",
        "Tue, 15 Nov 1994 08:12:31 GMT",
        "01/15/2024",
        "January 15, 2024",
        "15 Jan 2024",
    ],
)
def test_date_valid(value):
    """Test common date layouts pass."""
    assert date(value, ())


@pytest.mark.parametrize("value", ["not a date", "2024-13-01", "2024-02-30", "   "])
def test_date_invalid(value):
    """Test text that is not a calendar date fails."""
    assert not date(value, ())


def test_date_accepts_datetime_objects():
    """Test datetime values pass without parsing."""
    assert date(datetime(2024, 1, 15), ())


@pytest.mark.parametrize("value", ["0", "42", "-7", "10.0", "10.00", "100", 15])
def test_integer_valid(value):
    """Test integer literals pass, including zero fractions."""
    assert integer(value, ())


@pytest.mark.parametrize("value", ["12.5", "abc", "1e3", "--1", "1.", " 1"])
def test_integer_invalid(value):
    """Test non-integer text fails."""
    assert not integer(value, ())


def test_regex_uses_params_as_pattern():
    """Test the rule parameters form the pattern."""
    assert regex("abc", ("^[a-z]+$",))
    assert not regex("abc1", ("^[a-z]+$",))


def test_regex_rejoins_colons():
    """Test a pattern split on colons by the parser is rejoined."""
    assert regex("12:30", ("^\\d{2}", "\\d{2}$"))
    assert not regex("1230", ("^\\d{2}", "\\d{2}$"))


def test_regex_searches_unanchored():
    """Test unanchored patterns may match anywhere."""
    assert regex("order-123", ("\\d+",))


def test_regex_requires_valid_pattern():
    """Test missing or broken patterns raise."""
    with pytest.raises(RuleParameterError, match="requires a pattern"):
        regex("abc", ())
    with pytest.raises(RuleParameterError, match="Invalid regular expression"):
        regex("abc", ("[a-",))
