from datetime import datetime

import pytest

from storefront.utils.errors import ValidationError
from storefront.utils.validators import (
    extract_youtube_id, parse_bool, parse_datetime, parse_non_negative_int,
    parse_trimmed_string, validate_mobile_number, youtube_thumbnail_url
)


def test_extract_youtube_id():
    assert extract_youtube_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_youtube_id("https://www.youtube.com/v/dQw4w9WgXcQ?fs=1") == "dQw4w9WgXcQ"
    assert extract_youtube_id("https://www.youtube.com/watch?v=short") is None
    assert extract_youtube_id("https://example.com/no-id") is None
    assert extract_youtube_id("") is None


def test_youtube_thumbnail_url():
    assert youtube_thumbnail_url("abc") == "https://img.youtube.com/vi/abc/maxresdefault.jpg"


def test_validate_mobile_number():
    assert validate_mobile_number("9876543210")
    assert not validate_mobile_number("98765 43210")
    assert not validate_mobile_number("987654321")
    assert not validate_mobile_number(None)


def test_parse_bool():
    assert parse_bool(True, "flag") is True
    assert parse_bool("false", "flag") is False
    with pytest.raises(ValidationError):
        parse_bool("yes", "flag")


def test_parse_non_negative_int():
    assert parse_non_negative_int("4", "n") == 4
    assert parse_non_negative_int(2.0, "n") == 2
    for bad in (-1, 1.5, True, "x", None):
        with pytest.raises(ValidationError):
            parse_non_negative_int(bad, "n")


def test_parse_datetime_normalises_to_naive_utc():
    assert parse_datetime("2026-05-01T10:00:00Z", "d") == datetime(2026, 5, 1, 10, 0)
    assert parse_datetime("2026-05-01T15:30:00+05:30", "d") == datetime(2026, 5, 1, 10, 0)
    assert parse_datetime("", "d") is None
    with pytest.raises(ValidationError, match="d must be an ISO-8601 date"):
        parse_datetime("tomorrow", "d")


def test_parse_trimmed_string():
    assert parse_trimmed_string("  hi ", "s") == "hi"
    assert parse_trimmed_string(None, "s") is None
    with pytest.raises(ValidationError, match="s is required"):
        parse_trimmed_string("   ", "s", required=True)
    with pytest.raises(ValidationError, match="cannot exceed 3 characters"):
        parse_trimmed_string("abcd", "s", max_length=3)
