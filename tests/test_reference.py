"""Tests for entry reference parsing."""

from datetime import date, datetime

import pytest

from hatena_blog.core.reference import (
    extract_entry_id,
    is_date_based_reference,
    is_entry_id,
    parse_search_target,
)
from hatena_blog.errors import InvalidReferenceError


def test_parse_search_target_from_date_url():
    target = parse_search_target("https://someone.hatenadiary.com/entry/2024/01/01/123456")

    assert target.date == date(2024, 1, 1)
    assert target.time_of_day == 12 * 3600 + 34 * 60 + 56
    assert target.raw_time_digits == "123456"
    assert target.exact_path == "/entry/2024/01/01/123456"
    assert target.apparent_datetime == datetime(2024, 1, 1, 12, 34, 56)


@pytest.mark.parametrize(
    ("digits", "expected"),
    [
        ("1234", datetime(2024, 1, 1, 12, 34, 0)),
        ("12", datetime(2024, 1, 1, 12, 0, 0)),
        ("1234567890", datetime(2024, 1, 1, 12, 34, 56)),
    ],
)
def test_short_and_long_time_digits(digits, expected):
    target = parse_search_target(f"https://someone.hatenadiary.com/entry/2024/01/01/{digits}")
    assert target.apparent_datetime == expected
    assert target.raw_time_digits == digits


@pytest.mark.parametrize(
    "url",
    [
        "https://someone.hatenadiary.com/entry/2024/13/01/123456",
        "https://someone.hatenadiary.com/entry/2024/02/30/123456",
        "https://someone.hatenadiary.com/entry/2024/01/01/256000",
        "https://someone.hatenadiary.com/entry/20240101/1234567890",
    ],
)
def test_invalid_date_references(url):
    with pytest.raises(InvalidReferenceError):
        parse_search_target(url)


def test_reference_kinds():
    assert is_entry_id("13574176438046791234")
    assert not is_entry_id("2024/01/01/123456")
    assert is_date_based_reference("https://someone.hatenadiary.com/entry/2024/01/01/123456")
    assert not is_date_based_reference("https://someone.hatenadiary.com/entry/20240101/1234567890")


def test_extract_entry_id_joins_path_after_entry():
    assert (
        extract_entry_id("https://someone.hatenadiary.com/entry/20240101/1234567890")
        == "20240101/1234567890"
    )


def test_extract_entry_id_rejects_urls_without_entry_segment():
    with pytest.raises(InvalidReferenceError, match="Invalid entry URL"):
        extract_entry_id("https://someone.hatenadiary.com/invalid/path")
