from datetime import timedelta

import pytest

from src.shared.utils.strings import parse_duration, slugify


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Books", "books"),
        ("Mobile Phones & Tablets", "mobile-phones-tablets"),
        ("  Kids' Toys  ", "kids-toys"),
        ("USB-C Cables", "usb-c-cables"),
    ],
)
def test_slugify(raw, expected):
    assert slugify(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7d", timedelta(days=7)),
        ("12h", timedelta(hours=12)),
        ("30m", timedelta(minutes=30)),
        ("45s", timedelta(seconds=45)),
        ("90", timedelta(seconds=90)),
        (3600, timedelta(hours=1)),
    ],
)
def test_parse_duration(raw, expected):
    assert parse_duration(raw) == expected


@pytest.mark.parametrize("raw", ["", "7w", "d7", "-1d", 0])
def test_parse_duration_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_duration(raw)
