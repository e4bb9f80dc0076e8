from datetime import datetime, timedelta, timezone

import pytest

from sensor_gateway.utils import (
    EARLIEST_DATE,
    UnsupportedScaleError,
    extract_measure,
    parse_positive_int,
    scale_to_seconds,
    seconds_to_date,
)


@pytest.mark.parametrize("value,scale,expected", [
    (2, "hours", 7200),
    (3, "mins", 180),
    (45, "secs", 45),
])
def test_scale_to_seconds(value, scale, expected):
    assert scale_to_seconds(value, scale) == expected


def test_scale_to_seconds_unknown_scale():
    with pytest.raises(UnsupportedScaleError):
        scale_to_seconds(5, "weeks")


def test_seconds_to_date():
    before = datetime.now(timezone.utc)
    cutoff = seconds_to_date(3600)
    after = datetime.now(timezone.utc)

    assert before - timedelta(seconds=3600) <= cutoff <= after - timedelta(seconds=3600)
    assert cutoff.tzinfo is not None


@pytest.mark.parametrize("raw,expected", [
    ("1", 1),
    ("42", 42),
    ("0", None),
    ("-3", None),
    ("abc", None),
    ("2.5", None),
    ("", None),
    (None, None),
])
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw) == expected


@pytest.mark.parametrize("payload,expected", [
    ({"measure": "23.5"}, "23.5"),
    ({"measure": 7}, 7),
    ({"measure": ""}, None),
    ({"measure": 0}, None),
    ({"measure": False}, None),
    ({"measure": {"a": 1}}, None),
    ({}, None),
    ("23.5", None),
    (None, None),
])
def test_extract_measure(payload, expected):
    assert extract_measure(payload) == expected


@pytest.mark.parametrize("seconds", [10 ** 11 * 3600, 10 ** 20])
def test_seconds_to_date_clamps_huge_windows(seconds):
    assert seconds_to_date(seconds) == EARLIEST_DATE
