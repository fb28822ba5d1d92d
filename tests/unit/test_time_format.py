"""Tests for relative time formatting."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.utils.time_format import format_relative_time

NOW = datetime(2024, 6, 1, 12, 0)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=30), "just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=5, seconds=20), "5 minutes ago"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(hours=3, minutes=59), "3 hours ago"),
        (timedelta(days=2, hours=5), "2 days ago"),
    ],
)
def test_format_relative_time_past(delta, expected) -> None:
    assert format_relative_time(NOW - delta, NOW) == expected


def test_format_relative_time_future() -> None:
    assert format_relative_time(NOW + timedelta(minutes=10), NOW) == "in 10 minutes"
    assert format_relative_time(NOW + timedelta(seconds=5), NOW) == "in less than a minute"
