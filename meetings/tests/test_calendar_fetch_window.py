from datetime import datetime, timedelta, timezone

import pytest

from meetings.services.calendar.google_calendar_service import build_fetch_window


def test_build_fetch_window_spans_horizon() -> None:
    now = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    time_min, time_max = build_fetch_window(now, 30)
    assert time_min == "2024-01-01T12:00:00+00:00"
    assert time_max == "2024-01-31T12:00:00+00:00"
    assert datetime.fromisoformat(time_max) - datetime.fromisoformat(time_min) == timedelta(days=30)


@pytest.mark.parametrize("horizon", [0, -5])
def test_build_fetch_window_rejects_non_positive_horizon(horizon) -> None:
    with pytest.raises(ValueError, match="horizon"):
        build_fetch_window(datetime.now(tz=timezone.utc), horizon)


def test_build_fetch_window_keeps_non_utc_offset() -> None:
    now = datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=1)))
    time_min, time_max = build_fetch_window(now, 1)
    assert time_min == "2024-01-01T12:00:00+01:00"
    assert time_max == "2024-01-02T12:00:00+01:00"


def test_build_fetch_window_rejects_naive_now() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        build_fetch_window(datetime(2024, 1, 1, 12), 30)
