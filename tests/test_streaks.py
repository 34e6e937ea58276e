from datetime import datetime, timedelta, timezone

from prephub.features.achievements.streaks import elapsed_days, update_streak

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


def test_first_quiz_starts_streak():
    assert update_streak(None, 0, NOW) == 1


def test_same_day_keeps_streak():
    assert update_streak(NOW - timedelta(hours=23, minutes=59), 4, NOW) == 4


def test_elapsed_time_not_calendar_date():
    # 23:00 then 01:00 the next morning is still zero whole days apart
    last = datetime(2026, 3, 9, 23, 0, tzinfo=timezone.utc)
    now = datetime(2026, 3, 10, 1, 0, tzinfo=timezone.utc)
    assert elapsed_days(last, now) == 0
    assert update_streak(last, 2, now) == 2


def test_next_day_extends_streak():
    assert update_streak(NOW - timedelta(days=1), 4, NOW) == 5
    assert update_streak(NOW - timedelta(hours=47), 4, NOW) == 5


def test_gap_resets_streak():
    assert update_streak(NOW - timedelta(days=2), 9, NOW) == 1
    assert update_streak(NOW - timedelta(days=30), 9, NOW) == 1


def test_clock_skew_resets_streak():
    assert elapsed_days(NOW + timedelta(hours=1), NOW) == -1
    assert update_streak(NOW + timedelta(hours=1), 6, NOW) == 1


def test_naive_dates_are_read_as_utc():
    last = (NOW - timedelta(days=1)).replace(tzinfo=None)
    assert update_streak(last, 1, NOW) == 2
