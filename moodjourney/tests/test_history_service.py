"""
Tests for history aggregation: range filter, chart, average, trend, calendar.
"""
from datetime import date, datetime, timedelta
from types import SimpleNamespace
import pytz
from moodjourney.schemas.history import MoodTrend, TimeRange
from moodjourney.services.history_service import (
    filter_by_range, build_chart_data, average_mood, format_average, mood_trend,
    build_history_summary, mood_for_day, calendar_days, build_calendar_month
)

NOW = datetime(2024, 3, 20, 12, 0, tzinfo=pytz.utc)

SCORE_LABELS = {
    1: "terrible", 2: "bad", 3: "poor", 4: "okay", 5: "neutral",
    6: "good", 7: "great", 8: "excellent", 9: "amazing", 10: "perfect",
}


def entry(created_at, mood="great", emoji="😊", weather=None):
    return SimpleNamespace(created_at=created_at, mood=mood, emoji=emoji, weather=weather)


def entries_with_scores(scores, now=NOW):
    """Entries one hour apart, oldest score first, returned newest first."""
    entries = [
        entry(now - timedelta(hours=len(scores) - i), mood=SCORE_LABELS[s])
        for i, s in enumerate(scores)
    ]
    return list(reversed(entries))


def test_week_excludes_eight_day_old_entry():
    old = entry(NOW - timedelta(days=8))
    assert filter_by_range([old], TimeRange.WEEK, NOW) == []
    assert filter_by_range([old], TimeRange.MONTH, NOW) == [old]


def test_cutoff_is_inclusive():
    edge = entry(NOW - timedelta(days=7))
    assert filter_by_range([edge], "week", NOW) == [edge]


def test_year_range_and_unknown_range():
    e = entry(NOW - timedelta(days=200))
    assert filter_by_range([e], "year", NOW) == [e]
    assert filter_by_range([e], "decade", NOW) == []


def test_naive_timestamps_are_utc():
    naive = datetime(2024, 3, 19, 12, 0)
    assert len(filter_by_range([entry(naive)], TimeRange.WEEK, NOW)) == 1


def test_filter_does_not_mutate_input():
    entries = entries_with_scores([1, 2, 3])
    snapshot = list(entries)
    filter_by_range(entries, TimeRange.WEEK, NOW)
    build_chart_data(entries)
    assert entries == snapshot


def test_chart_data_oldest_first():
    entries = [
        entry(NOW - timedelta(days=1), mood="great", weather="sunny"),
        entry(NOW - timedelta(days=2), mood="poor"),
    ]
    points = build_chart_data(entries)
    assert [p.mood_score for p in points] == [3, 7]
    assert points[0].weather == "unknown"
    assert points[1].weather == "sunny"
    assert points[1].formatted_date == "Mar 19"


def test_chart_date_uses_viewer_timezone():
    late = entry(datetime(2024, 3, 20, 2, 0, tzinfo=pytz.utc))
    point = build_chart_data([late], "America/New_York")[0]
    assert point.formatted_date == "Mar 19"


def test_average():
    points = build_chart_data(entries_with_scores([2, 4, 6]))
    assert average_mood(points) == 4.0
    assert format_average(average_mood(points)) == "4.0"


def test_average_display_rounds_half_up():
    points = build_chart_data(entries_with_scores([4, 4, 4, 5]))
    assert average_mood(points) == 4.25
    assert format_average(average_mood(points)) == "4.3"
    assert format_average(4.35) == "4.3"  # 4.35 is stored just below the half


def test_average_empty_is_zero():
    assert average_mood([]) == 0
    assert format_average(0) == "0.0"


def test_unknown_mood_counts_as_five():
    points = build_chart_data([entry(NOW, mood="whatever")])
    assert points[0].mood_score == 5


def test_trend_improving():
    points = build_chart_data(entries_with_scores([2] * 7 + [8] * 7))
    assert mood_trend(points) == MoodTrend.IMPROVING


def test_trend_declining():
    points = build_chart_data(entries_with_scores([8] * 7 + [2] * 7))
    assert mood_trend(points) == MoodTrend.DECLINING


def test_trend_equal_means_stable():
    points = build_chart_data(entries_with_scores([2, 6] + [4] * 12))
    assert mood_trend(points) == MoodTrend.STABLE


def test_trend_needs_seven_points():
    points = build_chart_data(entries_with_scores([1, 10, 1, 10, 1, 10]))
    assert mood_trend(points) == MoodTrend.STABLE


def test_trend_exactly_seven_points_is_stable():
    points = build_chart_data(entries_with_scores([1, 2, 3, 4, 5, 6, 7]))
    assert mood_trend(points) == MoodTrend.STABLE


def test_trend_partial_older_window_is_stable():
    # older window holds 3 points (avg 1), recent 7 (avg 5)
    points = build_chart_data(entries_with_scores([1, 1, 1] + [5] * 7))
    assert mood_trend(points) == MoodTrend.STABLE


def test_trend_thirteen_points_is_stable():
    points = build_chart_data(entries_with_scores([1] * 6 + [9] * 7))
    assert mood_trend(points) == MoodTrend.STABLE


def test_trend_fourteen_points_compares_windows():
    points = build_chart_data(entries_with_scores([9] * 7 + [1] * 7))
    assert mood_trend(points) == MoodTrend.DECLINING


def test_trend_only_uses_last_fourteen():
    # leading 10s fall outside both windows
    points = build_chart_data(entries_with_scores([10] * 5 + [3] * 7 + [4] * 7))
    assert mood_trend(points) == MoodTrend.IMPROVING


def test_history_summary():
    entries = entries_with_scores([2, 4, 6]) + [entry(NOW - timedelta(days=40), mood="perfect")]
    summary = build_history_summary(entries, "month", now=NOW)
    assert summary.range == TimeRange.MONTH
    assert summary.entry_count == 3
    assert summary.average_display == "4.0"
    assert summary.trend == MoodTrend.STABLE


def test_calendar_lookup_returns_most_recent_of_day():
    morning = entry(datetime(2024, 3, 10, 8, 0, tzinfo=pytz.utc), mood="poor", emoji="😔")
    evening = entry(datetime(2024, 3, 10, 20, 0, tzinfo=pytz.utc), mood="great", emoji="😊")
    day = mood_for_day([evening, morning], date(2024, 3, 10))
    assert day.mood_text == "great"
    assert day.mood_score == 7
    assert day.emoji == "😊"


def test_calendar_lookup_missing_day():
    assert mood_for_day([entry(NOW)], date(2024, 1, 1)) is None


def test_calendar_lookup_fallback_emoji():
    e = entry(datetime(2024, 3, 10, 8, 0, tzinfo=pytz.utc), mood="amazing", emoji="")
    assert mood_for_day([e], date(2024, 3, 10)).emoji == "🤩"


def test_calendar_lookup_uses_viewer_timezone():
    e = entry(datetime(2024, 3, 10, 23, 30, tzinfo=pytz.utc))
    assert mood_for_day([e], date(2024, 3, 11), "Asia/Tokyo") is not None
    assert mood_for_day([e], date(2024, 3, 10), "Asia/Tokyo") is None


def test_calendar_days_leading_blanks():
    # 1 September 2024 is a Sunday, 1 March 2024 a Friday
    september = calendar_days(2024, 9)
    assert september[0] == date(2024, 9, 1)
    assert len(september) == 30

    march = calendar_days(2024, 3)
    assert march[:5] == [None] * 5
    assert march[5] == date(2024, 3, 1)
    assert march[-1] == date(2024, 3, 31)
    assert len(march) == 36


def test_calendar_days_leap_february():
    days = calendar_days(2024, 2)
    assert days[-1] == date(2024, 2, 29)


def test_calendar_month_joins_moods():
    e = entry(datetime(2024, 3, 10, 8, 0, tzinfo=pytz.utc), mood="good", emoji="🙂")
    month = build_calendar_month([e], 2024, 3)
    filled = [c for c in month.cells if c.mood is not None]
    assert len(filled) == 1
    assert filled[0].day == date(2024, 3, 10)
    assert month.cells[0].day is None
