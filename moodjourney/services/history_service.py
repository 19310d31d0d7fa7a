"""
Mood history aggregation for charts, stats and the calendar view.

Every function takes the user's entries ordered newest first (as returned
by mood_entry_service.get_mood_entries) and never mutates them.
"""
import calendar
from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Union
import pytz
from moodjourney.schemas.history import (
    TimeRange, MoodTrend, ChartPoint, HistorySummary,
    CalendarDay, CalendarCell, CalendarMonth
)
from moodjourney.services.mood_lexicon import score_of, emoji_for_score

RANGE_DAYS = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.YEAR: 365,
}

TREND_WINDOW = 7


def resolve_timezone(tz: Union[str, tzinfo, None]) -> tzinfo:
    """Accept a tz name, a tzinfo or None (UTC). Unknown names raise pytz.UnknownTimeZoneError."""
    if tz is None:
        return pytz.utc
    if isinstance(tz, str):
        return pytz.timezone(tz)
    return tz


def as_utc(value: datetime) -> datetime:
    """Stored timestamps without tzinfo (e.g. from SQLite) are UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def to_local(value: datetime, tz: tzinfo) -> datetime:
    return as_utc(value).astimezone(tz)


def parse_range(value: Union[str, TimeRange, None]) -> TimeRange:
    """Unknown or missing ranges fall back to month."""
    if isinstance(value, TimeRange):
        return value
    try:
        return TimeRange(value)
    except ValueError:
        return TimeRange.MONTH


def filter_by_range(entries: Sequence, time_range: Union[str, TimeRange, None] = TimeRange.MONTH,
                    now: Optional[datetime] = None) -> List:
    """Keep entries created at or after now minus 7/30/365 days."""
    now = as_utc(now) if now else datetime.now(pytz.utc)
    cutoff = now - timedelta(days=RANGE_DAYS[parse_range(time_range)])
    return [entry for entry in entries if as_utc(entry.created_at) >= cutoff]


def format_chart_date(value: datetime) -> str:
    """Short month and day, e.g. 'Jan 5'."""
    return f"{value.strftime('%b')} {value.day}"


def build_chart_data(entries: Sequence, tz: Union[str, tzinfo, None] = None) -> List[ChartPoint]:
    """Project entries to chart points, oldest first."""
    tz = resolve_timezone(tz)
    points = []
    for entry in reversed(entries):
        local = to_local(entry.created_at, tz)
        points.append(ChartPoint(
            date=as_utc(entry.created_at),
            mood_score=score_of(entry.mood),
            weather=entry.weather or "unknown",
            formatted_date=format_chart_date(local)
        ))
    return points


def _mean(scores: Sequence[int]) -> float:
    return sum(scores) / len(scores)


def average_mood(points: Sequence[ChartPoint]) -> float:
    """Mean score; 0 when there are no points."""
    if not points:
        return 0.0
    return _mean([p.mood_score for p in points])


def format_average(value: float) -> str:
    """One decimal, halves rounded up (4.25 -> '4.3')."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def mood_trend(points: Sequence[ChartPoint]) -> MoodTrend:
    """
    Compare the last 7 scores with the 7 immediately before them.

    Fewer than 7 points, or fewer than 7 before the last 7, is stable.
    """
    if len(points) < TREND_WINDOW:
        return MoodTrend.STABLE

    scores = [p.mood_score for p in points]
    recent = scores[-TREND_WINDOW:]
    older = scores[-2 * TREND_WINDOW:-TREND_WINDOW]
    if len(older) < TREND_WINDOW:
        return MoodTrend.STABLE

    recent_avg = _mean(recent)
    older_avg = _mean(older)
    if recent_avg > older_avg:
        return MoodTrend.IMPROVING
    if recent_avg < older_avg:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE


def build_history_summary(entries: Sequence, time_range: Union[str, TimeRange, None] = TimeRange.MONTH,
                          now: Optional[datetime] = None,
                          tz: Union[str, tzinfo, None] = None) -> HistorySummary:
    """Chart points and stats for one time range."""
    time_range = parse_range(time_range)
    filtered = filter_by_range(entries, time_range, now)
    points = build_chart_data(filtered, tz)
    average = average_mood(points)
    return HistorySummary(
        range=time_range,
        points=points,
        average=average,
        average_display=format_average(average),
        trend=mood_trend(points),
        entry_count=len(filtered)
    )


def mood_for_day(entries: Sequence, day: date, tz: Union[str, tzinfo, None] = None) -> Optional[CalendarDay]:
    """First entry (newest first) created on `day` in the viewer's time zone."""
    tz = resolve_timezone(tz)
    for entry in entries:
        if to_local(entry.created_at, tz).date() == day:
            score = score_of(entry.mood)
            return CalendarDay(
                date=day,
                mood_score=score,
                emoji=entry.emoji or emoji_for_score(score),
                mood_text=entry.mood
            )
    return None


def calendar_days(year: int, month: int) -> List[Optional[date]]:
    """Leading blanks for the first weekday (Sunday = 0), then each day of the month."""
    first_day = date(year, month, 1)
    leading = (first_day.weekday() + 1) % 7  # date.weekday() has Monday = 0
    days_in_month = calendar.monthrange(year, month)[1]
    days: List[Optional[date]] = [None] * leading
    days.extend(date(year, month, d) for d in range(1, days_in_month + 1))
    return days


def build_calendar_month(entries: Sequence, year: int, month: int,
                         tz: Union[str, tzinfo, None] = None) -> CalendarMonth:
    tz = resolve_timezone(tz)
    cells = []
    for day in calendar_days(year, month):
        if day is None:
            cells.append(CalendarCell())
        else:
            cells.append(CalendarCell(day=day, mood=mood_for_day(entries, day, tz)))
    return CalendarMonth(year=year, month=month, cells=cells)
