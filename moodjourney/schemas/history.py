"""
Pydantic schemas for mood history charts, stats and calendar views.
"""
import enum
from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime


class TimeRange(str, enum.Enum):
    """History window selector."""
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class MoodTrend(str, enum.Enum):
    """Direction of the last 7 scores against the 7 before them."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class ChartPoint(BaseModel):
    """One charted mood entry."""
    date: datetime
    mood_score: int
    weather: str
    formatted_date: str


class HistorySummary(BaseModel):
    """Chart data plus the stats panel for one time range."""
    range: TimeRange
    points: List[ChartPoint]
    average: float
    average_display: str
    trend: MoodTrend
    entry_count: int


class CalendarDay(BaseModel):
    """Mood shown on a calendar cell."""
    date: date
    mood_score: int
    emoji: str
    mood_text: str


class CalendarCell(BaseModel):
    """Grid cell; day is None for leading blanks."""
    day: Optional[date] = None
    mood: Optional[CalendarDay] = None


class CalendarMonth(BaseModel):
    """Seven-column month grid starting on Sunday."""
    year: int
    month: int
    cells: List[CalendarCell]
