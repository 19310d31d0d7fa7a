"""
Mood history routes for charts, stats and the calendar view.
"""
from datetime import date, tzinfo
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
import pytz
from moodjourney.core.config import settings
from moodjourney.db.session import get_db
from moodjourney.models.user import User
from moodjourney.schemas.history import TimeRange, HistorySummary, CalendarDay, CalendarMonth
from moodjourney.api.dependencies import get_current_user
from moodjourney.services.mood_entry_service import get_mood_entries
from moodjourney.services.history_service import (
    build_history_summary, build_calendar_month, mood_for_day, resolve_timezone
)

router = APIRouter(prefix="/history", tags=["history"])


def get_viewer_timezone(tz: str = Query(None, description="IANA time zone, e.g. Europe/Berlin")) -> tzinfo:
    """Viewer's time zone for calendar-day grouping."""
    try:
        return resolve_timezone(tz or settings.DEFAULT_TIMEZONE)
    except pytz.UnknownTimeZoneError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown time zone: {tz}"
        )


@router.get("", response_model=HistorySummary)
async def get_history(
    range: TimeRange = Query(TimeRange.MONTH),
    tz: tzinfo = Depends(get_viewer_timezone),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Chart points, average and trend for the selected range."""
    entries = get_mood_entries(current_user.id, db)
    return build_history_summary(entries, range, tz=tz)


@router.get("/calendar/day/{day}", response_model=CalendarDay)
async def get_calendar_day(
    day: date,
    tz: tzinfo = Depends(get_viewer_timezone),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Most recent mood recorded on a calendar day."""
    entries = get_mood_entries(current_user.id, db)
    mood = mood_for_day(entries, day, tz)
    if mood is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No mood entry for this day"
        )
    return mood


@router.get("/calendar/{year}/{month}", response_model=CalendarMonth)
async def get_calendar_month(
    year: int,
    month: int,
    tz: tzinfo = Depends(get_viewer_timezone),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Month grid (Sunday first) with the mood of each day."""
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid year or month"
        )
    entries = get_mood_entries(current_user.id, db)
    return build_calendar_month(entries, year, month, tz)
