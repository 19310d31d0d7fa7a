"""
Mood entry service: persistence boundary for analyzed moods.
"""
from sqlalchemy.orm import Session
from typing import List, Optional
from moodjourney.models.mood_entry import MoodEntry
from moodjourney.schemas.mood import MoodAnalysis


def create_mood_entry(
    user_id: int,
    analysis: MoodAnalysis,
    feelings_text: str,
    weather: Optional[str] = None,
    db: Session = None
) -> MoodEntry:
    """Insert a new mood entry. Errors propagate; the caller rolls back."""
    entry = MoodEntry(
        user_id=user_id,
        mood=analysis.mood,
        emoji=analysis.emoji,
        feelings_text=feelings_text,
        weather=weather,
        theme=analysis.theme,
        message=analysis.message,
        suggested_activities=list(analysis.suggested_activities)
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)

    return entry


def get_mood_entries(user_id: int, db: Session) -> List[MoodEntry]:
    """All entries for a user, newest first."""
    entries = db.query(MoodEntry).filter(
        MoodEntry.user_id == user_id
    ).order_by(MoodEntry.created_at.desc(), MoodEntry.id.desc()).all()

    return entries
