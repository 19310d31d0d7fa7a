"""Models package - Import all models for SQLAlchemy registration."""
from moodjourney.models.user import User
from moodjourney.models.mood_entry import MoodEntry

__all__ = [
    "User",
    "MoodEntry",
]
