"""
Mood entry model for analyzed feelings.
"""
from sqlalchemy import Column, String, Text, ForeignKey, Integer, JSON
from sqlalchemy.orm import relationship
from moodjourney.db.base import BaseModel


class MoodEntry(BaseModel):
    """One analyzed feelings text. Rows are insert-only."""
    __tablename__ = "mood_entries"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mood = Column(String(20), nullable=False)
    emoji = Column(String(16), nullable=False)
    feelings_text = Column(Text, nullable=False)
    weather = Column(String(20), nullable=True)
    theme = Column(String(20), nullable=True)
    message = Column(Text, nullable=False)
    suggested_activities = Column(JSON, nullable=False, default=list)  # Ordered, 4 items

    # Relationships
    user = relationship("User", back_populates="mood_entries")
