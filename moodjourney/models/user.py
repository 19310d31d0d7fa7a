"""
User model for authentication and profile data.
"""
from sqlalchemy import Column, String, Boolean, Date, Text
from sqlalchemy.orm import relationship
from moodjourney.db.base import BaseModel


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "users"

    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Profile
    full_name = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String(100), nullable=True)
    website = Column(String(255), nullable=True)
    avatar_url = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=True)

    # Relationships
    mood_entries = relationship("MoodEntry", back_populates="user", cascade="all, delete-orphan")
