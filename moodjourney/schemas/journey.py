"""
Pydantic schemas for the daily journey check-in.
"""
import enum
from pydantic import BaseModel, Field
from typing import Optional
from moodjourney.schemas.mood import WeatherTag


class JourneyMood(str, enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    OKAY = "okay"
    POOR = "poor"
    TERRIBLE = "terrible"


class JourneyPartner(str, enum.Enum):
    """Who the day was spent with."""
    ALONE = "alone"
    FAMILY = "family"
    FRIENDS = "friends"
    PARTNER = "partner"
    COLLEAGUES = "colleagues"
    OTHERS = "others"


class SleepQuality(str, enum.Enum):
    EXCELLENT = "excellent"  # 8+ hours
    GOOD = "good"            # 6-8 hours
    FAIR = "fair"            # 4-6 hours
    POOR = "poor"            # < 4 hours


class JourneyCheckIn(BaseModel):
    """Schema for a journey check-in. Mood, weather and sleep are required."""
    mood: JourneyMood
    weather: WeatherTag
    sleep: SleepQuality
    partner: Optional[JourneyPartner] = None
    day_quality: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = Field(None, max_length=2000)


class JourneyResponse(BaseModel):
    """Supportive reply to a check-in."""
    mood: JourneyMood
    emoji: str
    mood_score: int
    message: str
