"""
Pydantic schemas for mood analysis and MoodEntry entity.
"""
import enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class WeatherTag(str, enum.Enum):
    """Optional weather tag attached to an entry."""
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    STORMY = "stormy"


class MoodAnalysis(BaseModel):
    """Result of classifying a feelings text."""
    mood: str
    emoji: str
    message: str
    theme: str
    suggested_activities: List[str]


class MoodAnalyzeRequest(BaseModel):
    """Schema for analyzing (and saving) a feelings text."""
    feelings_text: str = Field(..., max_length=5000)
    weather: Optional[WeatherTag] = None


class MoodEntryResponse(BaseModel):
    """Schema for mood entry response."""
    id: int
    user_id: int
    mood: str
    emoji: str
    feelings_text: str
    weather: Optional[str] = None
    theme: Optional[str] = None
    message: str
    suggested_activities: List[str]
    created_at: datetime

    class Config:
        from_attributes = True
