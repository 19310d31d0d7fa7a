"""
Pydantic schemas for the mood assessment quiz.
"""
from pydantic import BaseModel
from typing import Dict, List


class QuizOptionResponse(BaseModel):
    """One selectable answer."""
    value: str
    label: str
    mood: str


class QuizQuestionResponse(BaseModel):
    """One quiz question with its options."""
    id: str
    question: str
    options: List[QuizOptionResponse]


class QuizAnswers(BaseModel):
    """Selected option value per question id."""
    answers: Dict[str, str]


class UserProfile(BaseModel):
    """Profile derived from the dominant quiz mood."""
    name: str
    age: str
    current_challenge: str
    dream_goal: str
    energy_level: str
    recent_feeling: str
    motivation: str
