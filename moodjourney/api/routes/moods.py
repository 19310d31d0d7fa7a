"""
Mood analysis routes: classify feelings text and save it to the journey.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from moodjourney.db.session import get_db
from moodjourney.models.user import User
from moodjourney.schemas.mood import MoodAnalyzeRequest, MoodAnalysis, MoodEntryResponse
from moodjourney.api.dependencies import get_current_user
from moodjourney.services.mood_classifier import classify
from moodjourney.services.mood_entry_service import create_mood_entry, get_mood_entries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/moods", tags=["moods"])


def _require_feelings_text(text: str) -> str:
    if not text or not text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please tell us how you're feeling first."
        )
    return text


@router.post("/analyze", response_model=MoodEntryResponse, status_code=status.HTTP_201_CREATED)
async def analyze_mood(
    request: MoodAnalyzeRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Analyze feelings text and save the result as a mood entry."""
    feelings_text = _require_feelings_text(request.feelings_text)
    analysis = classify(feelings_text)

    try:
        entry = create_mood_entry(
            user_id=current_user.id,
            analysis=analysis,
            feelings_text=feelings_text,
            weather=request.weather.value if request.weather else None,
            db=db
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving mood entry for user {current_user.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="There was an error analyzing your mood. Please try again."
        )

    logger.info(f"Saved mood entry {entry.id} ({entry.mood}) for user {current_user.id}")
    return entry


@router.post("/classify", response_model=MoodAnalysis)
async def classify_mood(
    request: MoodAnalyzeRequest,
    current_user: User = Depends(get_current_user)
):
    """Classify feelings text without saving it."""
    return classify(_require_feelings_text(request.feelings_text))


@router.get("", response_model=List[MoodEntryResponse])
async def list_mood_entries(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """All mood entries of the current user, newest first."""
    return get_mood_entries(current_user.id, db)
