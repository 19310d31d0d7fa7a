"""
Mood assessment quiz routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from moodjourney.models.user import User
from moodjourney.schemas.quiz import QuizAnswers, QuizQuestionResponse, QuizOptionResponse, UserProfile
from moodjourney.api.dependencies import get_current_user
from moodjourney.services.quiz_service import QUESTIONS, aggregate, missing_answers

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.get("/questions", response_model=List[QuizQuestionResponse])
async def get_questions():
    """The five quiz questions in order."""
    return [
        QuizQuestionResponse(
            id=q.id,
            question=q.question,
            options=[QuizOptionResponse(value=o.value, label=o.label, mood=o.mood) for o in q.options]
        )
        for q in QUESTIONS
    ]


@router.post("/profile", response_model=UserProfile)
async def create_quiz_profile(
    quiz_answers: QuizAnswers,
    current_user: User = Depends(get_current_user)
):
    """Compute the mood profile once every question is answered."""
    missing = missing_answers(quiz_answers.answers)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Please answer every question first. Missing: {', '.join(missing)}"
        )
    return aggregate(quiz_answers.answers, name=current_user.full_name)
