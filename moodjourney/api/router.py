"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from moodjourney.api.routes import auth, users, moods, history, quiz, journey, chat

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(moods.router)
api_router.include_router(history.router)
api_router.include_router(quiz.router)
api_router.include_router(journey.router)
api_router.include_router(chat.router)
