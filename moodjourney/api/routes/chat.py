"""
Emotional support chat route.
"""
from fastapi import APIRouter, Depends
from moodjourney.models.user import User
from moodjourney.schemas.chat import ChatRequest, ChatResponse
from moodjourney.api.dependencies import get_current_user
from moodjourney.core.utils import error_response
from moodjourney.services.chat_service import ChatServiceError, generate_support_reply

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/emotional", response_model=ChatResponse)
async def emotional_chat(
    chat_request: ChatRequest,
    current_user: User = Depends(get_current_user)
):
    """Forward a message to the support model; failures come back as {"error": ...}."""
    try:
        reply = await generate_support_reply(
            chat_request.message,
            mood=chat_request.mood,
            context=chat_request.context
        )
    except ChatServiceError as e:
        return error_response(e.message, e.status_code)

    return ChatResponse(reply=reply)
