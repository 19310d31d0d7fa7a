"""
Daily journey check-in route.
"""
import logging
from fastapi import APIRouter, Depends
from moodjourney.models.user import User
from moodjourney.schemas.journey import JourneyCheckIn, JourneyResponse
from moodjourney.api.dependencies import get_current_user
from moodjourney.services.journey_service import respond_to_check_in

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/journey", tags=["journey"])


@router.post("", response_model=JourneyResponse)
async def check_in(
    check_in_data: JourneyCheckIn,
    current_user: User = Depends(get_current_user)
):
    """Record how the day went and get a supportive message. Nothing is stored."""
    logger.debug(f"Journey check-in from user {current_user.id}: {check_in_data.mood.value}")
    return respond_to_check_in(check_in_data)
