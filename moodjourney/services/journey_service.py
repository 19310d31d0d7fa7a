"""
Journey check-in service: a supportive message for the day's mood.
"""
from typing import Optional
from moodjourney.schemas.journey import JourneyCheckIn, JourneyMood, JourneyResponse
from moodjourney.services.mood_lexicon import score_of

SUPPORT_MESSAGES = {
    JourneyMood.EXCELLENT: "What a wonderful day! Your positive energy is inspiring. Keep up the great work! ✨",
    JourneyMood.GOOD: "You're doing great! It's lovely to see you taking care of yourself and staying positive. 🌟",
    JourneyMood.OKAY: "Every day doesn't have to be perfect. You're doing your best, and that's enough. 💙",
    JourneyMood.POOR: "It's okay to have difficult days. Remember, you're stronger than you think and tomorrow is a new opportunity. 🌈",
    JourneyMood.TERRIBLE: "I'm sorry you're having such a tough time. Please be gentle with yourself and consider reaching out for support. 💜",
}

DEFAULT_SUPPORT_MESSAGE = "Thank you for sharing your day with us. 🤗"

JOURNEY_EMOJIS = {
    JourneyMood.EXCELLENT: "😄",
    JourneyMood.GOOD: "😊",
    JourneyMood.OKAY: "😐",
    JourneyMood.POOR: "😔",
    JourneyMood.TERRIBLE: "😢",
}


def get_support_message(mood: Optional[JourneyMood]) -> str:
    return SUPPORT_MESSAGES.get(mood, DEFAULT_SUPPORT_MESSAGE)


def respond_to_check_in(check_in: JourneyCheckIn) -> JourneyResponse:
    return JourneyResponse(
        mood=check_in.mood,
        emoji=JOURNEY_EMOJIS[check_in.mood],
        mood_score=score_of(check_in.mood.value),
        message=get_support_message(check_in.mood)
    )
