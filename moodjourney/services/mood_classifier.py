"""
Keyword-based mood classification for free-text feelings.

Counts how many keywords of each list occur anywhere in the lower-cased
text (plain substring match, so "bad" also matches "badminton") and picks
the strictly dominant list. Ties and neutral dominance give "okay".
"""
import logging
from typing import Iterable
from moodjourney.schemas.mood import MoodAnalysis
from moodjourney.services.mood_lexicon import POSITIVE_WORDS, NEGATIVE_WORDS, NEUTRAL_WORDS

logger = logging.getLogger(__name__)

GREAT_RESULT = {
    "mood": "great",
    "emoji": "😊",
    "message": "You're feeling positive today! That's wonderful to see.",
    "theme": "positive",
    "suggested_activities": (
        "Continue doing what makes you happy",
        "Share your positive energy with others",
        "Try a new hobby or activity",
        "Spend time in nature",
    ),
}

POOR_RESULT = {
    "mood": "poor",
    "emoji": "😔",
    "message": "It sounds like you're going through a tough time. Remember, this feeling will pass.",
    "theme": "supportive",
    "suggested_activities": (
        "Take deep breaths and practice mindfulness",
        "Talk to someone you trust",
        "Do something kind for yourself",
        "Try gentle exercise like walking",
    ),
}

OKAY_RESULT = {
    "mood": "okay",
    "emoji": "😐",
    "message": "You seem to be in a neutral state today. That's perfectly normal.",
    "theme": "balanced",
    "suggested_activities": (
        "Try something new to spark interest",
        "Connect with friends or family",
        "Practice gratitude",
        "Do a small creative activity",
    ),
}


def count_keywords(text: str, keywords: Iterable[str]) -> int:
    """Number of keywords that appear at least once in text."""
    return sum(1 for word in keywords if word in text)


def classify(text: str) -> MoodAnalysis:
    """
    Classify a feelings text into great / poor / okay.

    Args:
        text: Non-empty feelings text (validated by the caller)

    Returns:
        MoodAnalysis with the fixed emoji, message, theme and 4 activities
    """
    lower_text = text.lower()

    positive_count = count_keywords(lower_text, POSITIVE_WORDS)
    negative_count = count_keywords(lower_text, NEGATIVE_WORDS)
    neutral_count = count_keywords(lower_text, NEUTRAL_WORDS)

    if positive_count > negative_count and positive_count > neutral_count:
        result = GREAT_RESULT
    elif negative_count > positive_count and negative_count > neutral_count:
        result = POOR_RESULT
    else:
        result = OKAY_RESULT

    logger.debug(
        f"Keyword counts positive={positive_count} negative={negative_count} "
        f"neutral={neutral_count} -> {result['mood']}"
    )

    return MoodAnalysis(
        mood=result["mood"],
        emoji=result["emoji"],
        message=result["message"],
        theme=result["theme"],
        suggested_activities=list(result["suggested_activities"])
    )
