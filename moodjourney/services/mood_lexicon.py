"""
Static mood vocabulary: classifier keywords, the 10-level score table and
fallback emojis for history views.

All tables are module-level constants and are never mutated.
"""
import enum
from types import MappingProxyType
from typing import Optional

# Keyword lists for the free-text classifier (matched as lower-case substrings)
POSITIVE_WORDS = (
    "happy", "joy", "great", "amazing", "wonderful",
    "excited", "love", "good", "fantastic", "awesome",
)
NEGATIVE_WORDS = (
    "sad", "angry", "frustrated", "terrible", "awful",
    "hate", "bad", "horrible", "depressed", "upset",
)
NEUTRAL_WORDS = ("okay", "fine", "alright", "normal", "usual")


class MoodLevel(str, enum.Enum):
    """History mood taxonomy, worst to best."""
    TERRIBLE = "terrible"
    BAD = "bad"
    POOR = "poor"
    OKAY = "okay"
    NEUTRAL = "neutral"
    GOOD = "good"
    GREAT = "great"
    EXCELLENT = "excellent"
    AMAZING = "amazing"
    PERFECT = "perfect"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, label: Optional[str]) -> "MoodLevel":
        """Case-insensitive lookup; anything unrecognised is UNKNOWN."""
        if not label:
            return cls.UNKNOWN
        try:
            return cls(label.strip().lower())
        except ValueError:
            return cls.UNKNOWN


DEFAULT_MOOD_SCORE = 5

MOOD_SCORES = MappingProxyType({
    MoodLevel.TERRIBLE: 1,
    MoodLevel.BAD: 2,
    MoodLevel.POOR: 3,
    MoodLevel.OKAY: 4,
    MoodLevel.NEUTRAL: 5,
    MoodLevel.GOOD: 6,
    MoodLevel.GREAT: 7,
    MoodLevel.EXCELLENT: 8,
    MoodLevel.AMAZING: 9,
    MoodLevel.PERFECT: 10,
})

FALLBACK_EMOJI_BY_SCORE = MappingProxyType({
    1: "😭",
    2: "😢",
    3: "😔",
    4: "🙁",
    5: "😐",
    6: "🙂",
    7: "😊",
    8: "😄",
    9: "🤩",
    10: "🌟",
})

UNKNOWN_SCORE_EMOJI = "●"


def score_of(label: Optional[str]) -> int:
    """
    Map a mood label to its 1-10 chart score.

    Unknown, empty or missing labels score DEFAULT_MOOD_SCORE; this never raises.
    """
    return MOOD_SCORES.get(MoodLevel.parse(label), DEFAULT_MOOD_SCORE)


def emoji_for_score(score: float) -> str:
    """Fallback glyph for entries stored without an emoji."""
    return FALLBACK_EMOJI_BY_SCORE.get(int(round(score)), UNKNOWN_SCORE_EMOJI)
