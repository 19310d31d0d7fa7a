"""
Tests for the keyword mood classifier and the score table.
"""
import pytest
from moodjourney.services.mood_classifier import classify
from moodjourney.services.mood_lexicon import (
    MoodLevel, MOOD_SCORES, POSITIVE_WORDS, score_of, emoji_for_score
)


@pytest.mark.parametrize("text", [
    "happy",
    "I feel amazing and wonderful",
    "Love this awesome, fantastic day",
    " ".join(POSITIVE_WORDS),
])
def test_positive_text_is_great(text):
    result = classify(text)
    assert result.mood == "great"
    assert result.emoji == "😊"
    assert result.theme == "positive"


def test_negative_text_is_poor():
    result = classify("I am so sad and frustrated today")
    assert result.mood == "poor"
    assert result.theme == "supportive"
    assert len(result.suggested_activities) == 4


def test_positive_negative_tie_is_okay():
    assert classify("happy but sad").mood == "okay"


def test_neutral_dominance_is_okay():
    result = classify("just a normal, usual day, fine")
    assert result.mood == "okay"
    assert result.message == "You seem to be in a neutral state today. That's perfectly normal."


def test_no_keywords_is_okay():
    assert classify("went to the store").mood == "okay"


def test_case_insensitive():
    assert classify("HAPPY").mood == "great"


def test_substring_matches_count():
    # "bad" inside "badminton"
    assert classify("played badminton").mood == "poor"


def test_repeated_keyword_counts_once():
    # "sad" twice still counts one, "happy" + "good" count two
    assert classify("sad sad happy good").mood == "great"


def test_classify_is_deterministic():
    text = "Good morning, feeling upset though"
    assert classify(text) == classify(text)


def test_activities_are_fresh_lists():
    first = classify("happy")
    first.suggested_activities.append("extra")
    assert len(classify("happy").suggested_activities) == 4


def test_score_table_range():
    for level in MOOD_SCORES:
        assert 1 <= score_of(level.value) <= 10
    assert score_of("terrible") == 1
    assert score_of("perfect") == 10


@pytest.mark.parametrize("label", ["", None, "ecstatic", "grate", "unknown"])
def test_unknown_label_scores_five(label):
    assert score_of(label) == 5


def test_score_lookup_is_case_insensitive():
    assert score_of("GREAT") == 7
    assert score_of(" Poor ") == 3


def test_mood_level_parse():
    assert MoodLevel.parse("Amazing") is MoodLevel.AMAZING
    assert MoodLevel.parse("typo") is MoodLevel.UNKNOWN


def test_emoji_for_score():
    assert emoji_for_score(1) == "😭"
    assert emoji_for_score(10) == "🌟"
    assert emoji_for_score(0) == "●"
