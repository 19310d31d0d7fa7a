"""
Mood assessment quiz: question catalogue, answer aggregation and the
step-by-step wizard.
"""
from typing import Dict, List, Mapping, Optional, Tuple
from moodjourney.schemas.quiz import UserProfile

# Fixed category order; ties for the dominant mood go to the earliest entry
MOOD_CATEGORIES = ("energetic", "calm", "anxious", "happy", "melancholic", "hopeful")

DEFAULT_PROFILE_NAME = "Quiz Taker"


class QuizError(ValueError):
    """Raised when the quiz wizard is driven with an invalid answer or step."""


class QuizOption:
    """A selectable answer tagged with one mood category."""
    def __init__(self, value: str, label: str, mood: str):
        self.value = value
        self.label = label
        self.mood = mood


class QuizQuestion:
    """A quiz question with its six tagged options."""
    def __init__(self, id: str, question: str, options: List[QuizOption]):
        self.id = id
        self.question = question
        self.options = options

    def find_option(self, value: str) -> Optional[QuizOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None


def _options(*pairs: Tuple[str, str]) -> List[QuizOption]:
    """Tag (value, label) pairs with MOOD_CATEGORIES in order."""
    return [QuizOption(value, label, mood) for (value, label), mood in zip(pairs, MOOD_CATEGORIES)]


QUESTIONS: Tuple[QuizQuestion, ...] = (
    QuizQuestion(
        "morning-feeling",
        "How did you feel when you woke up this morning?",
        _options(
            ("excited", "Excited and ready for the day"),
            ("peaceful", "Calm and peaceful"),
            ("worried", "Anxious or worried"),
            ("content", "Happy and content"),
            ("reflective", "Thoughtful and introspective"),
            ("optimistic", "Hopeful about what's ahead"),
        ),
    ),
    QuizQuestion(
        "social-energy",
        "How have you been feeling socially lately?",
        _options(
            ("outgoing", "Eager to connect with others"),
            ("balanced", "Comfortable and balanced"),
            ("overwhelmed", "Overwhelmed by social interaction"),
            ("joyful", "Enjoying meaningful time with friends"),
            ("withdrawn", "Preferring solitude and reflection"),
            ("reconnecting", "Thinking about reconnecting with people"),
        ),
    ),
    QuizQuestion(
        "environment-impact",
        "How does your current environment make you feel?",
        _options(
            ("motivated", "It energizes and inspires me"),
            ("soothing", "It feels relaxing and comforting"),
            ("distracting", "It makes me feel uneasy or distracted"),
            ("uplifting", "It brings a smile to my face"),
            ("dull", "It feels dull or uninspiring"),
            ("refreshing", "It gives me hope for a fresh start"),
        ),
    ),
    QuizQuestion(
        "thought-patterns",
        "What kind of thoughts have been on your mind today?",
        _options(
            ("active-ideas", "New ideas and projects"),
            ("peace", "Moments of peace and clarity"),
            ("worry", "Concerns about things going wrong"),
            ("gratitude", "Appreciation for the little things"),
            ("deep-thinking", "Reflecting on past experiences"),
            ("possibilities", "Dreaming about the future"),
        ),
    ),
    QuizQuestion(
        "ideal-activity",
        "What sounds most appealing to you right now?",
        _options(
            ("adventure", "An exciting adventure or new project"),
            ("nature", "A peaceful walk in nature"),
            ("comfort", "Staying in my comfort zone"),
            ("celebration", "Celebrating life with loved ones"),
            ("solitude", "Quiet time for deep thinking"),
            ("planning", "Planning for future goals"),
        ),
    ),
)

QUESTIONS_BY_ID: Dict[str, QuizQuestion] = {q.id: q for q in QUESTIONS}


def missing_answers(answers: Mapping[str, str]) -> List[str]:
    """Question ids (in quiz order) without a valid selected option."""
    missing = []
    for question in QUESTIONS:
        value = answers.get(question.id)
        if value is None or question.find_option(value) is None:
            missing.append(question.id)
    return missing


def count_moods(answers: Mapping[str, str]) -> Dict[str, int]:
    """Tally the mood tag of every selected option."""
    counts = {mood: 0 for mood in MOOD_CATEGORIES}
    for question_id, value in answers.items():
        question = QUESTIONS_BY_ID.get(question_id)
        option = question.find_option(value) if question else None
        if option:
            counts[option.mood] += 1
    return counts


def dominant_mood(counts: Mapping[str, int]) -> str:
    """Category with the strictly highest count, scanning MOOD_CATEGORIES in order."""
    best = MOOD_CATEGORIES[0]
    for mood in MOOD_CATEGORIES[1:]:
        if counts.get(mood, 0) > counts.get(best, 0):
            best = mood
    return best


def energy_level_for(mood: str) -> str:
    if mood == "energetic":
        return "high"
    if mood == "calm":
        return "medium"
    return "low"


def aggregate(answers: Mapping[str, str], name: Optional[str] = None) -> UserProfile:
    """
    Build a UserProfile from quiz answers.

    Partial answer maps are tolerated: unanswered questions add nothing.
    """
    mood = dominant_mood(count_moods(answers))
    return UserProfile(
        name=name or DEFAULT_PROFILE_NAME,
        age="25-35",
        current_challenge=f"Feeling {mood}",
        dream_goal="Finding inner balance",
        energy_level=energy_level_for(mood),
        recent_feeling=mood,
        motivation="Personal growth"
    )


class AnsweringQuestion:
    """Wizard state: waiting on the question at `index`."""
    def __init__(self, index: int):
        self.index = index

    def __eq__(self, other):
        return isinstance(other, AnsweringQuestion) and other.index == self.index

    def __repr__(self):
        return f"AnsweringQuestion({self.index})"


class Complete:
    """Wizard state: every question answered, profile computed."""
    def __init__(self, profile: UserProfile):
        self.profile = profile

    def __repr__(self):
        return f"Complete({self.profile.recent_feeling})"


class QuizWizard:
    """
    Step-by-step quiz progression.

    next() only advances when the current question has an answer; back()
    keeps previously recorded answers.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.answers: Dict[str, str] = {}
        self.state = AnsweringQuestion(0)

    @property
    def is_complete(self) -> bool:
        return isinstance(self.state, Complete)

    @property
    def current_question(self) -> QuizQuestion:
        if self.is_complete:
            raise QuizError("Quiz is already complete")
        return QUESTIONS[self.state.index]

    @property
    def progress(self) -> float:
        """Percentage shown on the progress bar."""
        if self.is_complete:
            return 100.0
        return (self.state.index + 1) / len(QUESTIONS) * 100

    def answer(self, question_id: str, value: str) -> None:
        """Record (or overwrite) the answer for a question."""
        question = QUESTIONS_BY_ID.get(question_id)
        if question is None:
            raise QuizError(f"Unknown question: {question_id}")
        if question.find_option(value) is None:
            raise QuizError(f"Invalid option '{value}' for question {question_id}")
        self.answers[question_id] = value

    def can_advance(self) -> bool:
        return not self.is_complete and self.current_question.id in self.answers

    def next(self):
        """Advance one step, or complete the quiz from the last question."""
        if not self.can_advance():
            raise QuizError("Current question has not been answered")
        if self.state.index < len(QUESTIONS) - 1:
            self.state = AnsweringQuestion(self.state.index + 1)
        else:
            self.state = Complete(aggregate(self.answers, self.name))
        return self.state

    def back(self):
        if not self.is_complete and self.state.index > 0:
            self.state = AnsweringQuestion(self.state.index - 1)
        return self.state
