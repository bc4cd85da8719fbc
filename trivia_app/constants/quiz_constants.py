"""Quiz-related constants shared across UI, server and core layers."""

DEFAULT_QUESTION_COUNT: int = 10
MIN_QUESTION_COUNT: int = 1
MAX_QUESTION_COUNT: int = 50

DEFAULT_TIME_LIMIT_SECONDS: int = 300
MIN_TIME_LIMIT_SECONDS: int = 60
MAX_TIME_LIMIT_SECONDS: int = 3600
TIME_WARNING_THRESHOLD_SECONDS: int = 60

TICK_INTERVAL_SECONDS: float = 1.0
ANSWER_REVEAL_DELAY_SECONDS: float = 1.0
COMPLETION_DELAY_SECONDS: float = 1.5

# (value, label) pairs; an empty value means "any".
CATEGORIES: tuple[tuple[str, str], ...] = (
    ("", "Any Category"),
    ("9", "General Knowledge"),
    ("17", "Science & Nature"),
    ("18", "Science: Computers"),
    ("19", "Science: Mathematics"),
    ("21", "Sports"),
    ("22", "Geography"),
    ("23", "History"),
    ("27", "Animals"),
)

DIFFICULTIES: tuple[tuple[str, str], ...] = (
    ("", "Any Difficulty"),
    ("easy", "Easy"),
    ("medium", "Medium"),
    ("hard", "Hard"),
)

QUESTION_TYPES: tuple[tuple[str, str], ...] = (
    ("", "Any Type"),
    ("multiple", "Multiple Choice"),
    ("boolean", "True / False"),
)

# Persisted store keys.
STORAGE_KEY_USER: str = "quiz_user"
STORAGE_KEY_QUIZ: str = "quiz_state"
STORAGE_KEY_ANSWERS: str = "quiz_answers"
STORAGE_KEY_TIME: str = "quiz_time_remaining"
