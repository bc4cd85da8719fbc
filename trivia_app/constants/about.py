"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a timed trivia quiz player built with Qt and FastAPI. "
    "Questions come from the Open Trivia Database; progress survives a restart "
    "and the same session can be played from the desktop window or a browser."
)
TRIVIA_SOURCE_URL = "https://opentdb.com/"
