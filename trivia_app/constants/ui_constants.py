"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"
STATE_REFRESH_INTERVAL_MS: int = 200

HEADER_WELCOME_TEMPLATE: str = "Welcome, {name}!"
LOGOUT_BUTTON: str = "Logout"
ABOUT_BUTTON: str = "About"

LOGIN_TITLE: str = "Welcome to TriviaQt"
LOGIN_DESCRIPTION: str = "Enter your name to start playing."
LOGIN_PLACEHOLDER: str = "Your name"
LOGIN_BUTTON: str = "Login"

SETUP_TITLE: str = "Setup Your Quiz"
SETUP_DESCRIPTION: str = "Configure your quiz preferences"
SETUP_START_BUTTON: str = "Start Quiz"
SETUP_LOADING_BUTTON: str = "Loading Questions..."
SETUP_FETCH_FAILED_TITLE: str = "Could not load questions"

QUIZ_PROGRESS_TEMPLATE: str = "Question {current} of {total}"
QUIZ_ANSWERED_TEMPLATE: str = "Answered: {answered}/{total}"
QUIZ_SKIP_BUTTON: str = "Skip Question"

RESULTS_TITLE: str = "Quiz Complete!"
RESULTS_RESTART_BUTTON: str = "Take Another Quiz"
RESULTS_COPY_BUTTON: str = "Copy Results"
RESULTS_COPIED_MESSAGE: str = "Results copied to clipboard!"

CONFIRM_LOGOUT_TITLE: str = "Logout"
CONFIRM_LOGOUT_MESSAGE: str = "Logging out discards the quiz in progress. Continue?"
