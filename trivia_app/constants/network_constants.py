"""Network configuration constants for the trivia application."""

from trivia_app.utils.env import env_float, env_int, env_str

DEFAULT_HOST: str = env_str("TRIVIA_HOST", "127.0.0.1")
DEFAULT_PORT: int = env_int("TRIVIA_PORT", 8000)

OPEN_TRIVIA_API_URL: str = env_str("TRIVIA_API_URL", "https://opentdb.com/api.php")
HTTP_TIMEOUT_SECONDS: float = env_float("TRIVIA_HTTP_TIMEOUT", 10.0)
