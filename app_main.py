"""Application entry point for TriviaQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.core.scheduler import ThreadScheduler
from trivia_app.core.services.question_provider import OpenTriviaProvider
from trivia_app.core.session_machine import SessionStateMachine
from trivia_app.server.api_server import start_api_server
from trivia_app.ui.player_main_window import PlayerMainWindow
from trivia_app.utils.cli import build_store, parse_args
from trivia_app.utils.logging_config import configure_logging


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, restore the session, start the API server and the Qt UI."""
    args = parse_args(argv)
    logger = configure_logging()
    logger.info("Starting TriviaQt…")

    session = SessionStateMachine(store=build_store(args), scheduler=ThreadScheduler())
    provider = OpenTriviaProvider()
    if args.seed is not None:
        provider.set_seed(args.seed)

    player_url = f"http://{args.host}:{args.port}/"
    server_thread = start_api_server(
        session, provider, host=args.host, port=args.port, daemon=not args.no_window
    )
    logger.info("Browser player available at %s", player_url)

    if args.no_window:
        try:
            server_thread.join()
        finally:
            session.shutdown()
            provider.close()
        return

    app = QApplication(sys.argv[:1])
    window = PlayerMainWindow(session=session, provider=provider, player_url=player_url)
    window.show()
    exit_code = app.exec()
    provider.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
