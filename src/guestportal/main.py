"""Application entry point for the guest portal server."""

from guestportal.app import App
from guestportal.config import Config
from guestportal.logging import setup_logging
from guestportal.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
