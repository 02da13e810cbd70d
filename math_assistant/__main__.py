"""Entry point when the package is executed as a module."""

import sys

import click
from pydantic import ValidationError

from . import create_agent
from .cli.session import InteractiveSession
from .platform.observability import configure_logging, start_metrics_server
from .platform.settings import Settings

MISSING_API_KEY = "GOOGLE_API_KEY environment variable not set"


def load_settings() -> Settings:
    """Load settings from the environment, turning validation errors into CLI errors."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as e:
        if any(error["loc"] == ("google_api_key",) for error in e.errors()):
            raise click.ClickException(MISSING_API_KEY) from e
        raise click.ClickException(f"Invalid configuration: {e}") from e


@click.command()
def main():
    """Answer arithmetic questions written in plain English."""
    settings = load_settings()
    configure_logging(settings.app.log_level, json_output=settings.app.log_json)
    start_metrics_server(settings.metrics.port)

    session = InteractiveSession(create_agent(settings))
    sys.exit(session.run())


if __name__ == "__main__":
    sys.exit(main())
