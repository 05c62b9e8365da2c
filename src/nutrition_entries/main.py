"""Command-line entrypoint that serves the API with uvicorn."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from nutrition_entries.api.app import create_app
from nutrition_entries.app_logging import configure_logging
from nutrition_entries.config import Settings
from nutrition_entries.containers import build_container


def main() -> None:
    """Load settings, build the app and serve it until interrupted."""
    logger = configure_logging()
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.error("Invalid configuration (APP_ID and APP_KEY are required): %s", exc)
        sys.exit(1)
    app = create_app(build_container(settings))
    logging.getLogger(__name__).info(
        "Server starting on %s:%s (docs at /docs)", settings.host, settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
