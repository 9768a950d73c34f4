"""
Process entrypoint for the SatriaCb proxy.

Architectural role:
- Configures logging from `LOG_LEVEL`.
- Builds `Settings` once from the environment.
- Serves the FastAPI application with uvicorn on the configured host/port.

Error handling strategy:
- Invalid numeric configuration aborts startup with the parsing error.
- Missing credentials do not abort startup; the affected endpoints answer 500.
"""

import logging
import os

import uvicorn

from satriacb.api.http_api import create_app
from satriacb.core.settings import Settings


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Start the HTTP server and block until it stops."""
    configure_logging()
    settings = Settings.from_env()

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; model endpoints will fail")
    if not settings.telegram_configured:
        logger.warning("Telegram config is incomplete; feedback endpoint will fail")

    app = create_app(settings)

    logger.info("SatriaCb server listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
