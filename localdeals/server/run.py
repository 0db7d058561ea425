"""HTTP server entry point.

Usage: python -m localdeals.server.run
"""

import uvicorn

from localdeals.config import load_settings
from localdeals.logging import get_logger, setup_logging
from localdeals.server.app import create_app


def main() -> None:
    """Load settings, configure logging and serve the API."""
    settings = load_settings()
    setup_logging(settings.log_level)
    logger = get_logger(__name__)

    logger.info("Starting Local Deals API", environment=settings.environment, port=settings.api_port)

    app = create_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()
