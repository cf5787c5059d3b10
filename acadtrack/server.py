"""
Run the API with uvicorn on HOST:PORT from settings:

  python -m acadtrack.server
"""

import logging
import sys

import uvicorn

from acadtrack.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Start the HTTP server; returns when it shuts down."""
    settings = get_settings()
    logger.info(
        "Starting AcadTrack API on %s:%s (env=%s)",
        settings.HOST,
        settings.PORT,
        settings.APP_ENV,
    )
    uvicorn.run(
        "acadtrack.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
