"""
Run the API with uvicorn on HOST:PORT from settings:

  python -m app.serve
"""

import logging

import uvicorn

from app.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
