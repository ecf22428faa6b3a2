"""Run the product API with uvicorn: `python -m product_api`."""

import logging

import uvicorn

from product_api.config import get_settings
from product_api.infrastructure.observability import setup_logging

logger = logging.getLogger("product_api")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
