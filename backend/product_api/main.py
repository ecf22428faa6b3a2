"""Product API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProductApiError → GraphQL error envelope
    - One ProductStore per application, created in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No CORS middleware: the service has a single same-origin route
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from product_api.api.error_handlers import register_error_handlers
from product_api.api.routes import product
from product_api.config import Settings, get_settings
from product_api.core.id_generator import build_id_generator
from product_api.core.product_store import ProductStore
from product_api.infrastructure.observability import setup_logging
from product_api.infrastructure.seed_loader import load_seed_products

logger = logging.getLogger(__name__)


def build_product_store(settings: Settings) -> ProductStore:
    """Create the record store from the configured seed and id strategy."""
    return ProductStore(
        load_seed_products(settings),
        id_generator=build_id_generator(settings.product_id_strategy),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.product_store = build_product_store(settings)
    logger.info(
        f"Product API started with {len(app.state.product_store)} products "
        f"(id strategy: {settings.product_id_strategy.value})",
    )
    yield
    logger.info("Product API shutting down")


app = FastAPI(title="Product API", version="1.0.0", lifespan=lifespan)

register_error_handlers(app)

app.include_router(product.router)
