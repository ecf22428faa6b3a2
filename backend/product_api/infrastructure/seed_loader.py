"""Seed Loader - builds the initial product list from settings.

Invariants:
    - seed_products=False → empty list, seed_file ignored
    - seed_file set → products read from that JSON file, in file order
    - otherwise → the built-in DEFAULT_SEED
    - Any unreadable or malformed file raises SeedDataError (startup aborts)
"""

import json
import logging
from pathlib import Path

from product_api.config import Settings
from product_api.core.errors import SeedDataError
from product_api.core.product import Product
from product_api.core.product_snapshot import products_from_snapshots
from product_api.core.seed_data import default_products

logger = logging.getLogger(__name__)


def load_seed_products(settings: Settings) -> list[Product]:
    """Resolve the configured seed source into Product records."""
    if not settings.seed_products:
        return []
    if settings.seed_file is None:
        return default_products()
    return _read_seed_file(Path(settings.seed_file))


def _read_seed_file(path: Path) -> list[Product]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise SeedDataError(str(path), f"invalid JSON ({e.msg})") from e
    try:
        products = products_from_snapshots(raw)
    except ValueError as e:
        raise SeedDataError(str(path), str(e)) from e
    logger.info(f"Loaded {len(products)} seed products from {path}")
    return products
