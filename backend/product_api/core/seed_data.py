"""Seed Data - the three products every fresh store starts with.

Invariants:
    - Snapshots are in product_snapshot format
    - Order is the insertion order seen by `list`
"""

from product_api.core.product import Product
from product_api.core.product_snapshot import products_from_snapshots

DEFAULT_SEED: list[dict] = [
    {"id": 1, "name": "product 1", "info": "product1 description", "price": 700},
    {"id": 2, "name": "product 2", "info": "product2 description", "price": 632},
    {"id": 3, "name": "product 3", "info": "product3 description", "price": 80},
]


def default_products() -> list[Product]:
    """Fresh Product objects for the built-in seed (never shared between stores)."""
    return products_from_snapshots(DEFAULT_SEED)
