"""Root conftest - shared test configuration and store fixtures."""

import os

import pytest

# Tests never read a developer's seed file or id strategy
os.environ.setdefault("SEED_PRODUCTS", "true")
os.environ.setdefault("SEED_FILE", "")
os.environ.setdefault("PRODUCT_ID_STRATEGY", "random")
os.environ.setdefault("LOG_FORMAT", "text")

from product_api.config import get_settings  # noqa: E402
from product_api.core.product_store import ProductStore  # noqa: E402
from product_api.core.seed_data import default_products  # noqa: E402


class FixedIdGenerator:
    """Hands out a scripted sequence of ids (deterministic collisions)."""

    def __init__(self, *ids: int):
        self._ids = list(ids)

    def next_id(self, existing):
        return self._ids.pop(0)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    """Seeded store (products 1, 2, 3) with the default random id generator."""
    return ProductStore(default_products())


@pytest.fixture
def fixed_ids():
    return FixedIdGenerator
