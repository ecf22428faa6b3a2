"""Product Store - the in-memory record store, sole state of the service.

Invariants:
    - Insertion order preserved; list_products() returns products in that order
    - Every public method holds the store lock for its whole body
    - list_products() returns a copy; callers never see later mutation of the store's list
    - Lookups, updates and deletes act on the FIRST record whose id matches
    - update/delete return None when nothing matched (not an error)
    - Returned records are copies; mutating them does not touch the store

Design Decisions:
    - One threading.Lock per store: FastAPI may run handlers on worker threads
    - Id generator injected: random (historical) or sequential strategy
    - Store owned by the application (app.state), never a module-level global
"""

import threading
from dataclasses import replace
from typing import Iterable

from product_api.core.domain_types import ProductId, Price
from product_api.core.id_generator import IdGenerator, RandomIdGenerator
from product_api.core.product import Product

UPDATABLE_FIELDS: frozenset[str] = frozenset({"name", "info", "price"})


class ProductStore:
    """Ordered, lock-guarded collection of Product records."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        id_generator: IdGenerator | None = None,
    ):
        self._products: list[Product] = [replace(p) for p in products]
        self._id_generator = id_generator or RandomIdGenerator()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def get(self, product_id: ProductId) -> Product | None:
        """First product with this id, or None."""
        with self._lock:
            index = self._index_of(product_id)
            return replace(self._products[index]) if index is not None else None

    def list_products(self) -> list[Product]:
        """Snapshot of all products in insertion order."""
        with self._lock:
            return [replace(p) for p in self._products]

    def create(self, name: str, price: float, info: str = "") -> Product:
        """Append a new product with a generated id and return it."""
        with self._lock:
            product = Product(
                id=self._id_generator.next_id(self._products),
                name=name,
                info=info,
                price=Price(float(price)),
            )
            self._products.append(product)
            return replace(product)

    def update(self, product_id: ProductId, **changes: object) -> Product | None:
        """Overwrite only the supplied fields of the first matching product.

        Keys must be a subset of UPDATABLE_FIELDS. Returns the updated record,
        or None when no product has this id.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = self._products[index]
            if "name" in changes:
                product.name = str(changes["name"])
            if "info" in changes:
                product.info = str(changes["info"])
            if "price" in changes:
                product.price = Price(float(changes["price"]))  # type: ignore[arg-type]
            return replace(product)

    def delete(self, product_id: ProductId) -> Product | None:
        """Remove the first matching product and return it, else None."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)

    def _index_of(self, product_id: ProductId) -> int | None:
        # caller holds the lock
        for i, product in enumerate(self._products):
            if product.id == product_id:
                return i
        return None
