"""Product - the only entity held by the record store.

Invariants:
    - info is "" when the client omitted it, never None
    - Product.zero() is what the update/delete mutations return when no id matched

Design Decisions:
    - Plain dataclass, mutated in place by the store under its lock
"""

from dataclasses import dataclass

from product_api.core.domain_types import ProductId, Price


@dataclass
class Product:
    """One product record."""

    id: ProductId
    name: str
    info: str = ""
    price: Price = Price(0.0)

    @classmethod
    def zero(cls) -> "Product":
        """Zero-valued record: not-found marker for update and delete."""
        return cls(id=ProductId(0), name="", info="", price=Price(0.0))
