"""GraphQL Output Types - the Product object type.

Invariants:
    - Every field is nullable (id: Int, name: String, info: String, price: Float)
    - info is "" (not null) for products created without it
"""

import strawberry

from product_api.core.product import Product


@strawberry.type(name="Product")
class ProductType:
    id: int | None = None
    name: str | None = None
    info: str | None = None
    price: float | None = None

    @classmethod
    def from_record(cls, product: Product) -> "ProductType":
        return cls(
            id=product.id, name=product.name,
            info=product.info, price=product.price,
        )
