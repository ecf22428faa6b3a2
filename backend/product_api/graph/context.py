"""GraphQL execution context - carries the store handle into resolvers."""

from dataclasses import dataclass

from product_api.core.product_store import ProductStore


@dataclass
class GraphContext:
    store: ProductStore
