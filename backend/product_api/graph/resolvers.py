"""Resolvers - bind GraphQL arguments to typed requests and call the store.

Invariants:
    - Arguments become a schemas.product request model before the store is touched
    - product: null for a missing id or an unknown id, never an error
    - update/delete: zero-valued Product when no id matched, never an error
    - Mutations are logged at INFO with operation and product_id

Design Decisions:
    - Product `info` argument bound to python name `details`: `info` is the
      strawberry resolver-info parameter
"""

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from product_api.core.domain_types import Operation
from product_api.core.product import Product
from product_api.core.product_snapshot import product_to_snapshot
from product_api.core.product_store import ProductStore
from product_api.graph.types import ProductType
from product_api.schemas.product import (
    ProductCreate, ProductDelete, ProductLookup, ProductUpdate,
)

logger = logging.getLogger(__name__)

ProductInfoArg = Annotated[str | None, strawberry.argument(name="info")]


def _store(info: Info) -> ProductStore:
    return info.context.store


def _log_mutation(operation: Operation, product_id: int, product: Product | None):
    if product is None:
        logger.info(
            f"Product {operation.value}: no product with id {product_id}",
            extra={"operation": operation.value, "product_id": product_id},
        )
        return
    logger.info(
        f"Product {operation.value}",
        extra={
            "operation": operation.value,
            "product_id": product_id,
            "product": product_to_snapshot(product),
        },
    )


# ─── Query ───────────────────────────────────────────────────────

def resolve_product(info: Info, id: int | None = None) -> ProductType | None:
    request = ProductLookup(id=id)
    if request.id is None:
        return None
    product = _store(info).get(request.id)
    return ProductType.from_record(product) if product else None


def resolve_list(info: Info) -> list[ProductType | None] | None:
    return [ProductType.from_record(p) for p in _store(info).list_products()]


# ─── Mutation ────────────────────────────────────────────────────

def create_product(
    info: Info, name: str, price: float, details: ProductInfoArg = None,
) -> ProductType | None:
    request = ProductCreate.from_arguments(name=name, price=price, info=details)
    product = _store(info).create(
        name=request.name, price=request.price, info=request.info,
    )
    _log_mutation(Operation.CREATE, product.id, product)
    return ProductType.from_record(product)


def update_product(
    info: Info,
    id: int,
    name: str | None = None,
    details: ProductInfoArg = None,
    price: float | None = None,
) -> ProductType | None:
    request = ProductUpdate.from_arguments(
        id=id, name=name, info=details, price=price,
    )
    product = _store(info).update(request.id, **request.changes())
    _log_mutation(Operation.UPDATE, request.id, product)
    return ProductType.from_record(product or Product.zero())


def delete_product(info: Info, id: int) -> ProductType | None:
    request = ProductDelete(id=id)
    product = _store(info).delete(request.id)
    _log_mutation(Operation.DELETE, request.id, product)
    return ProductType.from_record(product or Product.zero())
