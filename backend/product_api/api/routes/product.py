"""Product Route - GET /product, the single GraphQL endpoint.

Invariants:
    - `query` passed verbatim to the executor (FastAPI already URL-decoded it)
    - Always 200: query errors travel inside the {"data", "errors"} envelope
    - Store comes from app.state via get_product_store (overridable in tests)
"""

from fastapi import APIRouter, Depends, Query, Request

from product_api.core.product_store import ProductStore
from product_api.graph.schema import schema
from product_api.services.execute_query import execute_query, parse_variables

router = APIRouter(tags=["product"])


def get_product_store(request: Request) -> ProductStore:
    """FastAPI dependency for the application's record store."""
    store = getattr(request.app.state, "product_store", None)
    if store is None:
        raise RuntimeError("Product store not initialized")
    return store


@router.get("/product")
async def product_graphql(
    query: str = Query(""),
    variables: str | None = Query(None),
    operation_name: str | None = Query(None, alias="operationName"),
    store: ProductStore = Depends(get_product_store),
):
    """Execute a GraphQL query or mutation against the product store."""
    return await execute_query(
        schema, store, query,
        variables=parse_variables(variables),
        operation_name=operation_name,
    )
