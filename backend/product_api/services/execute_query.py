"""Query Execution - runs a GraphQL document against the schema and a store.

Invariants:
    - Result envelope always has "data" (null on failure); "errors" only when non-empty
    - Every execution error is logged at ERROR before the envelope is returned
    - Errors use the engine's formatted shape (message, locations, path)
    - An empty query never reaches the engine: MissingQueryError instead
    - A document with no runnable operation raises UnknownOperationError

Design Decisions:
    - Parsing, validation and execution delegated to strawberry.Schema.execute
    - Store passed per call via GraphContext, so one schema serves any store
"""

import json
import logging

import strawberry
from strawberry.schema.exceptions import CannotGetOperationTypeError

from product_api.core.errors import (
    ErrorContext, InvalidVariablesError, MissingQueryError, UnknownOperationError,
)
from product_api.core.product_store import ProductStore
from product_api.graph.context import GraphContext

logger = logging.getLogger(__name__)


def parse_variables(raw: str | None) -> dict | None:
    """Decode the JSON-encoded `variables` parameter of a GET request."""
    if raw is None or not raw.strip():
        return None
    try:
        variables = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidVariablesError(f"not valid JSON ({e.msg})") from e
    if variables is None:
        return None
    if not isinstance(variables, dict):
        raise InvalidVariablesError(
            f"expected a JSON object, got {type(variables).__name__}",
        )
    return variables


async def execute_query(
    schema: strawberry.Schema,
    store: ProductStore,
    query: str,
    variables: dict | None = None,
    operation_name: str | None = None,
) -> dict:
    """Execute one GraphQL document and build the JSON-safe result envelope."""
    if not query:
        raise MissingQueryError(ErrorContext(operation_name=operation_name))

    try:
        result = await schema.execute(
            query,
            variable_values=variables,
            context_value=GraphContext(store=store),
            operation_name=operation_name,
        )
    except CannotGetOperationTypeError as e:
        raise UnknownOperationError(operation_name) from e

    envelope: dict = {"data": result.data}
    if result.errors:
        logger.error(
            f"errors: {[e.message for e in result.errors]}",
            extra={
                "error_count": len(result.errors),
                "operation_name": operation_name,
            },
        )
        envelope["errors"] = [e.formatted for e in result.errors]
    return envelope
