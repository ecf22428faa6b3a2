"""Schema Definition - Query and Mutation roots bound to the resolvers.

Invariants:
    - Query: product(id: Int): Product, list: [Product]
    - Mutation: create(name: String!, info: String, price: Float!): Product,
      update(id: Int!, name: String, info: String, price: Float): Product,
      delete(id: Int!): Product
    - Pure declaration: no logic lives here
    - Execution errors are not logged by the engine; execute_query logs them once
"""

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext

from product_api.graph import resolvers


@strawberry.type
class Query:
    product = strawberry.field(
        resolver=resolvers.resolve_product, description="Get product by id",
    )
    products = strawberry.field(
        resolver=resolvers.resolve_list, name="list",
        description="Get product list",
    )


@strawberry.type
class Mutation:
    create = strawberry.mutation(
        resolver=resolvers.create_product, description="Create new product",
    )
    update = strawberry.mutation(
        resolver=resolvers.update_product, description="Update product by id",
    )
    delete = strawberry.mutation(
        resolver=resolvers.delete_product, description="Delete product by id",
    )


class ProductSchema(strawberry.Schema):
    """Schema whose execution errors are logged by the query service only."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        return None


schema = ProductSchema(query=Query, mutation=Mutation)
