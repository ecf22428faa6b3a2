"""GraphQL Layer - strawberry schema, output types and resolvers.

Invariants:
    - Resolvers reach the store only through GraphContext (never a global)
    - Parsing, validation and execution belong to strawberry / graphql-core
"""
