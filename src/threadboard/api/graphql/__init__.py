"""GraphQL API: types, root operations and the FastAPI router."""

from .schema import graphql_router, schema

__all__ = ["graphql_router", "schema"]
