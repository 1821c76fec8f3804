"""Executable GraphQL schema and its FastAPI router."""

import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext
from strawberry.utils.logging import StrawberryLogger

from threadboard.api.graphql.context import get_context
from threadboard.api.graphql.mutations import Mutation
from threadboard.api.graphql.queries import Query
from threadboard.core.errors import ThreadboardError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error."


def _is_unexpected(error: GraphQLError) -> bool:
    """Return True for resolver failures that are not domain errors."""
    original = error.original_error
    return original is not None and not isinstance(original, ThreadboardError)


class ThreadboardSchema(strawberry.Schema):
    """Schema that logs domain errors quietly and everything else loudly."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            if isinstance(error.original_error, ThreadboardError):
                logger.debug("GraphQL request failed: %s", error.message)
            else:
                StrawberryLogger.error(error, execution_context)


schema = ThreadboardSchema(
    query=Query,
    mutation=Mutation,
    extensions=[
        MaskErrors(should_mask_error=_is_unexpected, error_message=UNEXPECTED_ERROR_MESSAGE),
    ],
)

graphql_router = GraphQLRouter(schema, context_getter=get_context)
