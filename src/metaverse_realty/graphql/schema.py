"""
Main GraphQL schema definition using Strawberry
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .errors import should_mask_error
from .mutations.root import Mutation
from .queries.root import Query
from .types.common import Coordinate
from .types.mutation_response import (
    RezonePropertyMutationResponse,
    SalePropertyMutationResponse,
    UserMutationResponse,
)
from .types.property import PROPERTY_VARIANTS, ApartmentUnit
from .types.sale import Sale
from .types.user import User

if TYPE_CHECKING:
    from ..app_context import AppContext

logger = get_logger(__name__)

# Every concrete object type. Types reachable only through an interface must be
# registered with Strawberry explicitly; the mock generator discovers interface
# implementations from this list, in order.
SCHEMA_TYPES: list[type] = [
    Coordinate,
    Sale,
    User,
    *PROPERTY_VARIANTS.values(),
    ApartmentUnit,
    UserMutationResponse,
    SalePropertyMutationResponse,
    RezonePropertyMutationResponse,
]

# Interfaces whose concrete class is picked through a discriminant enum
INTERFACE_VARIANTS = {"Property": PROPERTY_VARIANTS}


def create_schema() -> strawberry.Schema:
    """Build the executable schema."""
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        types=SCHEMA_TYPES,
        extensions=[MaskErrors(should_mask_error=should_mask_error)],
    )


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(app_context: AppContext) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    from ..auth.context import build_request_context

    async def get_context(request: Request) -> dict[str, Any]:
        """Authenticate the request and build the resolver context."""
        context = await build_request_context(
            request.headers.get("authorization"), app_context
        )
        context["request"] = request
        return context

    return GraphQLRouter(
        app_context.schema,
        path=app_context.settings.graphql_path,
        graphql_ide=None if app_context.settings.is_production else "graphiql",
        context_getter=get_context,
    )
