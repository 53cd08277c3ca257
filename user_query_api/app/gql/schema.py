"""
GraphQL schema for the user queries.

The schema is described explicitly: ``build_operations`` returns a
mapping from operation name to a :class:`QueryOperation` holding the
argument types, the output type and the handler that calls the query
service.  ``build_schema`` turns that mapping into the query root of a
``graphql-core`` schema.  There is no mutation or subscription root, so
documents using either are rejected before any handler runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLSchema,
    GraphQLString,
    graphql,
)

from ..services.user_service import UserQueryService


logger = logging.getLogger(__name__)


UserType = GraphQLObjectType(
    "User",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "name": GraphQLField(GraphQLNonNull(GraphQLString)),
        "email": GraphQLField(GraphQLString),
    },
    description="A user record.",
)


@dataclass(frozen=True)
class QueryOperation:
    """One field of the query root."""

    name: str
    output_type: GraphQLOutputType
    handler: Callable[..., Any]
    args: Dict[str, GraphQLArgument] = field(default_factory=dict)
    description: Optional[str] = None

    def to_field(self) -> GraphQLField:
        # graphql-core calls resolvers as (root, info, **arguments).
        handler = self.handler

        def resolve(_root: Any, _info: Any, **arguments: Any) -> Any:
            return handler(**arguments)

        return GraphQLField(self.output_type, args=self.args, resolve=resolve, description=self.description)


def build_operations(service: UserQueryService) -> Dict[str, QueryOperation]:
    """Describe the supported queries and bind them to ``service``."""
    operations = [
        QueryOperation(
            name="getUser",
            output_type=UserType,
            handler=lambda id: service.get_user(id),
            args={"id": GraphQLArgument(GraphQLNonNull(GraphQLString))},
            description="Look up a single user by identifier; null when no user matches.",
        ),
        QueryOperation(
            name="getUsers",
            output_type=GraphQLNonNull(GraphQLList(GraphQLNonNull(UserType))),
            handler=service.get_users,
            description="All users in store order.",
        ),
    ]
    return {operation.name: operation for operation in operations}


def build_schema(service: UserQueryService) -> GraphQLSchema:
    """Build the executable schema for ``service``."""
    operations = build_operations(service)
    query = GraphQLObjectType(
        "Query",
        {name: operation.to_field() for name, operation in operations.items()},
    )
    logger.debug("Built GraphQL schema with operations: %s", ", ".join(operations))
    return GraphQLSchema(query=query)


async def execute_query(
    schema: GraphQLSchema,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Execute ``query`` against ``schema`` and return the formatted result.

    Parse and validation failures are not raised; like any other
    GraphQL error they are reported under the ``errors`` key.
    """
    result = await graphql(
        schema,
        query,
        variable_values=variables,
        operation_name=operation_name,
    )
    return result.formatted
