"""
GraphQL endpoint for API v1.

A single ``POST`` route accepts GraphQL documents and answers them with
the schema built in ``create_app``.  Bodies that are not a valid
GraphQL request payload are rejected by FastAPI with HTTP 422.
Errors inside the document (syntax, unknown fields, mutations) are
returned with HTTP 200 in the ``errors`` array of the response.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from graphql import GraphQLSchema, print_schema

from user_query_api.app.gql.schema import execute_query
from user_query_api.app.schemas.graphql import GraphQLRequest, GraphQLResponse


logger = logging.getLogger(__name__)

router = APIRouter()


def get_schema(request: Request) -> GraphQLSchema:
    """Return the schema registered on the application at startup."""
    return request.app.state.graphql_schema


@router.post("", response_model=GraphQLResponse)
async def run_query(payload: GraphQLRequest, schema: GraphQLSchema = Depends(get_schema)) -> JSONResponse:
    """Execute a GraphQL query and return its result.

    ``getUser`` with an unknown id yields ``{"data": {"getUser": null}}``
    without errors.
    """
    result = await execute_query(
        schema,
        payload.query,
        variables=payload.variables,
        operation_name=payload.operation_name,
    )
    if result.get("errors"):
        logger.warning("GraphQL request failed: %s", [error["message"] for error in result["errors"]])
    # Returned as is so that null fields inside ``data`` are kept.
    return JSONResponse(content=result)


@router.get("/schema", response_class=PlainTextResponse)
async def get_schema_sdl(schema: GraphQLSchema = Depends(get_schema)) -> str:
    """Return the schema in GraphQL SDL."""
    return print_schema(schema)
