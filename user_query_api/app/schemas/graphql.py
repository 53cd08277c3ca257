"""
Payload models for the GraphQL endpoint.

The request body follows the usual GraphQL-over-HTTP JSON shape.  The
response mirrors what the GraphQL engine produces: ``data`` is always
present (possibly ``null``) and ``errors`` only when something went
wrong.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class GraphQLRequest(BaseModel):
    """Body of a ``POST`` to the GraphQL endpoint."""

    query: str = Field(..., example="{ getUser(id: \"1\") { id name } }")
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(None, alias="operationName")

    model_config = {
        "populate_by_name": True,
    }


class GraphQLResponse(BaseModel):
    """Result of executing a GraphQL document."""

    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None
