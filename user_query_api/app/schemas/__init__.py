"""
Pydantic schema definitions.

``user`` holds the record model served by the store and ``graphql``
holds the request and response payloads of the GraphQL endpoint.
"""
