"""
Version 1 of the API.

Bundles the GraphQL endpoint.  Breaking changes to the transport
should go into a new version subpackage.
"""
