"""GraphQL schema definition and execution helpers."""
