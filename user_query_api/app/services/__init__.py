"""
Service layer abstraction.

Services hold the logic behind each query operation.  They receive the
data store they read from at construction time, so API handlers and
the GraphQL schema never touch the store directly.
"""
