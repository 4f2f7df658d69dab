"""
API package containing versioned REST routes.

The GraphQL endpoint is mounted separately by ``create_app``; the
routes here are plain HTTP helpers such as the health check.
"""
