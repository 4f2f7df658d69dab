"""
Strawberry router exposing the schema over HTTP.

The router is built per application so that each app serves its own
store: ``context_getter`` closes over the store and Strawberry merges
the returned dict into the default request context.
"""

from typing import Any, Dict

from strawberry.fastapi import GraphQLRouter

from ..core.store import LibraryStore
from .schema import schema


def create_graphql_router(store: LibraryStore, graphiql: bool = True) -> GraphQLRouter:
    """Return a router serving ``schema`` against ``store``.

    With ``graphiql`` enabled, a browser ``GET`` on the mount path
    returns the GraphiQL explorer.
    """

    async def get_context() -> Dict[str, Any]:
        return {"store": store}

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
