"""
Error kinds surfaced to GraphQL clients.

Only one error is raised by our own code: ``NotFoundError``, when an
update or delete mutation references an id that is not in the store.
Argument validation failures (missing required arguments, wrong
types) are produced by graphql-core's coercion before any resolver
runs, so there is no class for them here.

``NotFoundError`` subclasses ``GraphQLError`` so the code in
``extensions`` is kept when graphql-core locates the error on the
failing field.
"""

from graphql import GraphQLError

NOT_FOUND = "NOT_FOUND"


class NotFoundError(GraphQLError):
    """Raised by a mutation resolver for a missing Author or Book."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(
            f"{entity} not found",
            extensions={"code": NOT_FOUND, "id": entity_id},
        )
