"""
GraphQL layer.

``types`` declares the ``Book`` and ``Author`` object types together
with their relationship resolvers, ``schema`` the ``Query`` and
``Mutation`` roots and ``router`` the Strawberry router that FastAPI
mounts.  Resolvers reach the store through ``info.context["store"]``.
"""
