"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The in‑memory entity store lives in ``core``, the
request/response payloads in ``schemas``, the query and mutation
logic in ``services`` and the GraphQL types and root fields in
``graphql``.  Plain REST routes (currently only the health check)
are grouped under ``api/<version>/``.
"""

from .main import app  # noqa: F401
