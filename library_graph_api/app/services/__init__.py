"""
Service layer.

Each service wraps one collection of the ``LibraryStore`` it is given
and implements the query and mutation operations for it.  Services
return ``None`` when an id is not found; turning that into an error
is left to the caller.
"""
