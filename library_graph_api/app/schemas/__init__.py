"""
Pydantic schema definitions for author and book payloads.

Schemas are separated from the store records to decouple what the
services accept and return from how the store keeps its data.
"""
