"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer so the JSON representation
of a product does not depend on how rows are kept in the store.
"""
