"""
Pydantic schema definitions for API payloads.

Schemas are separated from the ORM models to decouple the API
representation from persistence.
"""
