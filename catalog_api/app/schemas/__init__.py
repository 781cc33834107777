"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the storage layer so that the JSON
representation (camelCase) can differ from column names (snake_case).
"""
