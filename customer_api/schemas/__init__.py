"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Storage types (ObjectId, BSON datetime) never appear in a schema
"""
