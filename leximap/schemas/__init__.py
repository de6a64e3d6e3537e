"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas validate at system boundary (API responses)
    - Built from core domain records, never the other way round
"""
