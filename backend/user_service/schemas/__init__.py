"""Schemas — Pydantic models for request/response validation at API boundaries.

Invariants:
    - Schemas never touch the database
    - Entities cross the boundary only through from_entity / to_input converters
"""
