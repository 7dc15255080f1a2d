"""API Layer — FastAPI routes, dependencies, error handlers and problem-details mapping.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response is application/problem+json

Design Decisions:
    - Thin routes delegate to services; status mapping centralized in problem_details
"""
