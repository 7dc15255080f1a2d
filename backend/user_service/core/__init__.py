"""Core Layer — entity, identity, error types and boundary protocols.

Invariants:
    - No IO, no framework imports (FastAPI/SQLAlchemy live in the shell)

Design Decisions:
    - Functional core / imperative shell: services orchestrate core types over protocols
"""
