"""Services Layer — application use-cases.

Invariants:
    - One use-case class per business action, each with a single async execute()
    - Use-cases depend on core Protocols only, never on SQLAlchemy or FastAPI

Design Decisions:
    - Read use-cases grouped in one file; CreateUser alone since it holds the only rule
"""
