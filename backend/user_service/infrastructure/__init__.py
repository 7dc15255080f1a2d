"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports infrastructure
    - All storage calls wrapped with error mapping to typed core errors

Design Decisions:
    - Session lifecycle owned by DatabaseSessionManager; repositories only borrow sessions
"""
