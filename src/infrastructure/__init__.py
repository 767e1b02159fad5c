"""Infrastructure layer - Adapters for domain protocols.

Structure:
- persistence/: SQLAlchemy async engine, models, repositories
- security/: bcrypt hashing, JWT session tokens, password reset tokens
- email/: Stub email delivery (structured log)
- logging/: structlog console adapter
- errors/, enums/: DatabaseError and its internal codes

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
