"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, Database handle, repositories
- security/: bcrypt hashing, token secret generation
- logging/: structlog adapter
- email/: email delivery adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
