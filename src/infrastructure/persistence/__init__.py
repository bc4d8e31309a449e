"""Database persistence infrastructure.

- Declarative bases for all models
- Database engine and session management
- Repository implementations (adapters for domain protocols)
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
