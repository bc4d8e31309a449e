"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from src.infrastructure.persistence.models.token import TokenModel
from src.infrastructure.persistence.models.user import UserModel

__all__ = [
    "TokenModel",
    "UserModel",
]
