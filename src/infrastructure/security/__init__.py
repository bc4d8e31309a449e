"""Security infrastructure adapters.

- Password hashing (bcrypt)
- Token secret generation (cryptographic hex secrets)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.token_secret_service import TokenSecretService

__all__ = [
    "BcryptPasswordService",
    "TokenSecretService",
]
