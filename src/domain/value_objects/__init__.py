"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.password import Password

__all__ = [
    "Password",
]
