"""Queries - Read operations that fetch data.

Each query has a corresponding handler in queries/handlers/.
"""

from src.application.queries.token_queries import ListOwnerTokens

__all__ = [
    "ListOwnerTokens",
]
