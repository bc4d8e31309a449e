"""Token queries (CQRS read operations).

Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListOwnerTokens:
    """List every token issued to a user, newest first.

    Attributes:
        owner_id: User identifier.

    Example:
        >>> query = ListOwnerTokens(owner_id=UUID("0190..."))
        >>> result = await handler.handle(query)
    """

    owner_id: UUID
