"""Token database model.

Security:
    - secret: Random 32-byte hex string, unique across every stored token
    - attempts_remaining: Bounded by a CHECK constraint, only decremented
    - consumed: Flipped false -> true exactly once, by conditional UPDATE
    - ip_address/user_agent: Diagnostics only
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.core.constants import TOKEN_ATTEMPTS_MAX, TOKEN_ATTEMPTS_MIN, TOKEN_HEX_LENGTH
from src.infrastructure.persistence.base import BaseModel

LIVE_TOKEN_INDEX = "ux_tokens_live_owner_purpose"


class TokenModel(BaseModel):
    """Token row.

    Fields:
        id: UUID primary key (from BaseModel, supplied by the engine)
        created_at: Issue timestamp (from BaseModel, supplied by the engine)
        owner_id: User the token belongs to (no foreign key; owner rows
            may be removed independently)
        purpose: TokenPurpose value
        secret: 64-char hex string (unique)
        expires_at: Expiry timestamp
        attempts_remaining: Redemption attempts left
        consumed: Redeemed or invalidated
        ip_address: Requester IP (IPv4 or IPv6 text)
        user_agent: Requester user agent

    Indexes:
        - secret: unique lookup for redemption
        - ix_tokens_owner_purpose_consumed: invalidation on issue
        - ix_tokens_cleanup: (expires_at, consumed) for cleanup
        - ux_tokens_live_owner_purpose: partial unique (owner_id, purpose)
          over unconsumed rows

    Note:
        Inherits from BaseModel (NOT BaseMutableModel): rows are never
        edited through the ORM, only by conditional UPDATE statements.
    """

    __tablename__ = "tokens"

    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
        comment="User the token was issued to",
    )

    purpose: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="password_reset, email_verification or account_activation",
    )

    secret: Mapped[str] = mapped_column(
        String(TOKEN_HEX_LENGTH),
        nullable=False,
        unique=True,
        comment="Random token secret (64-char hex string)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp after which the token is rejected",
    )

    attempts_remaining: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Redemption attempts left (only decremented)",
    )

    consumed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="True once redeemed or invalidated",
    )

    ip_address: Mapped[str | None] = mapped_column(
        String(45),
        nullable=True,
        comment="IP address of requester (diagnostics)",
    )

    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="User agent of requester (diagnostics)",
    )

    __table_args__ = (
        CheckConstraint(
            f"attempts_remaining >= {TOKEN_ATTEMPTS_MIN} "
            f"AND attempts_remaining <= {TOKEN_ATTEMPTS_MAX}",
            name="ck_tokens_attempts_bounds",
        ),
        Index("ix_tokens_owner_purpose_consumed", "owner_id", "purpose", "consumed"),
        Index("ix_tokens_cleanup", "expires_at", "consumed"),
        # At most one live token per (owner, purpose), even across racing issues
        Index(
            LIVE_TOKEN_INDEX,
            "owner_id",
            "purpose",
            unique=True,
            postgresql_where=text("NOT consumed"),
            sqlite_where=text("NOT consumed"),
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<TokenModel("
            f"id={self.id}, "
            f"owner_id={self.owner_id}, "
            f"purpose={self.purpose!r}, "
            f"consumed={self.consumed}"
            f")>"
        )
