"""Unit tests for the Token entity and token purposes.

Tests cover:
- Derived state (expired, exhausted, live)
- Expiry boundary (now == expires_at is still valid)
- Secret preview for logs
- Default lifetimes per purpose
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.domain.entities.token import DEFAULT_TTL, PASSWORD_RESET_TTL, ttl_for
from src.domain.enums import TokenPurpose
from tests.conftest import create_token

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.mark.unit
class TestTokenDerivedState:
    """Test expired/exhausted/live checks."""

    def test_fresh_token_is_live(self):
        token = create_token(created_at=NOW)

        assert token.is_live(NOW) is True
        assert token.is_expired(NOW) is False
        assert token.is_exhausted() is False

    def test_token_is_not_expired_at_exact_expiry(self):
        """Expiry is strict: a token is valid at expires_at itself."""
        token = create_token(created_at=NOW, expires_at=NOW + timedelta(hours=1))

        assert token.is_expired(NOW + timedelta(hours=1)) is False
        assert token.is_expired(NOW + timedelta(hours=1, microseconds=1)) is True

    def test_expired_token_is_not_live_even_with_attempts(self):
        token = create_token(
            created_at=NOW - timedelta(hours=2),
            expires_at=NOW - timedelta(hours=1),
            attempts_remaining=3,
        )

        assert token.is_expired(NOW) is True
        assert token.is_live(NOW) is False

    def test_zero_attempts_is_exhausted(self):
        token = create_token(created_at=NOW, attempts_remaining=0)

        assert token.is_exhausted() is True
        assert token.is_live(NOW) is False

    def test_consumed_token_is_not_live(self):
        token = create_token(created_at=NOW, consumed=True)

        assert token.is_live(NOW) is False

    def test_token_is_immutable(self):
        token = create_token()

        with pytest.raises(AttributeError):
            token.consumed = True  # type: ignore[misc]


@pytest.mark.unit
class TestTokenSecretPreview:
    """Test the loggable secret prefix."""

    def test_preview_is_first_eight_chars_plus_ellipsis(self):
        token = create_token(secret="abcdef01" + "0" * 56)

        assert token.secret_preview == "abcdef01..."

    def test_preview_never_contains_full_secret(self):
        token = create_token()

        assert token.secret not in token.secret_preview


@pytest.mark.unit
class TestTokenLifetimes:
    """Test default lifetimes per purpose."""

    def test_password_reset_lives_one_hour(self):
        assert ttl_for(TokenPurpose.PASSWORD_RESET) == PASSWORD_RESET_TTL
        assert PASSWORD_RESET_TTL == timedelta(hours=1)

    @pytest.mark.parametrize(
        "purpose",
        [TokenPurpose.EMAIL_VERIFICATION, TokenPurpose.ACCOUNT_ACTIVATION],
    )
    def test_other_purposes_live_one_day(self, purpose):
        assert ttl_for(purpose) == DEFAULT_TTL
        assert DEFAULT_TTL == timedelta(hours=24)

    def test_purpose_values(self):
        assert TokenPurpose.values() == [
            "password_reset",
            "email_verification",
            "account_activation",
        ]
