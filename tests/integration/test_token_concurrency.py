"""Integration tests for racing token operations.

Tests cover:
- Concurrent issue for one owner leaves exactly one live token
- Concurrent password reset confirms with one secret have a single winner,
  and only the winner's password is stored
- Concurrent failed attempts converge to max(0, attempts - n)

Architecture:
- Every concurrent call opens its own session on the same SQLite file, so
  each runs on its own connection like separate requests would
- asyncio.gather drives the calls; outcomes are asserted for any
  interleaving
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import ConfirmPasswordReset
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from src.application.services.token_engine import TokenEngine
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenPurpose
from src.infrastructure.persistence.repositories import (
    TokenRepository,
    UserRepository,
)
from src.infrastructure.security import BcryptPasswordService, TokenSecretService
from tests.conftest import TEST_BCRYPT_ROUNDS, create_token, create_user

OLD_PASSWORD = "OldSecurePass123!"
FIRST_PASSWORD = "FirstSecurePass1!"
SECOND_PASSWORD = "SecondSecurePass2!"


def _engine(session, logger) -> TokenEngine:
    return TokenEngine(
        token_repo=TokenRepository(session=session),
        secret_service=TokenSecretService(),
        logger=logger,
    )


async def _issue_in_own_session(test_database, logger, owner_id):
    async with test_database.get_session() as session:
        return await _engine(session, logger).issue(
            owner_id, TokenPurpose.PASSWORD_RESET
        )


async def _record_attempt_in_own_session(test_database, logger, token_id):
    async with test_database.get_session() as session:
        return await _engine(session, logger).record_failed_attempt(token_id)


async def _confirm_in_own_session(
    test_database, logger, password_service, secret, new_password
):
    async with test_database.get_session() as session:
        handler = ConfirmPasswordResetHandler(
            user_repo=UserRepository(session=session),
            token_engine=_engine(session, logger),
            password_service=password_service,
            email_service=AsyncMock(),
            logger=logger,
        )
        return await handler.handle(
            ConfirmPasswordReset(token=secret, new_password=new_password)
        )


async def _tokens_of(test_database, owner_id):
    async with test_database.get_session() as session:
        result = await TokenRepository(session=session).find_by_owner(owner_id)
    return result.value


@pytest.mark.integration
class TestConcurrentIssue:
    """Racing issue calls for the same owner and purpose."""

    async def test_two_issues_leave_one_live_token(self, test_database, mock_logger):
        owner_id = uuid7()

        results = await asyncio.gather(
            _issue_in_own_session(test_database, mock_logger, owner_id),
            _issue_in_own_session(test_database, mock_logger, owner_id),
        )

        assert all(isinstance(result, Success) for result in results)
        tokens = await _tokens_of(test_database, owner_id)
        assert len(tokens) == 2
        live = [token for token in tokens if not token.consumed]
        assert len(live) == 1
        assert live[0].id in {result.value.id for result in results}

    async def test_only_live_token_secret_redeems(self, test_database, mock_logger):
        owner_id = uuid7()

        results = await asyncio.gather(
            *(
                _issue_in_own_session(test_database, mock_logger, owner_id)
                for _ in range(3)
            )
        )

        async with test_database.get_session() as session:
            engine = _engine(session, mock_logger)
            redeemable = [
                result.value.id
                for result in results
                if isinstance(
                    await engine.validate_for_redemption(result.value.secret),
                    Success,
                )
            ]
        assert len(redeemable) == 1


@pytest.mark.integration
class TestConcurrentConfirm:
    """Racing password reset confirms presenting the same secret."""

    async def test_single_winner_and_winner_password_stored(
        self, test_database, mock_logger
    ):
        password_service = BcryptPasswordService(cost_factor=TEST_BCRYPT_ROUNDS)
        user = create_user(password_hash=password_service.hash_password(OLD_PASSWORD))
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)
        issued = await _issue_in_own_session(test_database, mock_logger, user.id)
        secret = issued.value.secret

        first, second = await asyncio.gather(
            _confirm_in_own_session(
                test_database, mock_logger, password_service, secret, FIRST_PASSWORD
            ),
            _confirm_in_own_session(
                test_database, mock_logger, password_service, secret, SECOND_PASSWORD
            ),
        )

        outcomes = {FIRST_PASSWORD: first, SECOND_PASSWORD: second}
        winners = [pw for pw, result in outcomes.items() if isinstance(result, Success)]
        losers = [result for result in outcomes.values() if isinstance(result, Failure)]
        assert len(winners) == 1
        assert len(losers) == 1
        assert losers[0].error.code == ErrorCode.TOKEN_NOT_FOUND

        async with test_database.get_session() as session:
            stored = await UserRepository(session=session).find_by_id(user.id)
        [winner_password] = winners
        loser_password = (
            SECOND_PASSWORD if winner_password == FIRST_PASSWORD else FIRST_PASSWORD
        )
        assert password_service.verify_password(winner_password, stored.password_hash)
        assert not password_service.verify_password(
            loser_password, stored.password_hash
        )

    async def test_token_consumed_once(self, test_database, mock_logger):
        password_service = BcryptPasswordService(cost_factor=TEST_BCRYPT_ROUNDS)
        user = create_user(password_hash=password_service.hash_password(OLD_PASSWORD))
        async with test_database.get_session() as session:
            await UserRepository(session=session).save(user)
        issued = await _issue_in_own_session(test_database, mock_logger, user.id)

        await asyncio.gather(
            *(
                _confirm_in_own_session(
                    test_database,
                    mock_logger,
                    password_service,
                    issued.value.secret,
                    FIRST_PASSWORD,
                )
                for _ in range(3)
            )
        )

        consumed_logs = [
            call.kwargs["applied"]
            for call in mock_logger.info.call_args_list
            if call.args and call.args[0] == "Token consumed"
        ]
        assert consumed_logs.count(True) == 1
        [token] = await _tokens_of(test_database, user.id)
        assert token.consumed is True


@pytest.mark.integration
class TestConcurrentFailedAttempts:
    """Racing record_failed_attempt calls on one token."""

    @pytest.mark.parametrize(("calls", "expected"), [(2, 1), (3, 0), (5, 0)])
    async def test_attempts_converge_without_overshoot(
        self, test_database, mock_logger, calls, expected
    ):
        token = create_token(attempts_remaining=3)
        async with test_database.get_session() as session:
            await TokenRepository(session=session).save(token)

        results = await asyncio.gather(
            *(
                _record_attempt_in_own_session(test_database, mock_logger, token.id)
                for _ in range(calls)
            )
        )

        assert results == [Success(value=None)] * calls
        [stored] = await _tokens_of(test_database, token.owner_id)
        assert stored.attempts_remaining == expected
