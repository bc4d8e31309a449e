"""Result types for railway-oriented programming.

Operations that can fail in an expected way (a token that is not found, an
expired token, a store that is down) return a Result instead of raising.
Callers branch on the variant with structural pattern matching.

Usage:
    result = await engine.validate_for_redemption(secret)
    match result:
        case Success(value=token):
            ...
        case Failure(error=error):
            logger.info("Token rejected", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value (may be None for commands with no output).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
