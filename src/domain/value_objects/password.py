"""Password value object with complexity validation.

Immutable value object that validates password complexity requirements.
"""

import re
from dataclasses import dataclass

from src.core.constants import (
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHARACTERS,
)

_SPECIAL_PATTERN = re.compile(f"[{re.escape(PASSWORD_SPECIAL_CHARACTERS)}]")


@dataclass(frozen=True)
class Password:
    """Password value object with complexity validation.

    Password Requirements:
        - Between 8 and 128 characters
        - At least one lowercase letter
        - At least one uppercase letter
        - At least one digit
        - At least one special character from @$!%*?&

    Attributes:
        value: The password string (validated)

    Raises:
        ValueError: If password does not meet complexity requirements

    Example:
        >>> password = Password("SecurePass123!")
        >>> str(password)
        '**************'
        >>> Password("weak")
        Traceback (most recent call last):
        ...
        ValueError: Password must be at least 8 characters
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password complexity after initialization.

        Raises:
            ValueError: If password does not meet requirements.
        """
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            )

        if len(self.value) > PASSWORD_MAX_LENGTH:
            raise ValueError(
                f"Password must be at most {PASSWORD_MAX_LENGTH} characters"
            )

        if not re.search(r"[a-z]", self.value):
            raise ValueError("Password must contain lowercase letter")

        if not re.search(r"[A-Z]", self.value):
            raise ValueError("Password must contain uppercase letter")

        if not re.search(r"\d", self.value):
            raise ValueError("Password must contain digit")

        if not _SPECIAL_PATTERN.search(self.value):
            raise ValueError(
                f"Password must contain one of {PASSWORD_SPECIAL_CHARACTERS}"
            )

    def __str__(self) -> str:
        """Return masked password so it never reaches logs."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
