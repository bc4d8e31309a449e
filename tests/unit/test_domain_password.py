"""Unit tests for the Password value object.

Tests cover:
- Accepted passwords
- Each complexity rule and its error message
- Masked string representations
"""

import pytest

from src.domain.value_objects import Password


@pytest.mark.unit
class TestPasswordValidation:
    """Test password complexity rules."""

    @pytest.mark.parametrize(
        "value",
        ["SecurePass123!", "Aa1@aaaa", "Zz9&" + "z" * 124],
    )
    def test_valid_passwords_are_accepted(self, value):
        assert Password(value).value == value

    @pytest.mark.parametrize(
        ("value", "message"),
        [
            ("Aa1@", "at least 8 characters"),
            ("Aa1@" + "a" * 125, "at most 128 characters"),
            ("SECURE123!", "lowercase"),
            ("secure123!", "uppercase"),
            ("SecurePass!", "digit"),
            ("SecurePass123", "one of @\\$!%\\*\\?&"),
            ("SecurePass123#", "one of @\\$!%\\*\\?&"),
        ],
    )
    def test_invalid_passwords_raise_value_error(self, value, message):
        with pytest.raises(ValueError, match=message):
            Password(value)


@pytest.mark.unit
class TestPasswordMasking:
    """Test that password text never leaks through str/repr."""

    def test_str_is_masked(self):
        assert str(Password("SecurePass123!")) == "*" * 14

    def test_repr_is_masked(self):
        assert "SecurePass123!" not in repr(Password("SecurePass123!"))
