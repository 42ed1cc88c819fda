"""Tests for the password strength policy."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from src.athlete_analytics.core.security import (
    password_strength_errors,
    validate_password_strength,
)
from src.athlete_analytics.core.security.validators import PASSWORD_SPECIAL_CHARACTERS
from src.athlete_analytics.schemas.user import PasswordChange, UserCreate

pytestmark = pytest.mark.unit


class TestPasswordStrength:
    def test_strong_password_passes(self):
        assert password_strength_errors("StrongPass1!") == []
        assert validate_password_strength("StrongPass1!") == "StrongPass1!"

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Sh0rt!", "Password must be at least 8 characters long"),
            ("lowercase1!", "Password must contain at least one uppercase letter"),
            ("UPPERCASE1!", "Password must contain at least one lowercase letter"),
            ("NoDigitsHere!", "Password must contain at least one number"),
            ("NoSpecial123", "Password must contain at least one special character"),
        ],
    )
    def test_each_rule(self, password, message):
        assert message in password_strength_errors(password)

    def test_too_long(self):
        password = "Aa1!" * 33
        assert "Password must be less than 128 characters" in password_strength_errors(password)

    def test_boundaries(self):
        assert password_strength_errors("Abcdef1!") == []
        assert password_strength_errors("Aa1!" * 32) == []

    def test_reports_every_broken_rule(self):
        errors = password_strength_errors("")
        assert len(errors) == 5

    def test_validator_joins_messages(self):
        with pytest.raises(ValueError, match="uppercase letter; .*special character"):
            validate_password_strength("lowercase1")

    @given(
        body=st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=5, max_size=100),
        special=st.sampled_from(sorted(PASSWORD_SPECIAL_CHARACTERS)),
    )
    def test_any_conforming_password_accepted(self, body, special):
        assert password_strength_errors(f"A{body}1{special}") == []


class TestSchemaBoundary:
    """The policy is applied where requests are validated."""

    def test_user_create_rejects_weak_password(self):
        with pytest.raises(ValidationError):
            UserCreate(
                email="new@example.com",
                password="weak",
                first_name="New",
                last_name="User",
                tenant_unique_id="new_user",
            )

    def test_password_change_rejects_weak_new_password(self):
        with pytest.raises(ValidationError):
            PasswordChange(new_password="password")
