"""Tests for the credential verifier."""

import pytest

from src.athlete_analytics.core.security import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    password_needs_rehash,
    verify_password,
)

pytestmark = pytest.mark.unit


def test_hash_then_verify():
    hashed = hash_password("Secret123!")
    assert hashed != "Secret123!"
    assert verify_password("Secret123!", hashed) is True


def test_wrong_password():
    assert verify_password("Wrong123!", hash_password("Secret123!")) is False


def test_hashes_are_salted():
    assert hash_password("Secret123!") != hash_password("Secret123!")


@pytest.mark.parametrize("hashed", ["", "not-a-hash", "$argon2id$garbage"])
def test_malformed_hash_is_false(hashed):
    """Bad stored hashes never raise."""
    assert verify_password("Secret123!", hashed) is False


def test_empty_secret_is_false():
    assert verify_password("", hash_password("Secret123!")) is False


def test_dummy_hash_never_matches_guesses():
    assert verify_password("admin123", DUMMY_PASSWORD_HASH) is False


def test_fresh_hash_needs_no_rehash():
    assert password_needs_rehash(hash_password("Secret123!")) is False
