"""Tests for the session token codec."""

import string
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from src.athlete_analytics.core.config import get_settings
from src.athlete_analytics.core.security import (
    NoExpirationClaim,
    TokenDecodeError,
    TokenExpired,
    TokenMalformed,
    issue_token,
    peek_expiration,
    validate_token,
)
from src.athlete_analytics.models import Role

pytestmark = pytest.mark.unit

ISSUED = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


def _sign(payload: dict) -> str:
    settings = get_settings()
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


class TestRoundTrip:
    """Issued tokens decode back to their inputs."""

    def test_claims_match_inputs(self):
        """Claims carry the principal and exp == iat + ttl."""
        token = issue_token(42, "coach@example.com", Role.COACH, ttl=timedelta(hours=1), now=ISSUED)

        claims = validate_token(token, now=ISSUED + timedelta(minutes=5))

        assert claims.principal_id == 42
        assert claims.email == "coach@example.com"
        assert claims.role == Role.COACH
        assert claims.issued_at == int(ISSUED.timestamp())
        assert claims.expires_at == claims.issued_at + 3600

    def test_wire_claim_names(self):
        """Tokens use userId, email, role, iat and exp."""
        token = issue_token(7, "a@example.com", "athlete", ttl=timedelta(minutes=1), now=ISSUED)
        payload = jwt.get_unverified_claims(token)
        assert set(payload) == {"userId", "email", "role", "iat", "exp"}
        assert payload["role"] == "athlete"

    def test_three_segment_format(self):
        token = issue_token(1, "a@example.com", Role.ADMIN)
        assert token.count(".") == 2

    def test_default_ttl_from_settings(self):
        """Without ttl the configured expiry is used."""
        token = issue_token(1, "a@example.com", Role.ADMIN, now=ISSUED)
        claims = validate_token(token, now=ISSUED)
        expected = get_settings().access_token_expire_minutes * 60
        assert claims.expires_at - claims.issued_at == expected

    def test_tokens_differ_across_instants(self):
        first = issue_token(1, "a@example.com", Role.ADMIN, now=ISSUED)
        second = issue_token(1, "a@example.com", Role.ADMIN, now=ISSUED + timedelta(seconds=1))
        assert first != second


class TestExpiry:
    """Validity ends exactly at exp."""

    def test_valid_one_second_before_expiry(self):
        token = issue_token(1, "a@example.com", Role.ADMIN, ttl=timedelta(seconds=60), now=ISSUED)
        validate_token(token, now=ISSUED + timedelta(seconds=59))

    def test_expired_at_exact_expiry(self):
        """now == exp is already expired."""
        token = issue_token(1, "a@example.com", Role.ADMIN, ttl=timedelta(seconds=60), now=ISSUED)
        with pytest.raises(TokenExpired, match="Token has expired"):
            validate_token(token, now=ISSUED + timedelta(seconds=60))

    def test_expired_after_expiry(self):
        token = issue_token(1, "a@example.com", Role.ADMIN, ttl=timedelta(seconds=60), now=ISSUED)
        with pytest.raises(TokenExpired):
            validate_token(token, now=ISSUED + timedelta(days=1))

    def test_naive_now_is_treated_as_utc(self):
        token = issue_token(1, "a@example.com", Role.ADMIN, ttl=timedelta(seconds=60), now=ISSUED)
        with pytest.raises(TokenExpired):
            validate_token(token, now=ISSUED.replace(tzinfo=None) + timedelta(seconds=61))


class TestMalformed:
    """Anything not signed by this server is TokenMalformed, never TokenExpired."""

    def test_garbage(self):
        with pytest.raises(TokenMalformed, match="Invalid token"):
            validate_token("not-a-token")

    def test_tampered_signature(self):
        """Flipping a signature character fails verification."""
        token = issue_token(1, "a@example.com", Role.ADMIN)
        header, payload, signature = token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
        with pytest.raises(TokenMalformed):
            validate_token(f"{header}.{payload}.{flipped}")

    def test_tampered_last_signature_character(self):
        """Every other value of the final character is rejected, including ones that
        decode to the same signature bytes."""
        token = issue_token(1, "a@example.com", Role.ADMIN)
        header, payload, signature = token.split(".")
        alphabet = string.ascii_letters + string.digits + "-_"

        accepted = []
        for char in alphabet:
            if char == signature[-1]:
                continue
            try:
                validate_token(f"{header}.{payload}.{signature[:-1]}{char}")
            except TokenMalformed:
                continue
            accepted.append(char)

        assert accepted == []

    def test_padded_signature_rejected(self):
        token = issue_token(1, "a@example.com", Role.ADMIN)
        with pytest.raises(TokenMalformed):
            validate_token(token + "=")

    def test_wrong_secret(self):
        token = jwt.encode(
            {"userId": 1, "email": "a@example.com", "role": "admin", "iat": 0, "exp": 2**31},
            "another-secret-that-is-at-least-32-characters",
            algorithm="HS256",
        )
        with pytest.raises(TokenMalformed):
            validate_token(token)

    def test_expired_token_with_wrong_secret_is_malformed(self):
        """Signature is checked before expiry."""
        token = jwt.encode(
            {"userId": 1, "email": "a@example.com", "role": "admin", "iat": 0, "exp": 1},
            "another-secret-that-is-at-least-32-characters",
            algorithm="HS256",
        )
        with pytest.raises(TokenMalformed):
            validate_token(token)

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "a@example.com", "role": "admin", "iat": 0, "exp": 2**31},
            {"userId": "1", "email": "a@example.com", "role": "admin", "iat": 0, "exp": 2**31},
            {"userId": 1, "email": "a@example.com", "role": "superuser", "iat": 0, "exp": 2**31},
            {"userId": 1, "email": "a@example.com", "role": "admin", "iat": 0},
        ],
        ids=["missing-user-id", "string-user-id", "unknown-role", "missing-exp"],
    )
    def test_unusable_claims(self, payload):
        with pytest.raises(TokenMalformed):
            validate_token(_sign(payload))


class TestPeekExpiration:
    def test_reads_exp_without_verifying(self):
        """A token signed with another key still yields its exp."""
        exp = int(ISSUED.timestamp())
        token = jwt.encode({"exp": exp}, "some-other-key-of-sufficient-length!!", algorithm="HS256")
        assert peek_expiration(token) == ISSUED

    def test_missing_exp(self):
        with pytest.raises(NoExpirationClaim, match="Token does not have expiration"):
            peek_expiration(_sign({"userId": 1}))

    def test_unparseable(self):
        with pytest.raises(TokenDecodeError, match="Failed to get token expiration"):
            peek_expiration("garbage")

    def test_matches_issued_expiry(self):
        token = issue_token(1, "a@example.com", Role.ADMIN, ttl=timedelta(hours=2), now=ISSUED)
        assert peek_expiration(token) == ISSUED + timedelta(hours=2)
