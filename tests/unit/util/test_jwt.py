"""Unit tests for JWT helpers."""

import pytest

from skillswap.config import AuthSettings
from skillswap.domain.service import JWTService
from skillswap.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough-for-hs256")


class TestTokens:
    def test_round_trip_carries_principal(self):
        token = create_token("abc", "Ada", "account", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.sub == "abc"
        assert payload.name == "Ada"
        assert payload.kind == "account"

    def test_expired_token(self):
        expired = SETTINGS.model_copy(update={"jwt_expiry_days": -1})
        token = create_token("abc", "Ada", "account", expired)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_foreign_signature(self):
        other = SETTINGS.model_copy(
            update={"jwt_secret": "another-secret-that-is-also-long-enough-for-hs256"}
        )
        token = create_token("abc", "Ada", "account", other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)


class TestGetPrincipal:
    def test_kind_must_match(self):
        """An account token is never accepted as an admin token."""
        jwt_service = JWTService(SETTINGS)
        token = jwt_service.create_token("abc", "Ada", "account")

        assert jwt_service.get_principal(token, "account").sub == "abc"
        assert jwt_service.get_principal(token, "admin") is None

    def test_missing_or_garbage_token(self):
        jwt_service = JWTService(SETTINGS)

        assert jwt_service.get_principal(None, "account") is None
        assert jwt_service.get_principal("garbage", "account") is None
