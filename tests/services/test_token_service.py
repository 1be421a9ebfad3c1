"""Tests for TokenService"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.errors import InvalidToken
from app.services.token import TokenService


class TestTokenService:
    """Issue and verify bearer tokens"""

    def test_issue_then_verify_returns_user_id(self, token_service):
        """A fresh token decodes to the identifier it was issued for"""
        token = token_service.issue("507f1f77bcf86cd799439011")

        payload = token_service.verify(token)

        assert payload["user"] == {"id": "507f1f77bcf86cd799439011"}

    def test_token_expires_after_one_hour(self, token_service):
        """exp is one hour after iat"""
        token = token_service.issue("user-1")
        payload = token_service.verify(token)

        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token_rejected(self, token_service):
        """Tokens issued more than an hour ago fail verification"""
        issued = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
        token = token_service.issue("user-1", now=issued)

        with pytest.raises(InvalidToken):
            token_service.verify(token)

    def test_tampered_signature_rejected(self, token_service, test_config):
        """A token signed with another secret is invalid"""
        other = TokenService(test_config.model_copy(update={"jwt_secret": "another-secret"}))
        token = other.issue("user-1")

        with pytest.raises(InvalidToken):
            token_service.verify(token)

    def test_malformed_token_rejected(self, token_service):
        with pytest.raises(InvalidToken):
            token_service.verify("not-a-jwt")

    def test_payload_without_user_rejected(self, token_service, test_config):
        """Signed tokens missing user.id are not accepted"""
        token = jwt.encode(
            {"sub": "user-1", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            test_config.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidToken):
            token_service.verify(token)
