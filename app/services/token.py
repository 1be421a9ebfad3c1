"""
Bearer token issuance and verification (HS256 JWT)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.core.config import Config
from app.core.errors import InvalidToken
from app.core.logger import logger


class TokenService:
    """Signs and verifies tokens carrying {"user": {"id": ...}}"""

    def __init__(self, config: Config):
        self.secret = config.jwt_secret
        self.algorithm = config.jwt_algorithm
        self.expires_in = timedelta(seconds=config.jwt_expiration)

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Create a token for user_id that expires expires_in after issuance"""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user": {"id": str(user_id)},
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        """
        Decode and validate a token

        Returns:
            Decoded token payload

        Raises:
            InvalidToken: If the token is malformed, tampered with or expired
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.warning("Token verification failed: expired")
            raise InvalidToken()
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {type(e).__name__}")
            raise InvalidToken()

        user = payload.get("user")
        if not isinstance(user, dict) or not user.get("id"):
            logger.warning("Token verification failed: missing user identifier")
            raise InvalidToken()

        return payload
