"""
Authentication dependencies for FastAPI
Provides bearer token validation and user extraction
"""

from typing import Optional

from fastapi import Depends, Header, Request

from app.core.config import Config
from app.core.errors import AuthError
from app.core.logger import logger
from app.models.user import CurrentUser
from app.services.token import TokenService

NO_TOKEN_MESSAGE = "No token, authorization denied"


def get_app_config(request: Request) -> Config:
    """Configuration built at startup and stored on the application"""
    return request.app.state.config


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a "Bearer <token>" header value, or None"""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def redact_token(token: Optional[str]) -> str:
    """Short fingerprint safe to write to logs"""
    if not token:
        return "<none>"
    return f"{token[:6]}..."


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Dependency to extract and validate current user from the bearer token.
    Raises 401 if authentication fails; the protected handler never runs.

    Usage:
        @router.post("/")
        async def create_item(user: CurrentUser = Depends(get_current_user)):
            # user is authenticated
            pass
    """
    token = extract_bearer_token(authorization)
    logger.debug("Received token", metadata={"token": redact_token(token)})

    if not token:
        logger.warning("Authentication required: No token provided")
        raise AuthError(NO_TOKEN_MESSAGE)

    payload = tokens.verify(token)

    user = CurrentUser(id=payload["user"]["id"])
    request.state.user = user
    logger.debug(f"Authentication successful for user: {user.id}")

    return user
