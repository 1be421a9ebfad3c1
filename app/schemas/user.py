"""
API schemas for registration, login and plain acknowledgements.

Request bodies are deliberately loose; field rules live in app.validators.auth
so failures come back as one list of field errors.
"""

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    msg: str
    token: str


class MessageResponse(BaseModel):
    msg: str
