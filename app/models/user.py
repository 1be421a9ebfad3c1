"""
User models: stored credentials and the identity carried by a token
"""

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Identity decoded from a verified bearer token"""

    id: str


class UserInDB(BaseModel):
    """User document as persisted; password holds the one-way hash"""

    id: str
    name: str
    email: str
    password: str
