"""
Schemas module initialization
"""

from .product import ProductCreate, ProductUpdate, ProductResponse
from .user import RegisterRequest, LoginRequest, TokenResponse, MessageResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "MessageResponse",
]
