"""
Services module initialization
"""

from .product import ProductService
from .token import TokenService
from .user import UserService

__all__ = [
    "ProductService",
    "TokenService",
    "UserService",
]
