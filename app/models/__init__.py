"""
Models module initialization
"""

from .product import ProductBase
from .user import CurrentUser, UserInDB

__all__ = [
    "ProductBase",
    "CurrentUser",
    "UserInDB",
]
