"""
Repositories module initialization
"""

from .product import ProductRepository
from .user import UserRepository

__all__ = [
    "ProductRepository",
    "UserRepository",
]
