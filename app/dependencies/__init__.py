"""
Dependencies module initialization
"""

from .auth import get_current_user, get_app_config, get_token_service
from .product import get_product_service, get_user_service

__all__ = [
    "get_current_user",
    "get_app_config",
    "get_token_service",
    "get_product_service",
    "get_user_service",
]
