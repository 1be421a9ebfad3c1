"""
Validators package
"""

from .auth import validate_registration, validate_login, normalize_email
from .numbers import parse_number

__all__ = [
    "validate_registration",
    "validate_login",
    "normalize_email",
    "parse_number",
]
