"""
Explicit input validation for registration and login
"""

from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

from app.core.errors import FieldError

MIN_PASSWORD_LENGTH = 6


def is_valid_email(value: Optional[str]) -> bool:
    if not value or not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(value: str) -> str:
    """Canonical form used for storage and lookup"""
    return value.strip().lower()


def validate_registration(name: Optional[str], email: Optional[str], password: Optional[str]) -> List[FieldError]:
    """
    Check a registration request.

    Returns:
        One FieldError per failing field, empty when the input is acceptable
    """
    errors = []
    if not name or not name.strip():
        errors.append(FieldError(msg="Name is required", param="name", value=name))
    if not is_valid_email(email):
        errors.append(FieldError(msg="Please include a valid email", param="email", value=email))
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            FieldError(msg="Please enter a password with 6 or more characters", param="password")
        )
    return errors


def validate_login(email: Optional[str], password: Optional[str]) -> List[FieldError]:
    errors = []
    if not is_valid_email(email):
        errors.append(FieldError(msg="Please include a valid email", param="email", value=email))
    if password is None:
        errors.append(FieldError(msg="Password is required", param="password"))
    return errors
