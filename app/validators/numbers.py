"""
Numeric parsing for price/rating path and query parameters
"""

import math
from typing import Optional

from app.core.errors import FieldError, ValidationError


def parse_number(value: Optional[str], param: str, location: str = "query") -> Optional[float]:
    """
    Parse a textual numeric parameter.

    Empty or missing values yield None (filter not applied). Anything that is
    not a finite number raises ValidationError.
    """
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = None
    if number is None or not math.isfinite(number):
        raise ValidationError([
            FieldError(msg=f"{param} must be a number", param=param, location=location, value=value)
        ])
    return number
