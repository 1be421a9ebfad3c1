"""
Product model as stored in the products collection
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


class ProductBase(BaseModel):
    """Base Product model with all stored fields"""

    productId: str
    name: str
    price: float
    featured: bool = False
    rating: Optional[float] = Field(None, ge=0, le=5)
    company: str
    createdAt: datetime = Field(default_factory=utc_now)

