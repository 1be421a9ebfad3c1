"""
API schemas for Product endpoints
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.product import ProductBase


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    productId: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price: float = Field(..., allow_inf_nan=False)
    featured: bool = False
    rating: Optional[float] = Field(None, ge=0, le=5, allow_inf_nan=False)
    company: str = Field(..., min_length=1)


class ProductUpdate(BaseModel):
    """Schema for a partial update; only fields sent by the client are applied"""

    model_config = ConfigDict(extra="ignore")

    productId: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, allow_inf_nan=False)
    featured: Optional[bool] = None
    rating: Optional[float] = Field(None, ge=0, le=5, allow_inf_nan=False)
    company: Optional[str] = Field(None, min_length=1)

    @field_validator("productId", "name", "price", "featured", "company")
    @classmethod
    def required_fields_not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ProductResponse(ProductBase):
    """Schema for product responses including the system identifier"""
    id: str

    model_config = ConfigDict(from_attributes=True)
