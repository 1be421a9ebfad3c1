"""
Product API endpoints: credentials, product CRUD and filtered listings
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.errors import ErrorResponseModel
from app.dependencies.auth import get_current_user
from app.dependencies.product import get_product_service, get_user_service
from app.models.user import CurrentUser
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.schemas.user import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from app.services.product import ProductService
from app.services.user import UserService
from app.validators.numbers import parse_number

router = APIRouter()

AUTH_RESPONSES = {401: {"model": ErrorResponseModel}}
NOT_FOUND_RESPONSES = {401: {"model": ErrorResponseModel}, 404: {"model": ErrorResponseModel}}


# Credentials
@router.post(
    "/register",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponseModel}},
    tags=["auth"],
)
async def register(
    payload: RegisterRequest,
    service: UserService = Depends(get_user_service),
):
    """
    Register a user and return a token valid for one hour.
    """
    return await service.register(payload)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponseModel}},
    tags=["auth"],
)
async def login(
    payload: LoginRequest,
    service: UserService = Depends(get_user_service),
):
    """
    Exchange email and password for a token.
    """
    return await service.login(payload)


@router.post("/logout", response_model=MessageResponse, responses=AUTH_RESPONSES, tags=["auth"])
async def logout(user: CurrentUser = Depends(get_current_user)):
    """
    Acknowledge a logout. Tokens are stateless, so nothing is revoked here;
    clients discard the token.
    """
    return MessageResponse(msg="Logged out successfully")


# Product CRUD
@router.post("/createProduct", response_model=ProductResponse, responses=AUTH_RESPONSES)
async def create_product(
    product: ProductCreate,
    user: CurrentUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product. Requires authentication.
    """
    return await service.create_product(product, created_by=user.id)


@router.get("/", response_model=List[ProductResponse])
@router.get("", response_model=List[ProductResponse], include_in_schema=False)
async def list_products(service: ProductService = Depends(get_product_service)):
    """
    List every product.
    """
    return await service.list_products()


@router.get("/featured", response_model=List[ProductResponse])
async def list_featured(service: ProductService = Depends(get_product_service)):
    return await service.list_featured()


@router.get("/price/{value}", response_model=List[ProductResponse])
async def list_price_below(value: str, service: ProductService = Depends(get_product_service)):
    """
    Products with price strictly below value.
    """
    return await service.list_price_below(parse_number(value, "value", location="path"))


@router.get("/rating/{value}", response_model=List[ProductResponse])
async def list_rating_above(value: str, service: ProductService = Depends(get_product_service)):
    """
    Products with rating strictly above value.
    """
    return await service.list_rating_above(parse_number(value, "value", location="path"))


@router.get("/filtered", response_model=List[ProductResponse])
async def list_filtered(
    price: Optional[str] = Query(None, description="Maximum price (inclusive)"),
    rating: Optional[str] = Query(None, description="Minimum rating (exclusive)"),
    featured: Optional[str] = Query(None, description="'true' for featured products only"),
    service: ProductService = Depends(get_product_service),
):
    """
    Products matching all of the given filters; omitted filters are not applied.
    """
    return await service.list_filtered(
        price=parse_number(price, "price"),
        rating=parse_number(rating, "rating"),
        featured=featured,
    )


@router.get("/productByid/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSES)
async def get_product(
    product_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Get a product by its ID. Requires authentication.
    """
    return await service.get_product(product_id)


@router.put("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSES)
async def update_product(
    product_id: str,
    product: ProductUpdate,
    user: CurrentUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Replace the given fields of a product. Requires authentication.
    """
    return await service.update_product(product_id, product, updated_by=user.id)


@router.delete("/{product_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
async def delete_product(
    product_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product. Requires authentication.
    """
    await service.delete_product(product_id, deleted_by=user.id)
    return MessageResponse(msg="Product deleted")
