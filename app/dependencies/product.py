"""
Dependency injection for services and repositories
"""

from fastapi import Depends

from app.db.mongodb import get_product_collection, get_user_collection
from app.dependencies.auth import get_token_service
from app.repositories.product import ProductRepository
from app.repositories.user import UserRepository
from app.services.product import ProductService
from app.services.token import TokenService
from app.services.user import UserService


async def get_product_repository() -> ProductRepository:
    """Get product repository instance"""
    return ProductRepository(get_product_collection())


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository)


async def get_user_repository() -> UserRepository:
    return UserRepository(get_user_collection())


async def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
) -> UserService:
    """Get user service instance"""
    return UserService(repository, tokens)
