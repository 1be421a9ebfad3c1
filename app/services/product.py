"""
Product service containing business logic layer
"""

from typing import List, Optional

from app.core.errors import NotFoundError
from app.core.logger import logger
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.filters import (
    FEATURED_QUERY,
    build_filter_query,
    price_below_query,
    rating_above_query,
)

PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    """Service layer for product operations"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def create_product(self, product_data: ProductCreate, created_by: Optional[str] = None) -> ProductResponse:
        """Create a new product (no productId pre-check; the unique index decides)"""
        product = await self.repository.create(product_data)

        logger.info(
            f"Created product {product.id}",
            user_id=created_by,
            metadata={"event": "create_product", "product_id": product.id, "productId": product.productId}
        )

        return product

    async def list_products(self) -> List[ProductResponse]:
        """Every product, unfiltered and unpaginated"""
        return await self.repository.find()

    async def get_product(self, product_id: str) -> ProductResponse:
        """Get product by ID"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        return product

    async def update_product(
        self, product_id: str, product_data: ProductUpdate, updated_by: Optional[str] = None
    ) -> ProductResponse:
        """Replace the given fields in place"""
        product = await self.repository.update(product_id, product_data)
        if not product:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        logger.info(
            f"Updated product {product_id}",
            user_id=updated_by,
            metadata={
                "event": "update_product",
                "product_id": product_id,
                "fields": sorted(product_data.model_dump(exclude_unset=True)),
            }
        )

        return product

    async def delete_product(self, product_id: str, deleted_by: Optional[str] = None) -> None:
        """Hard delete a product"""
        deleted = await self.repository.delete(product_id)
        if not deleted:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        logger.info(
            f"Deleted product {product_id}",
            user_id=deleted_by,
            metadata={"event": "delete_product", "product_id": product_id}
        )

    async def list_featured(self) -> List[ProductResponse]:
        return await self.repository.find(FEATURED_QUERY)

    async def list_price_below(self, value: float) -> List[ProductResponse]:
        return await self.repository.find(price_below_query(value))

    async def list_rating_above(self, value: float) -> List[ProductResponse]:
        return await self.repository.find(rating_above_query(value))

    async def list_filtered(
        self,
        price: Optional[float] = None,
        rating: Optional[float] = None,
        featured: Optional[str] = None,
    ) -> List[ProductResponse]:
        """Products matching every filter that is present"""
        query = build_filter_query(price=price, rating=rating, featured=featured)
        products = await self.repository.find(query)

        logger.debug(
            f"Fetched {len(products)} filtered products",
            metadata={"event": "list_filtered", "count": len(products), "filters": query}
        )

        return products
