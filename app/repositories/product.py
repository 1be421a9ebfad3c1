"""
Product repository for data access layer following Repository pattern
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ServerError
from app.core.logger import logger
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _doc_to_response(self, doc: dict) -> Optional[ProductResponse]:
        """Convert MongoDB document to ProductResponse schema"""
        if not doc:
            return None

        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        doc.pop("__v", None)

        created_at = doc.get("createdAt")
        if isinstance(created_at, datetime) and created_at.tzinfo is None:
            # Mongo hands back naive UTC datetimes
            doc["createdAt"] = created_at.replace(tzinfo=timezone.utc)

        return ProductResponse(**doc)

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        """Insert a new product; a duplicate productId surfaces as a server error"""
        try:
            doc = product_data.model_dump()
            doc["createdAt"] = datetime.now(timezone.utc)

            result = await self.collection.insert_one(doc)
            doc["_id"] = result.inserted_id
            return self._doc_to_response(doc)

        except DuplicateKeyError as e:
            logger.error(
                "Duplicate productId on create",
                error=e,
                metadata={"event": "create_product_duplicate", "productId": product_data.productId},
            )
            raise ServerError(details={"reason": "duplicate_product_id"})
        except PyMongoError as e:
            logger.error("MongoDB error creating product", error=e)
            raise ServerError()

    async def find(self, query: Optional[Dict[str, Any]] = None) -> List[ProductResponse]:
        """Return every product matching query, unpaginated"""
        try:
            docs = await self.collection.find(query or {}).to_list(length=None)
            return [self._doc_to_response(doc) for doc in docs]

        except PyMongoError as e:
            logger.error("MongoDB error listing products", error=e, metadata={"query": str(query)})
            raise ServerError()

    async def get_by_id(self, product_id: str) -> Optional[ProductResponse]:
        """Get product by ID"""
        if not ObjectId.is_valid(product_id):
            return None
        try:
            doc = await self.collection.find_one({"_id": ObjectId(product_id)})
            return self._doc_to_response(doc)

        except PyMongoError as e:
            logger.error("MongoDB error getting product", error=e)
            raise ServerError()

    async def update(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Apply the fields set on product_data and return the updated product"""
        if not ObjectId.is_valid(product_id):
            return None

        update_data = product_data.model_dump(exclude_unset=True)
        if not update_data:
            return await self.get_by_id(product_id)

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": ObjectId(product_id)},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_response(doc)

        except PyMongoError as e:
            logger.error("MongoDB error updating product", error=e)
            raise ServerError()

    async def delete(self, product_id: str) -> bool:
        """Remove a product; False when nothing matched"""
        if not ObjectId.is_valid(product_id):
            return False
        try:
            doc = await self.collection.find_one_and_delete({"_id": ObjectId(product_id)})
            return doc is not None

        except PyMongoError as e:
            logger.error("MongoDB error deleting product", error=e)
            raise ServerError()
