"""
Database index management for MongoDB.

Indexes are created at application startup. The two unique indexes back the
email and productId uniqueness invariants.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.core.logger import logger


async def create_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create all required MongoDB indexes for the users and products collections.

    Args:
        database: MongoDB database instance
    """
    users = database["users"]
    products = database["products"]

    await users.create_index([("email", ASCENDING)], unique=True, name="idx_email_unique")
    logger.info("Created unique index on 'users.email'")

    await products.create_index([("productId", ASCENDING)], unique=True, name="idx_product_id_unique")
    logger.info("Created unique index on 'products.productId'")

    await products.create_index([("featured", ASCENDING)], name="idx_featured")
    await products.create_index([("price", ASCENDING)], name="idx_price")
    await products.create_index([("rating", ASCENDING)], name="idx_rating")
    logger.info("Created query indexes on 'featured', 'price', 'rating'")
