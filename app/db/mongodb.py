"""
MongoDB database connection and configuration
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.core.config import Config
from app.core.errors import ServerError
from app.core.logger import logger
from app.db.indexes import create_indexes

PRODUCTS_COLLECTION = "products"
USERS_COLLECTION = "users"


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database: Optional[AsyncIOMotorDatabase] = None


db = Database()


async def connect_to_mongo(config: Config):
    """Create database connection and make sure unique indexes exist"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(config.mongo_uri, uuidRepresentation="standard")
        db.database = db.client[config.mongodb_database]

        # Test connection
        await db.client.admin.command('ping')

        await create_indexes(db.database)

        logger.info(
            f"Successfully connected to MongoDB database '{config.mongodb_database}'",
            metadata={"event": "mongodb_connected", "database": config.mongodb_database}
        )
    except Exception as e:
        logger.error(
            f"Could not connect to MongoDB: {e}",
            metadata={"event": "mongodb_connection_error"},
        )
        raise


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


def get_database() -> AsyncIOMotorDatabase:
    """Get database instance"""
    if db.database is None:
        raise ServerError("Database is not connected")
    return db.database


def get_product_collection() -> AsyncIOMotorCollection:
    """Get products collection"""
    return get_database()[PRODUCTS_COLLECTION]


def get_user_collection() -> AsyncIOMotorCollection:
    """Get users collection"""
    return get_database()[USERS_COLLECTION]
