"""
User repository: credential storage
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ConflictError, ServerError
from app.core.logger import logger
from app.models.user import UserInDB

USER_EXISTS_MESSAGE = "User already exists"


class UserRepository:
    """Repository for user data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _doc_to_user(doc: dict) -> Optional[UserInDB]:
        if not doc:
            return None
        return UserInDB(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            email=doc["email"],
            password=doc["password"],
        )

    async def find_by_email(self, email: str) -> Optional[UserInDB]:
        try:
            doc = await self.collection.find_one({"email": email})
            return self._doc_to_user(doc)

        except PyMongoError as e:
            logger.error("MongoDB error looking up user", error=e)
            raise ServerError()

    async def create(self, name: str, email: str, password_hash: str) -> UserInDB:
        """Persist a user; the unique email index turns a lost race into a conflict"""
        doc = {"name": name, "email": email, "password": password_hash}
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.warning("Duplicate email on insert", metadata={"event": "register_race"})
            raise ConflictError(USER_EXISTS_MESSAGE)
        except PyMongoError as e:
            logger.error("MongoDB error creating user", error=e)
            raise ServerError()

        doc["_id"] = result.inserted_id
        return self._doc_to_user(doc)
