"""Shared test fixtures"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.config import Config
from app.core.errors import ConflictError, ServerError
from app.dependencies.product import get_product_repository, get_user_repository
from app.main import create_app
from app.models.user import UserInDB
from app.repositories.product import ProductRepository
from app.repositories.user import USER_EXISTS_MESSAGE
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.token import TokenService


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    """Evaluate the subset of MongoDB query operators the service uses"""
    for field, condition in query.items():
        value = doc.get(field)
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if value is None:
                    return False
                if op == "$lt" and not value < operand:
                    return False
                if op == "$lte" and not value <= operand:
                    return False
                if op == "$gt" and not value > operand:
                    return False
        elif value != condition:
            return False
    return True


class InMemoryProductRepository:
    """ProductRepository stand-in backed by a dict of documents"""

    def __init__(self):
        self.docs: Dict[ObjectId, dict] = {}
        self._helper = ProductRepository(collection=None)

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        if any(d["productId"] == product_data.productId for d in self.docs.values()):
            raise ServerError(details={"reason": "duplicate_product_id"})
        doc = product_data.model_dump()
        doc["_id"] = ObjectId()
        doc["createdAt"] = datetime.now(timezone.utc)
        self.docs[doc["_id"]] = doc
        return self._helper._doc_to_response(doc)

    async def find(self, query: Optional[Dict[str, Any]] = None) -> List[ProductResponse]:
        return [self._helper._doc_to_response(d) for d in self.docs.values() if _matches(d, query or {})]

    async def get_by_id(self, product_id: str) -> Optional[ProductResponse]:
        if not ObjectId.is_valid(product_id):
            return None
        return self._helper._doc_to_response(self.docs.get(ObjectId(product_id)))

    async def update(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        if not ObjectId.is_valid(product_id) or ObjectId(product_id) not in self.docs:
            return None
        self.docs[ObjectId(product_id)].update(product_data.model_dump(exclude_unset=True))
        return await self.get_by_id(product_id)

    async def delete(self, product_id: str) -> bool:
        if not ObjectId.is_valid(product_id):
            return False
        return self.docs.pop(ObjectId(product_id), None) is not None


class InMemoryUserRepository:
    """UserRepository stand-in backed by a dict keyed by email"""

    def __init__(self):
        self.users: Dict[str, UserInDB] = {}

    async def find_by_email(self, email: str) -> Optional[UserInDB]:
        return self.users.get(email)

    async def create(self, name: str, email: str, password_hash: str) -> UserInDB:
        if email in self.users:
            raise ConflictError(USER_EXISTS_MESSAGE)
        user = UserInDB(id=str(ObjectId()), name=name, email=email, password=password_hash)
        self.users[email] = user
        return user


@pytest.fixture
def test_config():
    """Configuration isolated from any local .env file"""
    return Config(
        _env_file=None,
        jwt_secret="test-secret-key",
        cors_origin="http://localhost:3000",
        log_level="WARNING",
    )


@pytest.fixture
def token_service(test_config):
    return TokenService(test_config)


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def app(test_config, product_repo, user_repo):
    """Application wired to in-memory repositories, no MongoDB connection"""
    application = create_app(test_config, connect_db=False)
    application.dependency_overrides[get_product_repository] = lambda: product_repo
    application.dependency_overrides[get_user_repository] = lambda: user_repo
    return application


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(token_service):
    """Authorization header for an arbitrary authenticated user"""
    token = token_service.issue("507f1f77bcf86cd799439099")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_product_payload():
    return {
        "productId": "P-100",
        "name": "Desk Lamp",
        "price": 49.5,
        "featured": True,
        "rating": 4.2,
        "company": "ikea",
    }


@pytest.fixture
def mock_product_doc():
    """Mock product document from MongoDB"""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "productId": "P-1",
        "name": "Test Product",
        "price": 29.99,
        "featured": False,
        "rating": 3.5,
        "company": "acme",
        "createdAt": datetime(2024, 1, 1, 12, 0, 0),
        "__v": 0,
    }


@pytest.fixture
def product_id():
    """Sample product ID for testing"""
    return "507f1f77bcf86cd799439011"
