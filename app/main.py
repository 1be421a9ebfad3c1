"""
FastAPI application factory for the Product Catalog Service
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import health, home, products
from app.core.config import Config, get_config
from app.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from app.core.logger import logger
from app.db.mongodb import close_mongo_connection, connect_to_mongo
from app.middleware import CorrelationIdMiddleware
from app.services.token import TokenService


def create_app(config: Optional[Config] = None, connect_db: bool = True) -> FastAPI:
    """
    Build the application around one Config instance.

    Args:
        config: settings to use; read from the environment when omitted
        connect_db: open the MongoDB connection during lifespan startup
    """
    config = config or get_config()
    logger.configure(config.log_level, config.log_format, service_name=config.service_name)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Product Catalog Service...")
        if connect_db:
            await connect_to_mongo(config)

        logger.info(
            "Product Catalog Service started successfully",
            metadata={
                "service_name": config.service_name,
                "version": config.service_version,
                "environment": config.environment,
                "port": config.port,
            }
        )

        yield

        logger.info("Shutting down Product Catalog Service...")
        if connect_db:
            await close_mongo_connection()

    app = FastAPI(
        title="Product Catalog Service",
        description="Product catalog with user registration and bearer-token authentication",
        version=config.service_version,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.token_service = TokenService(config)

    # Configure error handlers
    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(CorrelationIdMiddleware, header_name=config.correlation_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(home.router, tags=["home"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(products.router, prefix="/api/products", tags=["products"])

    return app
