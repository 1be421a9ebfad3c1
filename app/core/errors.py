"""
Error taxonomy and FastAPI exception handlers
"""

from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logger import logger

SERVER_ERROR_MESSAGE = "Server error"


class FieldError(BaseModel):
    """A single input field that failed a constraint"""
    msg: str
    param: str
    location: str = "body"
    value: Optional[Any] = None


class ErrorResponse(Exception):
    """Base exception for application errors"""

    status_code = 400

    def __init__(self, message: str, status_code: Optional[int] = None, details: dict = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        return {"msg": self.message}


class ValidationError(ErrorResponse):
    """Malformed or missing input fields"""

    status_code = 400

    def __init__(self, errors: List[FieldError], message: str = "Validation failed"):
        self.errors = errors
        super().__init__(message, details={"fields": [e.param for e in errors]})

    def to_content(self) -> Dict[str, Any]:
        return {"errors": [e.model_dump(exclude_none=True) for e in self.errors]}


class AuthError(ErrorResponse):
    """Missing, invalid or expired bearer token"""
    status_code = 401


class InvalidToken(AuthError):
    """Token failed signature, format or expiry checks"""

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message)


class NotFoundError(ErrorResponse):
    status_code = 404


class ConflictError(ErrorResponse):
    """Duplicate unique key (surfaced as 400)"""
    status_code = 400


class ServerError(ErrorResponse):
    """Unexpected store or computation failure; details never reach the client"""

    status_code = 500

    def __init__(self, message: str = SERVER_ERROR_MESSAGE, details: dict = None):
        super().__init__(message, details=details)

    def to_content(self) -> Dict[str, Any]:
        return {"error": SERVER_ERROR_MESSAGE}


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses (OpenAPI docs)"""
    msg: Optional[str] = None
    error: Optional[str] = None
    errors: Optional[List[FieldError]] = None


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Request rejected: {exc.message}", metadata=metadata)

    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Map FastAPI/pydantic input validation failures to field errors with status 400"""
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        location = str(loc[0]) if loc else "body"
        param = ".".join(str(part) for part in loc[1:]) or location
        errors.append(FieldError(msg=err.get("msg", "Invalid value"), param=param, location=location))

    return await error_response_handler(request, ValidationError(errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for routing-level HTTP exceptions (unknown path, wrong method)"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: log the failure, answer with a generic 500"""
    logger.error(
        "Unhandled error",
        error=exc,
        metadata={"event": "unhandled_exception", "url": str(request.url), "method": request.method}
    )
    return JSONResponse(status_code=500, content={"error": SERVER_ERROR_MESSAGE})
