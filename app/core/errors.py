"""
Error types and FastAPI error handlers for the Client Service
"""

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logger import logger


class ClientErrorResponseModel(BaseModel):
    """Body returned by POST /clients when the client could not be created"""
    message: str
    error: Dict[str, Any]


class ServiceError(Exception):
    """Base class for the service's own failures"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "message": self.message, **self.details}


class SecretsUnavailable(ServiceError):
    """Store credentials could not be obtained; the service must not start"""


class BrokerConnectFailure(ServiceError):
    """The message broker could not be reached at startup"""


class StoreWriteFailure(ServiceError):
    """A client record could not be written to the store"""


class PublishFailure(ServiceError):
    """An event could not be handed to the broker"""


def describe_error(exc: Exception) -> Dict[str, Any]:
    """Error detail included in 500 responses"""
    if isinstance(exc, ServiceError):
        return exc.to_dict()
    return {"type": type(exc).__name__, "message": str(exc)}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for HTTP errors raised by routing (404, 405) or endpoints"""
    logger.error(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request validation errors"""
    # errors() may carry the raw bytes of an unparseable body
    errors = jsonable_encoder(exc.errors())
    logger.error(
        "Validation error",
        metadata={"event": "validation_error", "url": str(request.url), "errors": errors},
    )

    return JSONResponse(
        status_code=422,
        content={"error": "Validation error", "details": errors},
    )
