"""
FastAPI Application - Client Service
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import clients, home
from app.core.bootstrap import ServiceContext, bootstrap
from app.core.config import config
from app.core.errors import (
    SecretsUnavailable,
    http_exception_handler,
    validation_exception_handler,
)
from app.core.logger import logger
from app.middleware import CorrelationIdMiddleware


def create_app(context: ServiceContext) -> FastAPI:
    """Create the FastAPI application around an initialized service context"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Client Service started",
            metadata={
                "service_name": context.config.service_name,
                "version": context.config.service_version,
                "environment": context.config.environment,
                "broker_connected": context.broker_connected,
            },
        )
        yield
        context.publisher.close()

    app = FastAPI(
        title="Client Service API",
        description="API for managing clients",
        version="1.0.0",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.context = context

    # Configure error handlers
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.config.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(home.router, tags=["home"])
    app.include_router(clients.router, tags=["clients"])

    return app


def main() -> None:
    """Run the startup pipeline, then serve; never listen without store credentials"""
    try:
        context = bootstrap(config)
    except SecretsUnavailable as e:
        logger.error("Error starting service", error=e, metadata={"event": "startup_failed"})
        sys.exit(1)

    app = create_app(context)

    logger.info(
        f"Client service listening at http://localhost:{config.port}",
        metadata={"host": config.host, "port": config.port},
    )
    uvicorn.run(app, host=config.host, port=config.port)
