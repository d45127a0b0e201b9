"""
Correlation ID middleware
Every request gets an ID that flows into log entries and published events
"""

import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import config
from app.core.context import correlation_id_ctx, get_correlation_id


def resolve_correlation_id(header_value: Optional[str]) -> str:
    """Use the caller's ID when it sent a usable one, otherwise mint a new one"""
    if header_value and header_value.strip():
        return header_value.strip()
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Binds a correlation ID for the lifetime of a request.

    The ID is read from the configured header (or generated), exposed on
    ``request.state.correlation_id`` and echoed back in the response header.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = resolve_correlation_id(
            request.headers.get(config.correlation_id_header)
        )
        token = correlation_id_ctx.set(correlation_id)
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)

        response.headers[config.correlation_id_header] = correlation_id
        return response
