"""
Request-scoped context shared by logging, messaging and middleware
"""

from contextvars import ContextVar
from typing import Optional

correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Correlation ID of the request being handled, if any"""
    return correlation_id_ctx.get()
