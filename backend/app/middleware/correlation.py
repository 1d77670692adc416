"""Correlation ID middleware for request tracing.

Every response carries an X-Request-ID header. A client-supplied value is
echoed back; otherwise a new UUID is generated. The id is also injected into
log entries by app.core.logging.
"""

import uuid

from asgi_correlation_id import CorrelationIdMiddleware
from asgi_correlation_id.context import correlation_id
from fastapi import FastAPI


def setup_correlation_middleware(app: FastAPI) -> None:
    """Add correlation ID middleware to the FastAPI app."""
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        generator=lambda: str(uuid.uuid4()),
        validator=None,  # Accept any format
        transformer=lambda a: a,
    )


def get_correlation_id() -> str | None:
    """Get the current request's correlation ID, or None outside a request."""
    try:
        return correlation_id.get()
    except LookupError:
        return None


__all__ = ["setup_correlation_middleware", "get_correlation_id"]
