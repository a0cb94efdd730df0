"""Request ID middleware for per-request tracking.

Request IDs are unique per HTTP request within this service and tie
together every log line emitted while handling it.

This middleware:
1. Extracts request ID from X-Request-ID header if present
2. Generates a new UUID if header is missing
3. Stores the ID in request.state.request_id
4. Adds the ID to logging context
5. Includes X-Request-ID in response headers
6. Cleans up logging context after request completes
"""

from __future__ import annotations

from catalog_service.app.middleware.base import HeaderContextMiddleware, generate_uuid


class RequestIDMiddleware(HeaderContextMiddleware):
    """Add unique request ID to all requests for correlation.

    Usage:
        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)

        @app.get("/")
        async def root(request: Request):
            return {"request_id": request.state.request_id}
    """

    header_name = "x-request-id"
    state_key = "request_id"
    log_context_key = "request_id"
    should_clear_context_on_finish = True

    def generate_value(self) -> str:
        """Generate a new UUID v4 for request ID."""
        return generate_uuid()
