from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id to every log entry emitted for a request.

    The id is taken from the X-Correlation-ID header when present, generated
    otherwise, and echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
