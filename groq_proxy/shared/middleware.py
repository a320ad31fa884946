import time
import uuid
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from groq_proxy.shared.config import logger

class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Gives each proxied call an id so the chat log lines and the client's
    X-Request-ID header can be matched up. A caller-supplied id is kept.
    """
    async def dispatch(
        self, request: Request, call_next
    ) -> Response:
        request.state.request_id = request.headers.get('X-Request-ID', str(uuid.uuid4()))
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response

def _log_completed(request: Request, status: int, process_time: float) -> None:
    logger.info(
        "Request completed: %s %s -> %s",
        request.method,
        request.url.path,
        status,
        extra={
            "req_id": getattr(request.state, 'request_id', 'N/A'),
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_sec": round(process_time, 4)
        }
    )

async def log_request_outcome(
    request: Request, call_next
) -> Response:
    """
    Writes exactly one 'Request completed' line per call, including calls
    that end in the 500 fallback, and sets X-Process-Time on normal replies.
    """
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        # The fallback handler builds the 500 body further out.
        _log_completed(request, 500, time.time() - start_time)
        raise
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    _log_completed(request, response.status_code, process_time)
    return response
