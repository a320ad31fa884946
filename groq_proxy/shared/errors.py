"""
Application-wide exception handlers: the catch-all for unknown routes and
the last-resort 500 response.
"""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from groq_proxy.shared.config import logger
from groq_proxy.shared.constants import ENDPOINTS

# A known path hit with the wrong method is still an unknown route to clients.
NOT_FOUND_STATUSES = {404, 405}


def request_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code not in NOT_FOUND_STATUSES:
        return await http_exception_handler(request, exc)

    logger.warning("Route not found: %s %s", request.method, request_url(request))
    return JSONResponse(
        status_code=404,
        content={
            "error": "Route not found",
            "method": request.method,
            "url": request_url(request),
            "hint": "Available routes: " + ", ".join(ENDPOINTS),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
