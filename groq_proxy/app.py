"""
Application factory for the Groq chat proxy.
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from groq_proxy.shared.config import Settings, logger
from groq_proxy.shared.errors import register_exception_handlers
from groq_proxy.shared.middleware import RequestIDMiddleware, log_request_outcome
from groq_proxy.shared.utils import mask_key
from groq_proxy.features.service_info.endpoints import router as service_info_router
from groq_proxy.features.health_check.endpoints import router as health_check_router
from groq_proxy.features.metrics.endpoints import router as metrics_router
from groq_proxy.features.proxy_chat.endpoints import router as proxy_chat_router


def create_app(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Builds the proxy app around one immutable Settings value.
    `transport` replaces the network layer of the shared HTTP client.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan resources."""
        app.state.http_client = httpx.AsyncClient(
            timeout=settings.groq.timeout_seconds,
            transport=transport,
        )
        if settings.groq.is_configured:
            logger.info("Groq credential loaded (%s), model '%s'",
                        mask_key(settings.groq.api_key), settings.groq.model)
        else:
            logger.warning("GROQ_API_KEY is not set; /ai-chat will answer 500 until it is configured")
        logger.info("Application startup complete")
        yield
        await app.state.http_client.aclose()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title="Groq Chat Proxy",
        description="Forwards chat completion requests to the Groq API with a server-held key",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(service_info_router)
    app.include_router(health_check_router)
    app.include_router(metrics_router)
    app.include_router(proxy_chat_router, tags=["Proxy"])

    app.add_middleware(RequestIDMiddleware)
    app.middleware("http")(log_request_outcome)
    register_exception_handlers(app)
    return app
