# groq_proxy/features/proxy_chat/handler.py
from typing import Any

from fastapi import Depends
from fastapi.responses import JSONResponse, Response

from groq_proxy.dependencies import get_groq_client, get_settings
from groq_proxy.shared.config import Settings, logger
from groq_proxy.shared.metrics import CHAT_REQUESTS

from .client import (
    GroqClient,
    UpstreamRejected,
    UpstreamResult,
    UpstreamSuccess,
    UpstreamUnreachable,
)
from .command import (
    CANNOT_CONNECT,
    INTERNAL_ERROR,
    INVALID_MESSAGES,
    MISSING_API_KEY,
    ProxyChatError,
    upstream_error,
)


def extract_messages(body: Any):
    """Returns the messages list, or None when the body does not carry one."""
    if not isinstance(body, dict):
        return None
    messages = body.get("messages")
    return messages if isinstance(messages, list) else None


class ProxyChatHandler:
    def __init__(
        self,
        settings: Settings = Depends(get_settings),
        groq_client: GroqClient = Depends(get_groq_client),
    ):
        self._settings = settings
        self._client = groq_client

    async def handle(self, body: Any) -> Response:
        messages = extract_messages(body)
        if messages is None:
            logger.warning("Rejected chat request without a messages array")
            return self._error(400, "invalid_request", ProxyChatError(error=INVALID_MESSAGES, received=body))

        if not self._settings.groq.is_configured:
            logger.error("GROQ_API_KEY is not configured; refusing to forward chat request")
            return self._error(500, "not_configured", ProxyChatError(error=MISSING_API_KEY))

        result = await self._client.send(messages)
        return self._to_response(result)

    def _to_response(self, result: UpstreamResult) -> Response:
        if isinstance(result, UpstreamSuccess):
            CHAT_REQUESTS.labels(outcome="success").inc()
            logger.info("Groq responded with %s", result.status_code)
            return Response(
                content=result.content,
                status_code=result.status_code,
                media_type=result.media_type or "application/json",
            )
        if isinstance(result, UpstreamRejected):
            return self._error(
                result.status_code,
                "rejected",
                ProxyChatError(error=upstream_error(result.status_code), details=result.details),
            )
        if isinstance(result, UpstreamUnreachable):
            return self._error(503, "unreachable", ProxyChatError(error=CANNOT_CONNECT, details=result.reason))
        return self._error(500, "failure", ProxyChatError(error=INTERNAL_ERROR, details=result.message))

    @staticmethod
    def _error(status_code: int, outcome: str, error: ProxyChatError) -> JSONResponse:
        CHAT_REQUESTS.labels(outcome=outcome).inc()
        logger.info("Chat request finished with %s (%s)", status_code, outcome)
        return JSONResponse(status_code=status_code, content=error.to_content())
