from fastapi import Depends
from groq_proxy.dependencies import get_settings
from groq_proxy.shared.config import Settings, logger
from groq_proxy.shared.utils import utc_timestamp
from .query import HealthCheckResponse

class HealthCheckHandler:
    """Readiness probe: reports whether the Groq credential is present. Makes no upstream call."""

    def __init__(self, settings: Settings = Depends(get_settings)):
        self._settings = settings

    async def handle(self) -> HealthCheckResponse:
        configured = self._settings.groq.is_configured
        if not configured:
            logger.warning("Health check: GROQ_API_KEY is not configured")
        return HealthCheckResponse(
            status="healthy",
            timestamp=utc_timestamp(),
            groq_api_configured=configured,
        )
