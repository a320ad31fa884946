# groq_proxy/features/proxy_chat/client.py
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import httpx

from groq_proxy.shared.config import GroqConfig, logger
from groq_proxy.shared.metrics import UPSTREAM_LATENCY
from groq_proxy.shared.utils import loads_strict_json, mask_key

NETWORK_ERROR_REASON = "Network error or timeout"

# Request went out but no usable reply came back.
UNREACHABLE_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


@dataclass(frozen=True)
class UpstreamSuccess:
    status_code: int
    content: bytes
    media_type: Optional[str] = None


@dataclass(frozen=True)
class UpstreamRejected:
    status_code: int
    details: Any


@dataclass(frozen=True)
class UpstreamUnreachable:
    reason: str = NETWORK_ERROR_REASON


@dataclass(frozen=True)
class UpstreamFailure:
    message: str


UpstreamResult = Union[UpstreamSuccess, UpstreamRejected, UpstreamUnreachable, UpstreamFailure]


def decode_details(response: httpx.Response) -> Any:
    """Returns the upstream error body as strict JSON when possible, else as text."""
    try:
        return loads_strict_json(response.content)
    except ValueError:
        return response.text


class GroqClient:
    """Sends a single chat completion request to Groq. Never retries."""

    def __init__(self, http_client: httpx.AsyncClient, groq_config: GroqConfig):
        self._client = http_client
        self._config = groq_config

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/chat/completions"

    def build_payload(self, messages: List[Any]) -> Dict[str, Any]:
        return {
            "model": self._config.model,
            "messages": messages,
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
        }

    async def send(self, messages: List[Any]) -> UpstreamResult:
        """Forwards the messages and classifies the outcome."""
        logger.info(
            "Forwarding %d message(s) to Groq model '%s' with key %s.",
            len(messages), self._config.model, mask_key(self._config.api_key)
        )
        start_time = time.time()
        try:
            response = await self._client.post(
                self.url,
                json=self.build_payload(messages),
                headers={
                    "Authorization": f"Bearer {self._config.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self._config.timeout_seconds,
            )
        except UNREACHABLE_ERRORS as e:
            logger.error("Cannot reach Groq API: %s: %s", type(e).__name__, e)
            return UpstreamUnreachable()
        except Exception as e:
            logger.error("Request to Groq API failed locally: %s", e)
            return UpstreamFailure(message=str(e))
        finally:
            UPSTREAM_LATENCY.observe(time.time() - start_time)

        if response.is_success:
            return UpstreamSuccess(
                status_code=response.status_code,
                content=response.content,
                media_type=response.headers.get("content-type"),
            )

        logger.error("HTTP error from Groq: %s - %s", response.status_code, response.text)
        return UpstreamRejected(status_code=response.status_code, details=decode_details(response))
