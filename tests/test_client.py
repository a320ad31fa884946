import asyncio

import httpx

from groq_proxy.features.proxy_chat.client import (
    GroqClient,
    UpstreamFailure,
    UpstreamRejected,
    UpstreamSuccess,
    UpstreamUnreachable,
)
from groq_proxy.shared.config import GroqConfig


def send(respond, **config):
    """Runs GroqClient.send against a mock transport and returns (result, requests)."""
    seen = []

    def handler(request):
        seen.append(request)
        return respond(request)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            groq_client = GroqClient(http_client, GroqConfig(api_key="gsk_unit_test_key", **config))
            return await groq_client.send([{"role": "user", "content": "hi"}])

    return asyncio.run(run()), seen


def raising(error):
    def respond(request):
        raise error
    return respond


def test_success_variant_keeps_raw_body():
    result, seen = send(lambda request: httpx.Response(200, content=b'{"a": 1}'))

    assert result == UpstreamSuccess(status_code=200, content=b'{"a": 1}')
    assert len(seen) == 1


def test_rejected_variant_decodes_json_details():
    result, _ = send(lambda request: httpx.Response(401, json={"error": "bad key"}))

    assert result == UpstreamRejected(status_code=401, details={"error": "bad key"})


def test_rejected_variant_falls_back_to_text():
    result, _ = send(lambda request: httpx.Response(500, text="oops"))

    assert result == UpstreamRejected(status_code=500, details="oops")


def test_timeout_is_unreachable():
    result, _ = send(raising(httpx.ReadTimeout("slow")))

    assert isinstance(result, UpstreamUnreachable)
    assert result.reason == "Network error or timeout"


def test_network_error_is_unreachable():
    result, _ = send(raising(httpx.ConnectError("refused")))

    assert isinstance(result, UpstreamUnreachable)


def test_other_errors_are_local_failures():
    result, _ = send(raising(ValueError("bad payload")))

    assert result == UpstreamFailure(message="bad payload")


def test_unsupported_protocol_is_local_failure():
    result, _ = send(raising(httpx.UnsupportedProtocol("ftp not supported")))

    assert result == UpstreamFailure(message="ftp not supported")


def test_base_url_and_timeout_come_from_config():
    result, seen = send(
        lambda request: httpx.Response(200, json={}),
        base_url="http://upstream.local/v1/",
        timeout_ms=1500,
    )

    assert isinstance(result, UpstreamSuccess)
    assert str(seen[0].url) == "http://upstream.local/v1/chat/completions"
    assert seen[0].extensions["timeout"] == {"connect": 1.5, "read": 1.5, "write": 1.5, "pool": 1.5}


def test_success_variant_keeps_content_type():
    result, _ = send(lambda request: httpx.Response(200, json={"a": 1}))

    assert result.media_type == "application/json"


def test_rejected_variant_with_nan_falls_back_to_text():
    result, _ = send(lambda request: httpx.Response(500, content=b'{"error": NaN}'))

    assert result == UpstreamRejected(status_code=500, details='{"error": NaN}')
