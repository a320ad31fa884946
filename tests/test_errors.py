import pytest
from fastapi import APIRouter, HTTPException

from groq_proxy.shared.constants import ENDPOINTS


def test_unknown_route_returns_404_with_method_and_url(client):
    resp = client.get("/nope?x=1")

    assert resp.status_code == 404
    data = resp.json()
    assert data["error"] == "Route not found"
    assert data["method"] == "GET"
    assert data["url"] == "/nope?x=1"
    assert "POST /ai-chat" in data["hint"]


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
def test_unknown_route_echoes_method(client, method):
    resp = client.request(method, "/missing")

    assert resp.status_code == 404
    assert resp.json()["method"] == method
    assert resp.json()["url"] == "/missing"


def test_wrong_method_on_known_route_is_404(client):
    resp = client.delete("/health")

    assert resp.status_code == 404
    assert resp.json()["url"] == "/health"


def test_other_http_errors_keep_default_shape(client):
    router = APIRouter()

    @router.get("/teapot")
    async def teapot():
        raise HTTPException(status_code=418, detail="short and stout")

    client.app.include_router(router)

    resp = client.get("/teapot")

    assert resp.status_code == 418
    assert resp.json() == {"detail": "short and stout"}


def test_unhandled_exception_returns_generic_500(make_client):
    client = make_client(raise_server_exceptions=False)
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    client.app.include_router(router)

    resp = client.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error", "details": "kaboom"}


def test_not_found_hint_lists_every_served_route(client):
    hint = client.get("/nope").json()["hint"]
    endpoints = client.get("/").json()["endpoints"]

    assert endpoints == ENDPOINTS
    for route in ENDPOINTS:
        assert route in hint
