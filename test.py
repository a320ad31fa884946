#!/usr/bin/env python3
"""
Smoke test script for the Groq Chat Proxy.
Runs against a started server; the chat test needs GROQ_API_KEY set on the server.
"""

import asyncio
import os

import httpx

BASE_URL = os.environ.get("PROXY_URL", "http://127.0.0.1:3000")

async def test_feature(feature_name: str, test_func: callable):
    """Run a feature test with formatted output"""
    print(f"\n=== Testing {feature_name} ===")
    try:
        await test_func()
        print(f"✅ {feature_name} test passed")
    except Exception as e:
        print(f"❌ {feature_name} test failed: {str(e)}")
        raise

async def test_liveness(client: httpx.AsyncClient):
    resp = await client.get(f"{BASE_URL}/test")
    resp.raise_for_status()
    assert resp.json()["status"] == "ok"

async def test_health(client: httpx.AsyncClient):
    resp = await client.get(f"{BASE_URL}/health")
    resp.raise_for_status()
    data = resp.json()
    print(f"Groq API configured: {data['groq_api_configured']}")

async def test_invalid_request(client: httpx.AsyncClient):
    resp = await client.post(f"{BASE_URL}/ai-chat", json={"messages": "hi"})
    assert resp.status_code == 400, f"Expected 400, got {resp.status_code}"

async def test_proxy_chat(client: httpx.AsyncClient):
    """Sends one real message through the proxy"""
    resp = await client.post(
        f"{BASE_URL}/ai-chat",
        json={"messages": [{"role": "user", "content": "Hello!"}]},
    )
    resp.raise_for_status()
    reply = resp.json()["choices"][0]["message"]["content"]
    print(f"Chat completion received: {reply[:60]}")

async def run_tests():
    async with httpx.AsyncClient(timeout=60.0) as client:
        await test_feature("Liveness", lambda: test_liveness(client))
        await test_feature("Health", lambda: test_health(client))
        await test_feature("Invalid Request", lambda: test_invalid_request(client))
        await test_feature("Proxy Chat", lambda: test_proxy_chat(client))

if __name__ == "__main__":
    print(f"Running Groq Proxy smoke tests against {BASE_URL}")
    asyncio.run(run_tests())
