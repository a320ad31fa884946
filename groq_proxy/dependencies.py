#!/usr/bin/env python3
"""
Dependency provider functions for the application.
"""

from fastapi import Request
import httpx

from groq_proxy.shared.config import Settings
from groq_proxy.features.proxy_chat.client import GroqClient

def get_settings(request: Request) -> Settings:
    """Returns the immutable settings the app was created with."""
    return request.app.state.settings

def get_http_client(request: Request) -> httpx.AsyncClient:
    """Returns the shared httpx.AsyncClient instance."""
    return request.app.state.http_client

def get_groq_client(request: Request) -> GroqClient:
    return GroqClient(
        http_client=get_http_client(request),
        groq_config=get_settings(request).groq,
    )
