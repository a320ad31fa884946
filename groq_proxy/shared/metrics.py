#!/usr/bin/env python3
"""
Metrics definitions for the Groq chat proxy.
"""

import prometheus_client

CHAT_REQUESTS = prometheus_client.Counter(
    'groq_proxy_chat_requests_total',
    'Chat requests handled by the proxy, by outcome',
    ['outcome'],
)
UPSTREAM_LATENCY = prometheus_client.Histogram(
    'groq_proxy_upstream_latency_seconds',
    'Latency of calls to the Groq chat completions API',
)
