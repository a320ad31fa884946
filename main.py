#!/usr/bin/env python3
"""
Groq Chat Proxy
Forwards chat completion requests to the Groq API, keeping the API key on the server.
"""

import uvicorn

from groq_proxy.app import create_app
from groq_proxy.shared.config import load_config, setup_logging

# Load and validate configuration once at startup
settings = load_config()
logger = setup_logging(settings)
app = create_app(settings)

if __name__ == "__main__":
    host = settings.server.host
    port = settings.server.port

    display_host = "localhost" if host == "0.0.0.0" else host
    logger.warning("Starting Groq Proxy on %s:%s", host, port)
    logger.warning("Chat URL: http://%s:%s/ai-chat", display_host, port)
    logger.warning("Metrics: http://%s:%s/metrics", display_host, port)

    log_config = uvicorn.config.LOGGING_CONFIG
    log_config["loggers"]["uvicorn.access"]["level"] = settings.server.http_log_level.upper()

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_config=log_config,
        timeout_graceful_shutdown=30,
        server_header=False
    )
