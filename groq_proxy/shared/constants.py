# Routes served by the proxy, shown on GET / and in the 404 hint.
ENDPOINTS = {
    "GET /": "Service information",
    "GET /test": "Liveness probe",
    "GET /health": "Health check with Groq credential status",
    "GET /metrics": "Prometheus metrics",
    "POST /ai-chat": "Proxy chat messages to the Groq API",
}
