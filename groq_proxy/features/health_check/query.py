from pydantic import BaseModel

class HealthCheckResponse(BaseModel):
    status: str
    timestamp: str
    groq_api_configured: bool
