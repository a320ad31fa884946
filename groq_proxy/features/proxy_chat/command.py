from typing import Any, Dict, Optional

from pydantic import BaseModel


class ProxyChatError(BaseModel):
    """Error body returned by the proxy for every non-success outcome."""
    error: str
    details: Optional[Any] = None
    received: Optional[Any] = None

    def to_content(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


INVALID_MESSAGES = "Messages must be an array"
MISSING_API_KEY = "GROQ_API_KEY not configured in environment variables"
CANNOT_CONNECT = "Cannot connect to Groq API"
INTERNAL_ERROR = "Internal server error"


def upstream_error(status_code: int) -> str:
    return f"Groq API Error: {status_code}"
