from typing import Dict

from pydantic import BaseModel

class ServiceInfoResponse(BaseModel):
    status: str
    endpoints: Dict[str, str]

class LivenessResponse(BaseModel):
    message: str
    timestamp: str
    status: str
