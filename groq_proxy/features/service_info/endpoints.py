from fastapi import APIRouter

from groq_proxy.shared.constants import ENDPOINTS
from groq_proxy.shared.utils import utc_timestamp
from .query import LivenessResponse, ServiceInfoResponse

router = APIRouter()

@router.get("/", response_model=ServiceInfoResponse, tags=["Monitoring"])
async def service_info() -> ServiceInfoResponse:
    """Lists the routes this proxy serves."""
    return ServiceInfoResponse(status="Server is running", endpoints=ENDPOINTS)

@router.get("/test", response_model=LivenessResponse, tags=["Monitoring"])
async def liveness() -> LivenessResponse:
    return LivenessResponse(
        message="Test endpoint working",
        timestamp=utc_timestamp(),
        status="ok",
    )
