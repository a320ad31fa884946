from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from groq_proxy.shared.utils import loads_strict_json
from .handler import ProxyChatHandler

router = APIRouter()

async def read_json_body(request: Request):
    """Parsed JSON body, or None when the body is empty or not strict JSON."""
    try:
        return loads_strict_json(await request.body())
    except ValueError:
        return None

@router.post("/ai-chat", response_model=None)
async def proxy_chat(
    request: Request,
    handler: ProxyChatHandler = Depends(ProxyChatHandler)
) -> Response:
    """
    Forwards `{"messages": [...]}` to Groq with the server-held credential
    and relays the completion, or a translated error.
    """
    return await handler.handle(await read_json_body(request))
