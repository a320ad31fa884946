import json
from datetime import datetime, timezone
from typing import Any, Optional, Union


def mask_key(key: Optional[str]) -> str:
    """Masks an API key for logging, keeping only its edges."""
    if not key:
        return "<none>"
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}...{key[-4:]}"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z"""
    now_ = datetime.now(timezone.utc)
    return now_.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now_.microsecond // 1000:03d}Z"


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def loads_strict_json(data: Union[str, bytes]) -> Any:
    """json.loads that refuses NaN, Infinity and -Infinity. Raises ValueError."""
    return json.loads(data, parse_constant=_reject_constant)
