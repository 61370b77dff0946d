"""Method channel endpoint.

POST /v1/channels/{channel}/methods/{method} dispatches one call through
the method channel. Unknown methods answer 200 with
status "not_implemented"; only an unknown channel is an HTTP error.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from exemption_bridge.api.dependencies.method_channel import get_method_channel
from exemption_bridge.api.models.method_channel import MethodCallResponse
from exemption_bridge.application.services.method_channel import MethodChannel

router = APIRouter(prefix="/v1/channels", tags=["method-channel"])


@router.post(
    "/{channel}/methods/{method}",
    response_model=MethodCallResponse,
    responses={404: {"description": "Unknown channel"}},
)
def invoke_method(
    channel: str,
    method: str,
    arguments: dict[str, Any] | None = Body(default=None),
    method_channel: MethodChannel = Depends(get_method_channel),
) -> MethodCallResponse:
    """Invoke a method on a channel.

    Runs synchronously; the request waits for the negotiation to finish.

    Args:
        channel: Channel name, must match the configured channel.
        method: Method name, matched exactly.
        arguments: Optional JSON object of call arguments.

    Returns:
        MethodCallResponse with the handler payload or not_implemented.

    Raises:
        HTTPException: 404 if the channel does not exist.
    """
    if channel != method_channel.name:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown channel: {channel}",
        )
    result = method_channel.invoke(method, arguments)
    return MethodCallResponse.from_result(channel, result)
