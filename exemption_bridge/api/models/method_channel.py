"""Method channel call response models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from exemption_bridge.domain.models.method_call import MethodCallResult


class MethodCallResponse(BaseModel):
    """Response envelope for one method channel call.

    Attributes:
        channel: Channel the call was addressed to.
        method: Method name that was called.
        status: "success" or "not_implemented".
        result: Handler payload; null when not implemented.
    """

    channel: str = Field(..., description="Channel the call was addressed to")
    method: str = Field(..., description="Method name that was called")
    status: Literal["success", "not_implemented"]
    result: Any = None

    @classmethod
    def from_result(cls, channel: str, result: MethodCallResult) -> MethodCallResponse:
        """Build the response from a dispatch result."""
        return cls(
            channel=channel,
            method=result.method,
            status=result.status.value,
            result=result.result,
        )
