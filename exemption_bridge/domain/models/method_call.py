"""Method channel call result.

A method channel answers every call with exactly one of:
- SUCCESS: the handler ran and produced a result payload
- NOT_IMPLEMENTED: no handler is registered under the method name

There is no error status. Handlers absorb their own failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MethodCallStatus(str, Enum):
    """Status of a method channel call."""

    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass(frozen=True)
class MethodCallResult:
    """Response to one method channel call.

    Attributes:
        method: The method name that was called.
        status: SUCCESS or NOT_IMPLEMENTED.
        result: Handler payload, always None when NOT_IMPLEMENTED.
    """

    method: str
    status: MethodCallStatus
    result: Any = None

    @classmethod
    def success(cls, method: str, result: Any) -> MethodCallResult:
        """Build a success response."""
        return cls(method=method, status=MethodCallStatus.SUCCESS, result=result)

    @classmethod
    def not_implemented(cls, method: str) -> MethodCallResult:
        """Build the response for an unrecognized method name."""
        return cls(method=method, status=MethodCallStatus.NOT_IMPLEMENTED)

    @property
    def is_implemented(self) -> bool:
        """Check if a handler answered the call."""
        return self.status == MethodCallStatus.SUCCESS
