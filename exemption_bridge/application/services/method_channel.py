"""Method channel - named request/response dispatch.

Routes a call by exact method name to a registered handler. Unknown
names answer NOT_IMPLEMENTED instead of raising, so callers can probe
for features.

Usage:
    channel = MethodChannel("notification_permissions")
    channel.register("requestExemption", lambda arguments: True)

    channel.invoke("requestExemption").result  # True
    channel.invoke("somethingElse").status     # NOT_IMPLEMENTED
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from exemption_bridge.application.services.base import LoggingMixin
from exemption_bridge.domain.models.method_call import MethodCallResult

MethodHandler = Callable[[Mapping[str, Any]], Any]


class MethodChannel(LoggingMixin):
    """Dispatches method calls on one named channel.

    Attributes:
        name: The channel name callers address.
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty channel.

        Args:
            name: The channel name callers address.

        Raises:
            ValueError: If the name is empty.
        """
        if not name:
            raise ValueError("Channel name must not be empty")
        self.name = name
        self._handlers: dict[str, MethodHandler] = {}
        self._init_logger(component="bridge")

    @property
    def methods(self) -> list[str]:
        """Registered method names, sorted."""
        return sorted(self._handlers)

    def register(self, method: str, handler: MethodHandler) -> None:
        """Register a handler under a method name.

        Args:
            method: Exact method name callers will use.
            handler: Callable receiving the call arguments.

        Raises:
            ValueError: If the name is empty or already registered.
        """
        if not method:
            raise ValueError("Method name must not be empty")
        if method in self._handlers:
            raise ValueError(
                f"Method '{method}' is already registered on channel '{self.name}'"
            )
        self._handlers[method] = handler

    def invoke(
        self, method: str, arguments: Mapping[str, Any] | None = None
    ) -> MethodCallResult:
        """Dispatch one call.

        Args:
            method: Method name, matched exactly.
            arguments: Optional call arguments.

        Returns:
            SUCCESS with the handler's payload, or NOT_IMPLEMENTED.
        """
        log = self._log_operation("invoke", channel=self.name, method=method)
        handler = self._handlers.get(method)
        if handler is None:
            log.info("method_not_implemented")
            return MethodCallResult.not_implemented(method)

        result = handler(arguments or {})
        log.debug("method_call_handled", result=result)
        return MethodCallResult.success(method, result)
