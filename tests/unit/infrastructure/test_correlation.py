"""Unit tests for correlation ID management."""

import asyncio
import re

from exemption_bridge.application.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestGenerateCorrelationId:
    def test_generate_returns_uuid_format(self) -> None:
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
            re.IGNORECASE,
        )
        assert uuid_pattern.match(generate_correlation_id()) is not None

    def test_generate_returns_unique_ids(self) -> None:
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestCorrelationIdContext:
    def test_set_and_get_correlation_id(self) -> None:
        set_correlation_id("test-correlation-id-123")
        try:
            assert get_correlation_id() == "test-correlation-id-123"
        finally:
            set_correlation_id("")

    async def test_context_isolation_between_tasks(self) -> None:
        """Correlation IDs do not leak between concurrent tasks."""
        results: dict[str, str] = {}

        async def task_with_id(task_name: str, correlation_id: str) -> None:
            set_correlation_id(correlation_id)
            await asyncio.sleep(0.01)
            results[task_name] = get_correlation_id()

        await asyncio.gather(
            task_with_id("task1", "id-for-task-1"),
            task_with_id("task2", "id-for-task-2"),
        )

        assert results == {"task1": "id-for-task-1", "task2": "id-for-task-2"}


class TestCorrelationIdProcessor:
    def test_adds_id_when_set(self) -> None:
        set_correlation_id("abc")
        try:
            event = correlation_id_processor(None, "info", {"event": "x"})
        finally:
            set_correlation_id("")
        assert event["correlation_id"] == "abc"

    def test_omits_id_when_unset(self) -> None:
        set_correlation_id("")
        assert "correlation_id" not in correlation_id_processor(None, "info", {})
