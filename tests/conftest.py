"""
Pytest configuration and shared fixtures for Exemption Bridge tests.

Testing Standards:
- Async tests run in pytest-asyncio auto mode (enabled in pyproject.toml)
- Unit tests go in tests/unit/<layer>/
- Services are built over the in-memory stubs, never a real device
"""

from collections.abc import Iterator

import pytest
import structlog

from exemption_bridge.application.services.exemption_negotiator import (
    ExemptionNegotiator,
)
from exemption_bridge.infrastructure.stubs.platform_capability_stub import (
    PlatformCapabilityGateStub,
)
from exemption_bridge.infrastructure.stubs.power_policy_stub import (
    PowerPolicyQueryStub,
)
from exemption_bridge.infrastructure.stubs.settings_prompt_stub import (
    SettingsPromptStub,
)

APPLICATION_ID = "com.example.students_task_manager"


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration after each test.

    CLI tests point log output at a captured stream that is closed once
    the invocation ends.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from exemption_bridge import __version__

    return __version__


@pytest.fixture
def application_id() -> str:
    """Application id used across tests."""
    return APPLICATION_ID


@pytest.fixture
def capability_gate() -> PlatformCapabilityGateStub:
    """Capability gate on a platform that supports exemption."""
    return PlatformCapabilityGateStub(sdk_version=34)


@pytest.fixture
def power_policy() -> PowerPolicyQueryStub:
    """Power policy with no exempt applications."""
    return PowerPolicyQueryStub()


@pytest.fixture
def settings_prompt() -> SettingsPromptStub:
    """Settings prompt whose launches succeed."""
    return SettingsPromptStub()


@pytest.fixture
def negotiator(
    application_id: str,
    capability_gate: PlatformCapabilityGateStub,
    power_policy: PowerPolicyQueryStub,
    settings_prompt: SettingsPromptStub,
) -> ExemptionNegotiator:
    """Negotiator wired to the stub fixtures."""
    return ExemptionNegotiator(
        application_id=application_id,
        capability_gate=capability_gate,
        power_policy=power_policy,
        settings_prompt=settings_prompt,
    )
