"""Root conftest.py for pytest configuration.

This file configures pytest for the entire project, ensuring:
- Proper Python path setup for imports
- Logfire observability configuration (local only)
- Shared fixtures across all tests
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

import logfire
import pytest


# ============================================================================
# Python Path Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings and ensure project root is in sys.path."""

    # Add project root to sys.path so top-level packages are importable
    project_root = Path(__file__).parent.resolve()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    # Register custom markers
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring external services"
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests (fast, no external dependencies)"
    )

    # Configure logfire for all tests; nothing leaves the machine
    logfire.configure(
        service_name="deathnote_tests",
        environment="test",
        send_to_logfire=False,
        console=False,
    )


# ============================================================================
# Shared Fixtures
# ============================================================================

class FakeContentProvider:
    """Provider double that records calls and returns or raises on demand."""

    def __init__(self, response: Optional[str] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Tuple[str, float]] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return True

    async def complete(self, prompt: str, temperature: float) -> str:
        self.calls.append((prompt, temperature))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def project_root():
    """Return the absolute path to the project root directory."""
    return Path(__file__).parent.resolve()


@pytest.fixture
def fake_provider():
    """Factory for FakeContentProvider instances.

    Usage:
        def test_something(fake_provider):
            provider = fake_provider(response="<h1>Hi</h1>")
    """
    def _make(response: Optional[str] = None, error: Optional[Exception] = None):
        return FakeContentProvider(response=response, error=error)

    return _make


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Fixture to mock environment variables for testing.

    Usage:
        def test_something(mock_env_vars):
            mock_env_vars({"PROVIDER_API_KEY": "test-key", "DEBUG": "true"})
    """
    def _set_env_vars(env_dict: dict):
        for key, value in env_dict.items():
            monkeypatch.setenv(key, value)

    return _set_env_vars
