import sys
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from http_api_helper import APIHelper, RequestConfig  # noqa: E402
from http_api_helper.utils import FixedPlatform  # noqa: E402


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Pin the environment-driven settings for every test.

    Keeps a developer's local ``HTTP_API_HELPER_*`` variables from
    leaking into expectations.
    """
    monkeypatch.setenv("HTTP_API_HELPER_RELEASE_MODE", "false")
    monkeypatch.setenv("HTTP_API_HELPER_LOG_LEVEL", "INFO")
    monkeypatch.setenv("HTTP_API_HELPER_DEFAULT_TIMEOUT_SECONDS", "60")
    monkeypatch.setenv("HTTP_API_HELPER_CONNECTIVITY_HOST", "example.invalid")
    yield


@pytest.fixture
def online_probe():
    """Probe reporting the network reachable."""
    probe = MagicMock()
    probe.has_network = AsyncMock(return_value=True)
    return probe


@pytest.fixture
def offline_probe():
    """Probe reporting the network unreachable."""
    probe = MagicMock()
    probe.has_network = AsyncMock(return_value=False)
    return probe


@pytest.fixture
def make_helper(online_probe) -> Callable[..., APIHelper]:
    """Build an APIHelper wired to a mock transport.

    Keyword arguments other than ``handler``, ``probe`` and ``platform``
    go to :class:`RequestConfig`.
    """

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        probe=None,
        platform=None,
        log=None,
        **config_kwargs,
    ) -> APIHelper:
        config_kwargs.setdefault("base_url", "https://api.example.com")
        config_kwargs.setdefault("end_point", "/items")
        config_kwargs.setdefault("is_release_mode", False)
        return APIHelper(
            RequestConfig(**config_kwargs),
            probe=probe or online_probe,
            platform=platform or FixedPlatform(is_ios=False),
            log=log,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def json_handler():
    """Factory for transport handlers answering with a fixed JSON body."""

    def factory(status_code: int = 200, payload: Optional[object] = None):
        body = {"id": 1} if payload is None else payload

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=body)

        return handler

    return factory
