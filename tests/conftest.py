"""Shared pytest fixtures for the Horizons backend tests."""
import os
import tempfile

# Keep test logs out of the project tree; must run before the app is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="horizons-logs-"))

from typing import Callable, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app import app
from common.simulation import SimulationDelays, get_simulation_delays
from videos.services import cancel_background_jobs


@pytest.fixture
def set_delays() -> Generator[Callable[..., SimulationDelays], None, None]:
    """Override the simulated delays for the duration of a test.

    Returns:
        Callable taking keyword delays (image, short_video, long_video, avatar);
        unspecified kinds default to zero.

    Cleanup:
        Dependency overrides are cleared after the test
    """
    def _set(**delays: float) -> SimulationDelays:
        values = {"image": 0.0, "short_video": 0.0, "long_video": 0.0, "avatar": 0.0}
        values.update(delays)
        configured = SimulationDelays(**values)
        app.dependency_overrides[get_simulation_delays] = lambda: configured
        return configured

    yield _set
    app.dependency_overrides.pop(get_simulation_delays, None)


@pytest.fixture
def test_client(set_delays) -> Generator[TestClient, None, None]:
    """TestClient with every delay set to zero.

    The client is used as a context manager so that startup and shutdown
    hooks run and detached jobs share one event loop.
    """
    set_delays()
    with TestClient(app) as client:
        yield client


@pytest_asyncio.fixture
async def async_client(set_delays):
    """httpx AsyncClient bound to the app, for concurrency tests.

    Delays default to zero; tests call ``set_delays`` again to change them.
    """
    set_delays()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await cancel_background_jobs()
