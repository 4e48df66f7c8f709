"""API test fixtures — FastAPI app driven through httpx.

Invariants:
    - Every test gets a fresh AsyncClient bound to the ASGI app
    - dependency_overrides cleared after each test
    - fake_clock replaces the process clock so uptime tests never sleep
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.uptime import UptimeClock, get_process_clock
from app.main import app


class FakeTime:
    """Controllable time source: advance() moves the clock forward."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_time():
    """Install an UptimeClock driven by FakeTime; returns the FakeTime."""
    source = FakeTime()
    clock = UptimeClock(now=source)
    app.dependency_overrides[get_process_clock] = lambda: clock
    yield source
    app.dependency_overrides.pop(get_process_clock, None)
