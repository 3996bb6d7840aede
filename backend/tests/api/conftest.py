"""API test fixtures: FastAPI app over httpx ASGI transport.

Invariants:
    - Every test starts with an empty capture registry
    - Lifespan is not run: logging setup is not under test here
"""

import pytest
from httpx import ASGITransport, AsyncClient

from netpager.api.routes import network_capture
from netpager.main import app


@pytest.fixture(autouse=True)
def _empty_captures():
    network_capture._captures.clear()
    network_capture._dispatchers.clear()
    yield
    network_capture._captures.clear()
    network_capture._dispatchers.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def capture_id(client) -> str:
    res = await client.post("/api/v1/captures")
    return res.json()["id"]
