"""API fixtures — httpx AsyncClient against the app with a test DatabasePool.

The ASGI transport does not run the lifespan, so the pool is attached to
app.state directly and detached again after each test.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from congregation.main import app


@pytest.fixture
async def client(database):
    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.database = None
