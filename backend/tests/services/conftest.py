"""Service test fixtures: in-memory fund repository + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryFundStore seeded with Alpha and Beta
    - get_fund_store dependency overridden so no route test touches the filesystem
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fund_catalog.infrastructure.json_store import get_fund_store
from fund_catalog.main import app
from tests.services.fake_store import InMemoryFundStore, make_fund


@pytest.fixture
def store():
    return InMemoryFundStore([
        make_fund("Alpha", fundSize=100, vintage=2020),
        make_fund("Beta", fundSize=50, vintage=2021),
    ])


@pytest.fixture
async def client(store):
    """FastAPI test client with the fund store overridden."""
    app.dependency_overrides[get_fund_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
