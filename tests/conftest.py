from datetime import datetime, timezone
from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from leadengine.main import app
from leadengine.schemas.common import OwnerRole
from leadengine.schemas.lead import Lead, Owner

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time shared by time-sensitive tests."""
    return NOW


@pytest.fixture
def make_lead() -> Callable[..., Lead]:
    """Return a factory building a minimal valid ``Lead``."""

    def _make_lead(**overrides) -> Lead:
        defaults = {
            "id": "lead-1",
            "name": "Riya Sharma",
            "phone": "9876543210",
            "city": "Bangalore",
            "created_at": NOW,
        }
        defaults.update(overrides)
        return Lead(**defaults)

    return _make_lead


@pytest.fixture
def owners() -> List[Owner]:
    """Two sales executives and one business manager, all in Bangalore."""
    return [
        Owner(
            id="1",
            name="Ram Kumar",
            role=OwnerRole.SALES_EXECUTIVE,
            city="Bangalore",
            expertise=["Nexon", "Tiago"],
        ),
        Owner(
            id="2",
            name="Priya Sharma",
            role=OwnerRole.SALES_EXECUTIVE,
            city="Bangalore",
            expertise=["Punch", "Harrier"],
        ),
        Owner(
            id="3",
            name="Amit Patel",
            role=OwnerRole.BUSINESS_MANAGER,
            city="Bangalore",
        ),
    ]


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
