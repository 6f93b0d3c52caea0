import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from localelend.infra.memory import InMemoryItemRepository, InMemoryUserRepository
from localelend.main import create_app

GUNTUR = (80.4365, 16.3067)


def point(lon: float, lat: float) -> dict:
	return {"type": "Point", "coordinates": [lon, lat]}


@pytest.fixture
def now() -> datetime:
	return datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def user_repository(now):
	return InMemoryUserRepository(
		[
			{
				"id": "veteran",
				"averageReviewRating": 5,
				"totalReviews": 5,
				"successfulReturns": 5,
				"totalBorrowings": 5,
				"successfulLends": 0,
				"totalLendings": 0,
				"verified": True,
				"memberSince": now - timedelta(days=730),
			},
			{
				"id": "newcomer",
				"averageReviewRating": 0,
				"totalReviews": 0,
				"verified": False,
			},
			{
				"id": "corrupt",
				"averageReviewRating": 4.0,
				"totalReviews": -3,
			},
		]
	)


@pytest.fixture
def item_repository(now):
	lon, lat = GUNTUR
	return InMemoryItemRepository(
		[
			{
				"id": "drill",
				"title": "Cordless Drill",
				"category": "Tools",
				"location": point(lon, lat + 0.0001),
				"status": "lended",
				"createdAt": now - timedelta(days=1),
				"borrowCount": 12,
			},
			{
				"id": "tent",
				"title": "Family Tent",
				"category": "Outdoor",
				"location": point(lon, lat + 0.01),
				"status": "available",
				"createdAt": now - timedelta(days=3),
				"borrowCount": 4,
			},
			{
				"id": "mixer",
				"title": "Stand Mixer",
				"category": "Kitchen",
				"location": point(lon + 0.005, lat),
				"status": "available",
				"createdAt": now - timedelta(days=2),
				"borrowCount": 7,
			},
			{
				"id": "far-bike",
				"title": "Mountain Bike",
				"category": "Sports",
				"location": point(lon, lat + 0.5),
				"status": "available",
				"createdAt": now - timedelta(days=5),
				"borrowCount": 1,
			},
			{
				"id": "broken",
				"title": "Ghost Listing",
				"category": "Books",
				"location": point(200.0, lat),
			},
		]
	)


@pytest.fixture
def app(user_repository, item_repository):
	return create_app(user_repository=user_repository, item_repository=item_repository)


@pytest_asyncio.fixture
async def api_client(app):
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
