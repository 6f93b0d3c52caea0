from datetime import datetime, timedelta, timezone

import pytest

from localelend.domain.trust.models import TrustInputError, TrustLevel
from localelend.domain.trust.schemas import UserTrustRecord
from localelend.domain.trust.service import InvalidRecord, TrustService, UserNotFound, score_inputs
from localelend.infra.memory import InMemoryUserRepository

NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_recompute_persists_score_on_user_document():
	repo = InMemoryUserRepository(
		[
			{
				"id": "u1",
				"averageReviewRating": 4.8,
				"totalReviews": 12,
				"successfulReturns": 6,
				"totalBorrowings": 6,
				"successfulLends": 4,
				"totalLendings": 4,
				"verified": True,
				"memberSince": NOW - timedelta(days=400),
			}
		]
	)
	service = TrustService(repo)

	result = await service.recompute("u1", now=NOW)

	assert result.score == 5.0
	assert result.level is TrustLevel.PLATINUM
	doc = repo.users["u1"]
	assert doc["trustScore"] == 5.0
	assert doc["trustLevel"] == "Platinum"
	assert doc["trustScoreUpdatedAt"] == NOW


@pytest.mark.asyncio
async def test_recompute_for_new_member():
	repo = InMemoryUserRepository([{"id": "fresh", "memberSince": NOW}])
	result = await TrustService(repo).recompute("fresh", now=NOW)

	assert result.score == 3.0
	assert result.level is TrustLevel.BRONZE
	assert repo.users["fresh"]["trustScore"] == 3.0


@pytest.mark.asyncio
async def test_recompute_unknown_user_raises():
	with pytest.raises(UserNotFound):
		await TrustService(InMemoryUserRepository()).recompute("ghost")


@pytest.mark.asyncio
async def test_malformed_document_is_rejected_at_boundary():
	repo = InMemoryUserRepository([{"id": "bad", "totalLendings": -1}])
	with pytest.raises(InvalidRecord) as excinfo:
		await TrustService(repo).recompute("bad")
	assert excinfo.value.reason == "invalid_record"
	assert excinfo.value.user_id == "bad"
	assert "trustScore" not in repo.users["bad"]


def test_score_inputs_propagates_engine_rejects():
	record = UserTrustRecord.model_construct(
		user_id="x",
		average_review_rating=9.0,
		total_reviews=1,
		successful_returns=0,
		total_borrowings=0,
		successful_lends=0,
		total_lendings=0,
		is_verified=False,
		account_age_days=0,
		created_at=None,
	)
	with pytest.raises(TrustInputError):
		score_inputs(record)
