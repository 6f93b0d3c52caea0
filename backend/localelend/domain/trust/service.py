"""Recompute and persist trust scores when a user's aggregates change."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

from pydantic import ValidationError

from localelend.domain.trust.engine import calculate_trust_score
from localelend.domain.trust.models import TrustLevel, TrustScoreResult
from localelend.domain.trust.schemas import UserTrustRecord
from localelend.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)


class UserNotFound(LookupError):
	"""Raised when the store holds no record for the requested user."""


class InvalidRecord(ValueError):
	"""Raised when a stored user document fails the schema boundary."""

	reason = "invalid_record"

	def __init__(self, user_id: str, error_count: int) -> None:
		super().__init__(f"stored record for {user_id} failed validation")
		self.user_id = user_id
		self.error_count = error_count


class TrustRepository(Protocol):
	"""Storage contract for user aggregates and the derived score."""

	async def get_aggregates(self, user_id: str) -> UserTrustRecord | None:
		...

	async def save_score(self, user_id: str, score: float, level: TrustLevel, computed_at: datetime) -> None:
		...


def score_inputs(record: UserTrustRecord, *, now: Optional[datetime] = None) -> TrustScoreResult:
	"""Run the engine on a stored record.

	``TrustInputError`` propagates; the HTTP layer counts it as a reject.
	"""
	result = calculate_trust_score(record.to_inputs(now))
	obs_metrics.inc_trust_score(result.level.value)
	return result


class TrustService:
	"""Caller-side flow around the pure engine: load, score, persist."""

	def __init__(self, repository: TrustRepository) -> None:
		self._repo = repository

	async def recompute(self, user_id: str, *, now: Optional[datetime] = None) -> TrustScoreResult:
		try:
			record = await self._repo.get_aggregates(user_id)
		except ValidationError as exc:
			logger.warning("user record rejected", extra={"user_id": user_id, "errors": exc.error_count()})
			raise InvalidRecord(user_id, exc.error_count()) from exc
		if record is None:
			raise UserNotFound(user_id)
		now = now or datetime.now(timezone.utc)
		result = score_inputs(record, now=now)
		await self._repo.save_score(user_id, result.score, result.level, now)
		logger.info(
			"trust score recomputed",
			extra={
				"user_id": user_id,
				"score": result.score,
				"trust_level": result.level.value,
				"confidence": result.confidence.value,
			},
		)
		return result
