"""Pydantic schemas for trust scoring payloads and stored user aggregates."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from localelend.domain.trust import engine
from localelend.domain.trust.models import TrustInputs, TrustScoreResult


class TrustInputsPayload(BaseModel):
	"""Aggregate counters as submitted by a client or read from the store.

	Numeric strings are coerced; negative counts and out-of-range ratings fail
	validation before they reach the engine.
	"""

	average_review_rating: float = Field(0.0, ge=0.0, le=5.0, allow_inf_nan=False, alias="averageReviewRating")
	total_reviews: int = Field(0, ge=0, alias="totalReviews")
	successful_returns: int = Field(0, ge=0, alias="successfulReturns")
	total_borrowings: int = Field(0, ge=0, alias="totalBorrowings")
	successful_lends: int = Field(0, ge=0, alias="successfulLends")
	total_lendings: int = Field(0, ge=0, alias="totalLendings")
	is_verified: bool = Field(False, alias="isVerified")
	account_age_days: int = Field(0, ge=0, alias="accountAgeDays")

	model_config = {"populate_by_name": True}

	def to_inputs(self) -> TrustInputs:
		return TrustInputs(
			average_review_rating=self.average_review_rating,
			total_reviews=self.total_reviews,
			successful_returns=self.successful_returns,
			total_borrowings=self.total_borrowings,
			successful_lends=self.successful_lends,
			total_lendings=self.total_lendings,
			is_verified=self.is_verified,
			account_age_days=self.account_age_days,
		)


class UserTrustRecord(TrustInputsPayload):
	"""User document projection holding the counters the engine needs."""

	user_id: str = Field(..., alias="id", min_length=1)
	created_at: Optional[datetime] = Field(None, alias="memberSince")
	is_verified: bool = Field(False, alias="verified")

	def to_inputs(self, now: Optional[datetime] = None) -> TrustInputs:
		inputs = super().to_inputs()
		if self.created_at is None:
			return inputs
		return replace(inputs, account_age_days=engine.account_age_days(self.created_at, now))


class TrustBreakdownOut(BaseModel):
	review_component: float = Field(alias="reviewComponent")
	return_component: float = Field(alias="returnComponent")
	verification_bonus: float = Field(alias="verificationBonus")
	tenure_bonus: float = Field(alias="tenureBonus")

	model_config = {"populate_by_name": True}


class TrustScoreResponse(BaseModel):
	score: float = Field(..., ge=0.0, le=5.0)
	level: str
	confidence: str
	breakdown: TrustBreakdownOut
	display: str
	color_class: str = Field(alias="colorClass")

	model_config = {"populate_by_name": True}

	@classmethod
	def from_result(cls, result: TrustScoreResult) -> "TrustScoreResponse":
		return cls(
			score=result.score,
			level=result.level.value,
			confidence=result.confidence.value,
			breakdown=TrustBreakdownOut(
				review_component=result.breakdown.review_component,
				return_component=result.breakdown.return_component,
				verification_bonus=result.breakdown.verification_bonus,
				tenure_bonus=result.breakdown.tenure_bonus,
			),
			display=engine.format_trust_score(result.score),
			color_class=engine.trust_color_class(result.score),
		)
