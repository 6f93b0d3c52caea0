"""Trust score computation.

The score is a weighted blend of peer reviews (70%) and transaction success
(30%), plus small bonuses for verification and account tenure:

    score = review * 0.7 + returns * 0.3 + verification + tenure

Both components sit on a 0-5 scale. Users with little history are pulled
towards a neutral prior of 3.0 so that a single five-star review does not
jump straight to a perfect score.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from localelend.domain.trust.models import (
	TrustBreakdown,
	TrustConfidence,
	TrustInputs,
	TrustLevel,
	TrustScoreResult,
)

REVIEW_WEIGHT = 0.7
RETURN_WEIGHT = 0.3

NEW_USER_BASE_SCORE = 3.0
MIN_REVIEWS_FOR_CONFIDENCE = 5
MIN_TRANSACTIONS_FOR_CONFIDENCE = 5
MIN_HISTORY_FOR_MEDIUM = 2

VERIFICATION_BONUS = 0.2
MAX_TENURE_BONUS = 0.3
TENURE_FULL_DAYS = 365

MIN_SCORE = 0.0
MAX_SCORE = 5.0

# Highest threshold first; evaluated against the rounded score.
LEVEL_THRESHOLDS = (
	(4.5, TrustLevel.PLATINUM),
	(4.0, TrustLevel.GOLD),
	(3.5, TrustLevel.SILVER),
	(2.5, TrustLevel.BRONZE),
)


def round_half_up(value: float, places: int = 1) -> float:
	"""Round half away from zero on the shortest decimal repr of ``value``."""
	quantum = Decimal(1).scaleb(-places)
	return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _review_component(inputs: TrustInputs) -> float:
	if inputs.total_reviews == 0:
		return NEW_USER_BASE_SCORE
	confidence_factor = min(inputs.total_reviews / MIN_REVIEWS_FOR_CONFIDENCE, 1)
	return NEW_USER_BASE_SCORE * (1 - confidence_factor) + inputs.average_review_rating * confidence_factor


def _return_component(inputs: TrustInputs) -> float:
	total = inputs.total_transactions
	if total == 0:
		return NEW_USER_BASE_SCORE
	return inputs.successful_transactions / total * 5


def tenure_bonus(account_age_days: int) -> float:
	return min(account_age_days / TENURE_FULL_DAYS, 1) * MAX_TENURE_BONUS


def level_for_score(score: float) -> TrustLevel:
	for threshold, level in LEVEL_THRESHOLDS:
		if score >= threshold:
			return level
	return TrustLevel.NEW


def confidence_for(total_reviews: int, total_transactions: int) -> TrustConfidence:
	if total_reviews >= MIN_REVIEWS_FOR_CONFIDENCE and total_transactions >= MIN_TRANSACTIONS_FOR_CONFIDENCE:
		return TrustConfidence.HIGH
	if total_reviews >= MIN_HISTORY_FOR_MEDIUM or total_transactions >= MIN_HISTORY_FOR_MEDIUM:
		return TrustConfidence.MEDIUM
	return TrustConfidence.LOW


def calculate_trust_score(inputs: TrustInputs) -> TrustScoreResult:
	"""Compute the trust score, level and confidence for one user."""
	review_component = _review_component(inputs)
	return_component = _return_component(inputs)
	verification = VERIFICATION_BONUS if inputs.is_verified else 0.0
	tenure = tenure_bonus(inputs.account_age_days)

	raw = review_component * REVIEW_WEIGHT + return_component * RETURN_WEIGHT
	raw = max(MIN_SCORE, min(MAX_SCORE, raw + verification + tenure))
	score = round_half_up(raw, 1)

	return TrustScoreResult(
		score=score,
		level=level_for_score(score),
		confidence=confidence_for(inputs.total_reviews, inputs.total_transactions),
		breakdown=TrustBreakdown(
			review_component=round_half_up(review_component, 1),
			return_component=round_half_up(return_component, 1),
			verification_bonus=verification,
			tenure_bonus=round_half_up(tenure, 2),
		),
	)


def account_age_days(created_at: datetime, now: Optional[datetime] = None) -> int:
	"""Whole days since ``created_at``; naive timestamps are taken as UTC."""
	if created_at.tzinfo is None:
		created_at = created_at.replace(tzinfo=timezone.utc)
	now = now or datetime.now(timezone.utc)
	if now.tzinfo is None:
		now = now.replace(tzinfo=timezone.utc)
	return max(0, (now - created_at).days)


def trust_color_class(score: float) -> str:
	if score >= 4.0:
		return "trust-high"
	if score >= 2.5:
		return "trust-medium"
	return "text-muted-foreground"


def format_trust_score(score: float) -> str:
	return f"{round_half_up(score, 1):.1f}"
