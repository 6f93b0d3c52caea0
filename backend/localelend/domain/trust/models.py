"""Domain models for user trust scoring."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

MIN_RATING = 0.0
MAX_RATING = 5.0

_COUNTER_FIELDS = (
	"total_reviews",
	"successful_returns",
	"total_borrowings",
	"successful_lends",
	"total_lendings",
	"account_age_days",
)


class TrustInputError(ValueError):
	"""Raised when trust inputs fall outside their legal domain."""

	def __init__(self, reason: str):
		super().__init__(reason)
		self.reason = reason


class TrustLevel(str, Enum):
	NEW = "New"
	BRONZE = "Bronze"
	SILVER = "Silver"
	GOLD = "Gold"
	PLATINUM = "Platinum"


class TrustConfidence(str, Enum):
	LOW = "Low"
	MEDIUM = "Medium"
	HIGH = "High"


@dataclass(frozen=True, slots=True)
class TrustInputs:
	"""Aggregate counters for one user, as held by the document store.

	Negative counters and ratings outside [0, 5] are rejected rather than
	clamped; returns may exceed borrowings, which is tolerated.
	"""

	average_review_rating: float = 0.0
	total_reviews: int = 0
	successful_returns: int = 0
	total_borrowings: int = 0
	successful_lends: int = 0
	total_lendings: int = 0
	is_verified: bool = False
	account_age_days: int = 0

	def __post_init__(self) -> None:
		rating = self.average_review_rating
		if not math.isfinite(rating) or rating < MIN_RATING or rating > MAX_RATING:
			raise TrustInputError("rating_out_of_range")
		for name in _COUNTER_FIELDS:
			if getattr(self, name) < 0:
				raise TrustInputError(f"negative_{name}")

	@property
	def total_transactions(self) -> int:
		return self.total_borrowings + self.total_lendings

	@property
	def successful_transactions(self) -> int:
		return self.successful_returns + self.successful_lends


@dataclass(frozen=True, slots=True)
class TrustBreakdown:
	review_component: float
	return_component: float
	verification_bonus: float
	tenure_bonus: float


@dataclass(frozen=True, slots=True)
class TrustScoreResult:
	score: float
	level: TrustLevel
	confidence: TrustConfidence
	breakdown: TrustBreakdown

	def to_dict(self) -> Dict[str, Any]:
		return {
			"score": self.score,
			"level": self.level.value,
			"confidence": self.confidence.value,
			"breakdown": {
				"reviewComponent": self.breakdown.review_component,
				"returnComponent": self.breakdown.return_component,
				"verificationBonus": self.breakdown.verification_bonus,
				"tenureBonus": self.breakdown.tenure_bonus,
			},
		}
