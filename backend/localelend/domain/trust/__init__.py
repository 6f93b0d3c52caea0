"""Trust domain exports."""

from .engine import calculate_trust_score, format_trust_score, level_for_score, trust_color_class
from .models import TrustConfidence, TrustInputError, TrustInputs, TrustLevel, TrustScoreResult

__all__ = [
	"TrustConfidence",
	"TrustInputError",
	"TrustInputs",
	"TrustLevel",
	"TrustScoreResult",
	"calculate_trust_score",
	"format_trust_score",
	"level_for_score",
	"trust_color_class",
]
