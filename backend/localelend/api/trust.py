"""REST API surface for trust scoring."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from localelend.api.dependencies import get_trust_service
from localelend.domain.trust.engine import calculate_trust_score
from localelend.domain.trust.schemas import TrustInputsPayload, TrustScoreResponse
from localelend.domain.trust.service import TrustService, UserNotFound
from localelend.obs import metrics as obs_metrics

router = APIRouter()


@router.post("/trust/score", response_model=TrustScoreResponse)
async def score(payload: TrustInputsPayload) -> TrustScoreResponse:
    result = calculate_trust_score(payload.to_inputs())
    obs_metrics.inc_trust_score(result.level.value)
    return TrustScoreResponse.from_result(result)


@router.post("/users/{user_id}/trust/recompute", response_model=TrustScoreResponse)
async def recompute(user_id: str, service: TrustService = Depends(get_trust_service)) -> TrustScoreResponse:
    try:
        result = await service.recompute(user_id)
    except UserNotFound:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "user not found") from None
    return TrustScoreResponse.from_result(result)
