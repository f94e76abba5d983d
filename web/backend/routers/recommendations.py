#!/usr/bin/env python3
"""
Recommendation endpoint - rank the user's arsenal for an oil pattern.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.scorer import MatchScorer
from ..dependencies import get_db, get_current_user_id, get_match_scorer
from ..services.recommendation_service import RecommendationService
from ..models.requests import RecommendationRequest
from ..models.responses import RecommendationResponse

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.post("/recommend-balls", response_model=RecommendationResponse)
def recommend_balls(
    request: RecommendationRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    scorer: MatchScorer = Depends(get_match_scorer)
):
    """
    Score every ball in the user's arsenal against an oil pattern.

    Returns the balls sorted by match score (highest first), each with
    the reasons behind its score.
    """
    service = RecommendationService(db, scorer=scorer)
    recommendations = service.recommend(user_id, request.pattern_id, request.bowler_specs)

    return RecommendationResponse(
        success=True,
        pattern_id=request.pattern_id,
        count=len(recommendations),
        recommendations=recommendations
    )
