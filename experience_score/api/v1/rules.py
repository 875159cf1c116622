"""GET /v1/rules - Active scoring rules"""

from fastapi import APIRouter, Depends

from experience_score.api.v1.schemas import RulesResponse
from experience_score.api.dependencies import get_scoring_config
from experience_score.domain.models import ScoringConfig

router = APIRouter()


@router.get("/rules", response_model=RulesResponse)
def get_rules(config: ScoringConfig = Depends(get_scoring_config)):
    """Period length, points per period and degree bonus in effect"""
    return RulesResponse(
        period_length_days=config.period_length_days,
        points_per_period=config.points_per_period,
        degree_bonus=config.degree_bonus,
    )
