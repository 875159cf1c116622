"""POST /v1/score - Experience point calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from experience_score.api.v1.schemas import (
    EntryResultSchema,
    FormattedTotalsSchema,
    ScoreRequest,
    ScoreResponse,
    TotalsSchema,
)
from experience_score.api.dependencies import get_decimal_separator, get_request_id, get_scoring_config
from experience_score.domain.entries import EntryList, ExperienceForm
from experience_score.domain.formatting import breakdown_lines, error_lines, format_points
from experience_score.domain.models import ScoringConfig
from experience_score.infrastructure.observability.logging import log_calculation
from experience_score.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def create_score(
    request_body: ScoreRequest,
    request: Request,
    config: ScoringConfig = Depends(get_scoring_config),
    decimal_separator: str = Depends(get_decimal_separator),
):
    """
    Score every experience in the submitted form.

    Flow:
    1. Build the entry list (masking dates, assigning missing ids)
    2. Score each entry and aggregate the totals
    3. Render breakdown and error lines by entry position
    4. Record metrics and log the outcome

    Entries with errors are reported but never block the totals.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        entries = EntryList.from_rows((e.id, e.start_date, e.end_date) for e in request_body.entries)
        form = ExperienceForm(entries=entries, has_degree=request_body.has_degree)
        report = form.evaluate(config)

        results = [
            EntryResultSchema(
                id=result.id,
                position=position,
                start_date=entry.start_text,
                end_date=entry.end_text,
                days=result.days,
                periods=result.periods,
                remainder=result.remainder,
                points=result.points,
                is_valid=result.is_valid,
                error_kind=result.error_kind.value if result.error_kind else None,
                error_message=result.error_message,
            )
            for position, (entry, result) in enumerate(zip(entries, report.results), start=1)
        ]
        totals = report.totals

        response = ScoreResponse(
            has_degree=report.has_degree,
            results=results,
            totals=TotalsSchema(
                total_periods=totals.total_periods,
                total_points_from_periods=totals.total_points_from_periods,
                bonus_points=totals.bonus_points,
                total_points=totals.total_points,
            ),
            formatted=FormattedTotalsSchema(
                total_points_from_periods=format_points(totals.total_points_from_periods, decimal_separator),
                bonus_points=format_points(totals.bonus_points, decimal_separator),
                total_points=format_points(totals.total_points, decimal_separator),
            ),
            breakdown=breakdown_lines(entries, report, decimal_separator),
            errors=error_lines(entries, report),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation(report)
    log_calculation(
        request_id,
        entry_count=len(entries),
        valid_count=len(report.valid_results),
        error_count=len(report.invalid_results),
        total_points=totals.total_points,
        duration_ms=duration_ms,
    )

    return response
