"""POST /v1/dates/parse - Validate a single date field as it is typed"""

import logging
from fastapi import APIRouter, Depends, Request

from experience_score.api.v1.schemas import ParseDateRequest, ParseDateResponse
from experience_score.api.dependencies import get_request_id
from experience_score.domain.dates import parse_date
from experience_score.domain.exceptions import InvalidDateFormatError
from experience_score.domain.models import ErrorKind
from experience_score.utils.date_utils import apply_date_mask

router = APIRouter()


@router.post("/dates/parse", response_model=ParseDateResponse)
def parse_date_field(
    request_body: ParseDateRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Mask the text and check that it is a real DD/MM/YYYY date.

    Returns:
        status "absent" for blank text, "valid" with the parsed date,
        or "invalid_format" with the user-facing message
    """
    masked = apply_date_mask(request_body.text)

    try:
        parsed = parse_date(request_body.text)
    except InvalidDateFormatError as e:
        logging.debug(f"Rejected date: {e}", extra={"request_id": request_id})
        return ParseDateResponse(
            masked=masked,
            status="invalid_format",
            error_message=ErrorKind.INVALID_FORMAT.message,
        )

    if parsed is None:
        return ParseDateResponse(masked=masked, status="absent")

    return ParseDateResponse(masked=masked, status="valid", parsed_date=parsed)
