"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class EntrySchema(BaseModel):
    """One experience row as typed in the form"""

    id: Optional[int] = Field(None, ge=1, description="Entry id; assigned as max + 1 when omitted")
    start_date: str = Field("", max_length=32, description="Start date, DD/MM/YYYY or raw digits")
    end_date: str = Field("", max_length=32, description="End date, DD/MM/YYYY or raw digits")


class ScoreRequest(BaseModel):
    """Request body for POST /v1/score"""

    has_degree: bool = False
    entries: List[EntrySchema] = Field(default_factory=list)

    @field_validator("entries")
    @classmethod
    def ids_unique(cls, entries: List[EntrySchema]) -> List[EntrySchema]:
        ids = [e.id for e in entries if e.id is not None]
        if len(ids) != len(set(ids)):
            raise ValueError("entry ids must be unique")
        return entries


class EntryResultSchema(BaseModel):
    """Score of a single entry"""

    id: int
    position: int
    start_date: str
    end_date: str
    days: int
    periods: int
    remainder: int
    points: float
    is_valid: bool
    error_kind: Optional[str] = None
    error_message: Optional[str] = None


class TotalsSchema(BaseModel):
    total_periods: int
    total_points_from_periods: float
    bonus_points: float
    total_points: float


class FormattedTotalsSchema(BaseModel):
    """Totals rendered with the configured decimal separator"""

    total_points_from_periods: str
    bonus_points: str
    total_points: str


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    has_degree: bool
    results: List[EntryResultSchema]
    totals: TotalsSchema
    formatted: FormattedTotalsSchema
    breakdown: List[str]
    errors: List[str]


class ParseDateRequest(BaseModel):
    """Request body for POST /v1/dates/parse"""

    text: str = Field("", max_length=32)


class ParseDateResponse(BaseModel):
    """Response for POST /v1/dates/parse"""

    masked: str
    status: Literal["absent", "valid", "invalid_format"]
    parsed_date: Optional[date] = None
    error_message: Optional[str] = None


class RulesResponse(BaseModel):
    """Response for GET /v1/rules"""

    period_length_days: int
    points_per_period: float
    degree_bonus: float
