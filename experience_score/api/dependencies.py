"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from experience_score.config import settings
from experience_score.domain.models import ScoringConfig


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_scoring_config() -> ScoringConfig:
    """Provide the scoring rules from settings"""
    return settings.scoring_config()


def get_decimal_separator() -> str:
    return settings.decimal_separator
