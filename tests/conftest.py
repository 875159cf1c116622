"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from experience_score.api.main import create_app
from experience_score.api.dependencies import get_scoring_config
from experience_score.domain.entries import EntryList
from experience_score.domain.models import ScoringConfig


@pytest.fixture
def config() -> ScoringConfig:
    """Default scoring rules: 180-day periods, 4.5 points, 10 point bonus"""
    return ScoringConfig()


@pytest.fixture
def client(config: ScoringConfig) -> TestClient:
    """Create FastAPI test client with fixed scoring rules"""
    app = create_app()
    app.dependency_overrides[get_scoring_config] = lambda: config
    return TestClient(app)


@pytest.fixture
def sample_entries() -> EntryList:
    """Three entries: one valid, one incomplete, one inverted range"""
    return (
        EntryList()
        .add("01/01/2024", "01/07/2024")  # 182 days
        .add("01/01/2023", "")
        .add("10/05/2022", "01/05/2022")
    )
