"""Integration tests for API endpoints"""

from fastapi.testclient import TestClient
from experience_score.api.dependencies import get_scoring_config
from experience_score.api.main import create_app
from experience_score.domain.models import ScoringConfig


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "experience_score_calculations_total" in response.text


def test_request_id_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_rules_endpoint(client: TestClient):
    response = client.get("/v1/rules")

    assert response.status_code == 200
    assert response.json() == {
        "period_length_days": 180,
        "points_per_period": 4.5,
        "degree_bonus": 10.0,
    }


def test_score_endpoint_totals(client: TestClient):
    """Test POST /v1/score with two valid entries and a degree"""
    response = client.post(
        "/v1/score",
        json={
            "has_degree": True,
            "entries": [
                {"start_date": "01/01/2024", "end_date": "01/07/2024"},
                {"start_date": "01/01/2020", "end_date": "01/01/2021"},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totals"] == {
        "total_periods": 3,
        "total_points_from_periods": 13.5,
        "bonus_points": 10.0,
        "total_points": 23.5,
    }
    assert data["formatted"]["total_points"] == "23,5"
    assert data["results"][0]["days"] == 182
    assert data["results"][0]["remainder"] == 2
    assert data["results"][1]["days"] == 366
    assert data["errors"] == []
    assert len(data["breakdown"]) == 2


def test_score_endpoint_errors_do_not_block_totals(client: TestClient):
    """Test invalid entries are listed by position while the rest still count"""
    response = client.post(
        "/v1/score",
        json={
            "entries": [
                {"id": 10, "start_date": "31/04/2024", "end_date": "01/07/2024"},
                {"id": 11, "start_date": "01/01/2024", "end_date": "01/01/2024"},
                {"id": 12, "start_date": "01/01/2024", "end_date": "01/07/2024"},
                {"id": 13, "start_date": "01/01/2024", "end_date": ""},
            ],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert [r["error_kind"] for r in data["results"]] == [
        "invalid_format",
        "end_before_start",
        None,
        None,
    ]
    assert data["errors"] == [
        "Experience 1: Invalid date. Use DD/MM/YYYY format.",
        "Experience 2: End date must be after start date.",
    ]
    assert data["breakdown"] == [
        "Experience 3: 182 day(s) (1 period(s) of 180 days, 2 day(s) remaining) -> 4,5 points"
    ]
    assert data["totals"]["total_points"] == 4.5
    assert data["totals"]["bonus_points"] == 0


def test_score_endpoint_masks_raw_digits_and_assigns_ids(client: TestClient):
    response = client.post(
        "/v1/score",
        json={
            "entries": [
                {"id": 3, "start_date": "01012024", "end_date": "01072024"},
                {"start_date": "", "end_date": ""},
            ]
        },
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert results[0]["start_date"] == "01/01/2024"
    assert results[0]["end_date"] == "01/07/2024"
    assert results[0]["points"] == 4.5
    assert [r["id"] for r in results] == [3, 4]
    assert [r["position"] for r in results] == [1, 2]


def test_score_endpoint_empty_form(client: TestClient):
    response = client.post("/v1/score", json={"has_degree": True, "entries": []})

    assert response.status_code == 200
    data = response.json()
    assert data["results"] == []
    assert data["totals"]["total_points"] == 10.0


def test_score_endpoint_duplicate_ids(client: TestClient):
    """Test duplicate entry ids fail validation"""
    response = client.post(
        "/v1/score",
        json={"entries": [{"id": 1}, {"id": 1}]},
    )
    assert response.status_code == 422


def test_score_endpoint_uses_configured_rules():
    """Test the scoring config dependency drives the calculation"""
    app = create_app()
    app.dependency_overrides[get_scoring_config] = lambda: ScoringConfig(
        period_length_days=30, points_per_period=1.0, degree_bonus=2.0
    )
    client = TestClient(app)

    response = client.post(
        "/v1/score",
        json={"has_degree": True, "entries": [{"start_date": "01/01/2024", "end_date": "01/07/2024"}]},
    )

    data = response.json()
    assert data["results"][0]["periods"] == 6
    assert data["totals"]["total_points"] == 8.0


def test_parse_date_endpoint(client: TestClient):
    """Test POST /v1/dates/parse for each outcome"""
    valid = client.post("/v1/dates/parse", json={"text": "29022024"}).json()
    assert valid == {
        "masked": "29/02/2024",
        "status": "valid",
        "parsed_date": "2024-02-29",
        "error_message": None,
    }

    absent = client.post("/v1/dates/parse", json={"text": ""}).json()
    assert absent["status"] == "absent"
    assert absent["parsed_date"] is None

    invalid = client.post("/v1/dates/parse", json={"text": "29/02/2023"}).json()
    assert invalid["status"] == "invalid_format"
    assert invalid["error_message"] == "Invalid date. Use DD/MM/YYYY format."
