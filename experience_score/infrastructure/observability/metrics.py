"""Prometheus metrics for score calculations and request latency"""

from prometheus_client import Counter, Histogram

from experience_score.domain.models import ScoreReport

calculation_counter = Counter(
    "experience_score_calculations_total",
    "Total score calculations performed",
)

entry_result_counter = Counter(
    "experience_score_entry_results_total",
    "Scored entries by outcome",
    ["status"],  # valid | incomplete | invalid_format | end_before_start
)

total_points_histogram = Histogram(
    "experience_score_total_points",
    "Total points per calculation, degree bonus included",
    buckets=[0, 4.5, 9, 18, 36, 54, 72, 90, 120],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def entry_status(result) -> str:
    if result.error_kind is not None:
        return result.error_kind.value
    return "valid" if result.days > 0 else "incomplete"


def record_calculation(report: ScoreReport) -> None:
    """Record outcome distribution and point totals of one calculation"""
    calculation_counter.inc()
    for result in report.results:
        entry_result_counter.labels(status=entry_status(result)).inc()
    total_points_histogram.observe(report.totals.total_points)
