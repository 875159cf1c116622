"""Human-readable rendering of scores for the presentation layer"""

from typing import List

from experience_score.domain.entries import EntryList
from experience_score.domain.models import EntryResult, ScoreReport, ScoringConfig


def format_points(value: float, decimal_separator: str = ",") -> str:
    """One decimal place with a locale separator: 23.5 -> "23,5" """
    return f"{value:.1f}".replace(".", decimal_separator)


def describe_result(
    position: int,
    result: EntryResult,
    config: ScoringConfig,
    decimal_separator: str = ",",
) -> str:
    return (
        f"Experience {position}: {result.days} day(s) "
        f"({result.periods} period(s) of {config.period_length_days} days, "
        f"{result.remainder} day(s) remaining) -> "
        f"{format_points(result.points, decimal_separator)} points"
    )


def describe_error(position: int, result: EntryResult) -> str:
    return f"Experience {position}: {result.error_message}"


def breakdown_lines(entries: EntryList, report: ScoreReport, decimal_separator: str = ",") -> List[str]:
    """One line per contributing entry, numbered by its position in the form"""
    return [
        describe_result(entries.position_of(r.id), r, report.config, decimal_separator)
        for r in report.valid_results
    ]


def error_lines(entries: EntryList, report: ScoreReport) -> List[str]:
    """One line per entry with an error, numbered by its position in the form"""
    return [describe_error(entries.position_of(r.id), r) for r in report.invalid_results]
