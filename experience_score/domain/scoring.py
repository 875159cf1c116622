"""Experience scoring engine - core business logic for point calculation"""

from typing import Iterable, List, Sequence

from experience_score.domain.dates import is_blank, parse_date
from experience_score.domain.exceptions import InvalidDateFormatError
from experience_score.domain.models import (
    Entry,
    EntryResult,
    ErrorKind,
    ScoreReport,
    ScoringConfig,
    Totals,
)
from experience_score.utils.date_utils import days_between


def score_entry(entry: Entry, config: ScoringConfig) -> EntryResult:
    """
    Score one experience entry.

    Rules:
    - Either date blank: incomplete, zero result without error
    - Either date unparsable: INVALID_FORMAT
    - End on or before start: END_BEFORE_START
    - Otherwise days are split into whole periods plus a remainder,
      and each whole period earns points_per_period

    Never raises for user input; problems are reported on the result.
    """
    # Errors only apply once both fields are filled in
    if is_blank(entry.start_text) or is_blank(entry.end_text):
        return EntryResult(id=entry.id)

    try:
        start = parse_date(entry.start_text)
        end = parse_date(entry.end_text)
    except InvalidDateFormatError:
        return EntryResult(id=entry.id, is_valid=False, error_kind=ErrorKind.INVALID_FORMAT)

    if end <= start:
        return EntryResult(id=entry.id, is_valid=False, error_kind=ErrorKind.END_BEFORE_START)

    days = days_between(start, end)
    periods, remainder = divmod(days, config.period_length_days)

    return EntryResult(
        id=entry.id,
        days=days,
        periods=periods,
        remainder=remainder,
        points=periods * config.points_per_period,
    )


def score_entries(entries: Iterable[Entry], config: ScoringConfig) -> List[EntryResult]:
    """Score entries in order"""
    return [score_entry(entry, config) for entry in entries]


def aggregate(results: Sequence[EntryResult], has_degree: bool, config: ScoringConfig) -> Totals:
    """
    Sum periods and points over contributing results and add the degree bonus.

    Invalid results and results with zero days are left out.
    """
    counted = [r for r in results if r.counts]

    total_periods = sum(r.periods for r in counted)
    total_points_from_periods = sum(r.points for r in counted)
    bonus_points = config.degree_bonus if has_degree else 0

    return Totals(
        total_periods=total_periods,
        total_points_from_periods=total_points_from_periods,
        bonus_points=bonus_points,
        total_points=total_points_from_periods + bonus_points,
    )


def calculate_score(
    entries: Iterable[Entry],
    has_degree: bool,
    config: ScoringConfig | None = None,
) -> ScoreReport:
    """
    Main entry point: score every entry and aggregate the totals.

    Returns complete ScoreReport with per-entry results and totals.
    """
    config = config or ScoringConfig()
    results = score_entries(entries, config)
    totals = aggregate(results, has_degree, config)

    return ScoreReport(results=results, totals=totals, has_degree=has_degree, config=config)
