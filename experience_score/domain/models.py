"""Domain models - pure Python dataclasses for entries, results and totals"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    """Reasons an entry with both dates filled in cannot be scored"""

    INVALID_FORMAT = "invalid_format"
    END_BEFORE_START = "end_before_start"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ErrorKind.INVALID_FORMAT: "Invalid date. Use DD/MM/YYYY format.",
    ErrorKind.END_BEFORE_START: "End date must be after start date.",
}


class EntryField(str, Enum):
    """Editable text fields of an entry"""

    START = "start_text"
    END = "end_text"


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring constants: period length, points per period and degree bonus"""

    period_length_days: int = 180
    points_per_period: float = 4.5
    degree_bonus: float = 10.0


@dataclass(frozen=True)
class Entry:
    """One experience: a start/end date pair as typed by the user"""

    id: int
    start_text: str = ""
    end_text: str = ""


@dataclass
class EntryResult:
    """Score of a single entry"""

    id: int
    days: int = 0
    periods: int = 0
    remainder: int = 0
    points: float = 0.0
    is_valid: bool = True
    error_kind: Optional[ErrorKind] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error_kind.message if self.error_kind else None

    @property
    def counts(self) -> bool:
        """Whether this result contributes to the totals"""
        return self.is_valid and self.days > 0


@dataclass
class Totals:
    """Aggregate over all contributing entry results"""

    total_periods: int
    total_points_from_periods: float
    bonus_points: float
    total_points: float


@dataclass
class ScoreReport:
    """Output of a full calculation"""

    results: List[EntryResult]
    totals: Totals
    has_degree: bool = False
    config: ScoringConfig = field(default_factory=ScoringConfig)

    @property
    def valid_results(self) -> List[EntryResult]:
        return [r for r in self.results if r.counts]

    @property
    def invalid_results(self) -> List[EntryResult]:
        return [r for r in self.results if not r.is_valid]
