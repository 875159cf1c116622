"""Copy-on-write entry collection and form state"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional, Tuple

from experience_score.domain.models import Entry, EntryField, ScoreReport, ScoringConfig
from experience_score.domain.scoring import calculate_score
from experience_score.utils.date_utils import apply_date_mask


@dataclass(frozen=True)
class EntryList:
    """
    Ordered experience entries.

    Every mutation returns a new EntryList so callers can detect changes
    by identity. Ids are max(existing) + 1, so removing the highest id and
    adding again hands that id out once more.
    """

    entries: Tuple[Entry, ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[Tuple[Optional[int], str, str]]) -> "EntryList":
        """
        Build a list from (id, start_text, end_text) rows.

        Rows without an id get max(all given ids) + 1, counting up in row order.
        Duplicate ids are rejected.
        """
        rows = list(rows)
        given = [row_id for row_id, _, _ in rows if row_id is not None]
        if len(given) != len(set(given)):
            raise ValueError("entry ids must be unique")

        next_id = max(given, default=0) + 1
        entries = []
        for row_id, start_text, end_text in rows:
            if row_id is None:
                row_id = next_id
                next_id += 1
            entries.append(
                Entry(id=row_id, start_text=apply_date_mask(start_text), end_text=apply_date_mask(end_text))
            )
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def ids(self) -> list[int]:
        return [e.id for e in self.entries]

    def next_id(self) -> int:
        return max(self.ids) + 1 if self.entries else 1

    def get(self, entry_id: int) -> Optional[Entry]:
        return next((e for e in self.entries if e.id == entry_id), None)

    def position_of(self, entry_id: int) -> Optional[int]:
        """1-based display position of an entry"""
        for index, entry in enumerate(self.entries, start=1):
            if entry.id == entry_id:
                return index
        return None

    def add(self, start_text: str = "", end_text: str = "") -> "EntryList":
        entry = Entry(
            id=self.next_id(),
            start_text=apply_date_mask(start_text),
            end_text=apply_date_mask(end_text),
        )
        return EntryList(self.entries + (entry,))

    def remove(self, entry_id: int) -> "EntryList":
        return EntryList(tuple(e for e in self.entries if e.id != entry_id))

    def update(self, entry_id: int, entry_field: EntryField, text: str) -> "EntryList":
        """Replace one date field with the masked text; unknown ids leave entries as they are"""
        masked = apply_date_mask(text)
        return EntryList(
            tuple(
                replace(e, **{entry_field.value: masked}) if e.id == entry_id else e
                for e in self.entries
            )
        )


@dataclass(frozen=True)
class ExperienceForm:
    """Whole form state: the entries plus the degree checkbox"""

    entries: EntryList = field(default_factory=EntryList)
    has_degree: bool = False

    def add_entry(self, start_text: str = "", end_text: str = "") -> "ExperienceForm":
        return replace(self, entries=self.entries.add(start_text, end_text))

    def remove_entry(self, entry_id: int) -> "ExperienceForm":
        return replace(self, entries=self.entries.remove(entry_id))

    def update_entry(self, entry_id: int, entry_field: EntryField, text: str) -> "ExperienceForm":
        return replace(self, entries=self.entries.update(entry_id, entry_field, text))

    def set_degree(self, has_degree: bool) -> "ExperienceForm":
        return replace(self, has_degree=has_degree)

    def evaluate(self, config: ScoringConfig | None = None) -> ScoreReport:
        """Recompute every result and the totals from the current state"""
        return calculate_score(self.entries, self.has_degree, config)
