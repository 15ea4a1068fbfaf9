from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .exceptions import InvalidArgumentError
from .record import RECORD_FIELDS, SignalRecord

SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)


@dataclass(frozen=True)
class SortSpec:
    """
    Single active sort column plus direction.

    column=None means "no active sort": records keep their input order.
    """
    column: Optional[str] = None
    direction: str = SORT_ASC

    def __post_init__(self) -> None:
        if self.column is not None and self.column not in RECORD_FIELDS:
            raise InvalidArgumentError(f"Unknown sort column '{self.column}'")
        if self.direction not in SORT_DIRECTIONS:
            raise InvalidArgumentError(
                f"Sort direction must be one of {SORT_DIRECTIONS}, got '{self.direction}'"
            )

    @property
    def is_active(self) -> bool:
        return self.column is not None

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESC


def no_sort() -> SortSpec:
    return SortSpec()


def sort_records(records: Sequence[SignalRecord], spec: Optional[SortSpec]) -> List[SignalRecord]:
    """
    Stable sort of `records` on the natural ordering of `spec.column`.

    Strings compare case-sensitively, numbers numerically, timestamps
    chronologically. Ties keep their relative input order in both directions.
    Missing values (None) go last when ascending.
    """
    if spec is None or not spec.is_active:
        return list(records)

    column = spec.column

    def key(rec: SignalRecord) -> Tuple[bool, Any]:
        value = getattr(rec, column)
        # (is_missing, value) keeps None out of comparisons with real values
        return (value is None, value if value is not None else 0)

    # sorted() stays stable with reverse=True
    return sorted(records, key=key, reverse=spec.descending)
