from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .exceptions import InvalidArgumentError
from .filter_engine import apply_filters
from .filter_state import FilterSpec, empty_filter_spec
from .pagination import DEFAULT_PAGE_SIZE, PaginationState, paginate
from .record import CATEGORICAL_FIELDS, SignalRecord
from .sort_engine import SortSpec, no_sort, sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOptions:
    """
    Distinct values of every filterable categorical field, drawn from the
    full record set (never from the filtered subset).
    """
    modes: Tuple[str, ...]
    bands: Tuple[str, ...]
    countries: Tuple[str, ...]
    call_signs: Tuple[str, ...]


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything the presentation layer needs to render one state."""
    visible_page: Tuple[SignalRecord, ...]
    filtered_count: int
    total_count: int
    page_index: int
    page_size: int
    page_count: int
    filter_spec: FilterSpec
    sort_spec: SortSpec


class SignalBrowserController:
    """
    Owns the full record set plus the current filter / sort / page state and
    keeps the derived visible page up to date.

    Pipeline: records -> filter -> sort -> paginate. Each setter re-runs only
    the stages downstream of what it changed:

    - load_records: filter, sort, paginate (page reset to 0)
    - set_filter:   filter, sort, paginate (page reset to 0)
    - set_sort:     sort, paginate (cached filter result, page kept)
    - set_page:     paginate

    One instance per session; not thread-safe.
    """

    def __init__(
        self,
        records: Iterable[SignalRecord] = (),
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._records: Tuple[SignalRecord, ...] = ()
        self._filter_spec: FilterSpec = empty_filter_spec()
        self._sort_spec: SortSpec = no_sort()
        self._pagination = PaginationState(page_index=0, page_size=page_size)

        # Derived stages
        self._filtered: Tuple[SignalRecord, ...] = ()
        self._ordered: Tuple[SignalRecord, ...] = ()
        self._visible: Tuple[SignalRecord, ...] = ()

        # Per-record-set caches
        self._distinct_cache: Dict[str, Tuple[str, ...]] = {}
        self._by_id: Optional[Dict[int, SignalRecord]] = None

        self.load_records(records)

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------
    def load_records(self, records: Iterable[SignalRecord]) -> None:
        self._records = tuple(records)
        self._distinct_cache.clear()
        self._by_id = None
        self._pagination = self._pagination.first_page()

        self._run_filter()
        self._run_sort()
        self._run_paginate()

        logger.info(
            "records_loaded",
            extra={"n_records": len(self._records), "n_filtered": len(self._filtered)},
        )

    def set_filter(self, spec: Optional[FilterSpec]) -> None:
        self._filter_spec = spec if spec is not None else empty_filter_spec()
        self._pagination = self._pagination.first_page()

        self._run_filter()
        self._run_sort()
        self._run_paginate()

        logger.info(
            "filter_changed",
            extra={"n_filtered": len(self._filtered), "filter": self._filter_spec.to_dict()},
        )

    def clear_filters(self) -> None:
        self.set_filter(empty_filter_spec())

    def set_sort(self, spec: Optional[SortSpec]) -> None:
        self._sort_spec = spec if spec is not None else no_sort()

        self._run_sort()
        self._run_paginate()

        logger.debug(
            "sort_changed",
            extra={"column": self._sort_spec.column, "direction": self._sort_spec.direction},
        )

    def set_page(self, page_index: int, page_size: Optional[int] = None) -> None:
        """
        Move the page cursor. Out-of-range pages are allowed and yield an empty slice.

        :raises InvalidArgumentError: if page_size <= 0 or page_index < 0
        """
        size = self._pagination.page_size if page_size is None else page_size
        self._pagination = PaginationState(page_index=page_index, page_size=size)
        self._run_paginate()

    def compute_distinct_values(self, field: str) -> Tuple[str, ...]:
        """
        Sorted distinct values of a categorical field across the full record set.

        Cached until the record set changes; filter changes never touch it.
        """
        if field not in CATEGORICAL_FIELDS:
            raise InvalidArgumentError(
                f"'{field}' is not a categorical field; expected one of {CATEGORICAL_FIELDS}"
            )

        cached = self._distinct_cache.get(field)
        if cached is not None:
            return cached

        values = tuple(sorted({getattr(rec, field) for rec in self._records}))
        self._distinct_cache[field] = values
        return values

    def available_filter_options(self) -> FilterOptions:
        return FilterOptions(
            modes=self.compute_distinct_values("mode"),
            bands=self.compute_distinct_values("band"),
            countries=self.compute_distinct_values("country"),
            call_signs=self.compute_distinct_values("call_sign"),
        )

    def get_record(self, record_id: int) -> Optional[SignalRecord]:
        if self._by_id is None:
            self._by_id = {rec.id: rec for rec in self._records}
        return self._by_id.get(record_id)

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            visible_page=self._visible,
            filtered_count=self.filtered_count,
            total_count=self.total_count,
            page_index=self._pagination.page_index,
            page_size=self._pagination.page_size,
            page_count=self.page_count,
            filter_spec=self._filter_spec,
            sort_spec=self._sort_spec,
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------
    @property
    def records(self) -> Tuple[SignalRecord, ...]:
        return self._records

    @property
    def filter_spec(self) -> FilterSpec:
        return self._filter_spec

    @property
    def sort_spec(self) -> SortSpec:
        return self._sort_spec

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def ordered(self) -> Tuple[SignalRecord, ...]:
        """Filtered and sorted records across all pages (used for export)."""
        return self._ordered

    @property
    def visible_page(self) -> Tuple[SignalRecord, ...]:
        return self._visible

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def total_count(self) -> int:
        return len(self._records)

    @property
    def page_count(self) -> int:
        return self._pagination.page_count(len(self._ordered))

    # -------------------------------------------------------------------------
    # Pipeline stages
    # -------------------------------------------------------------------------
    def _run_filter(self) -> None:
        self._filtered = tuple(apply_filters(self._records, self._filter_spec))

    def _run_sort(self) -> None:
        self._ordered = tuple(sort_records(self._filtered, self._sort_spec))

    def _run_paginate(self) -> None:
        self._visible = tuple(
            paginate(self._ordered, self._pagination.page_index, self._pagination.page_size)
        )
