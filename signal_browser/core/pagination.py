from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


def _check(page_index: int, page_size: int) -> None:
    if page_size <= 0:
        raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
    if page_index < 0:
        raise InvalidArgumentError(f"page_index must be >= 0, got {page_index}")


@dataclass(frozen=True)
class PaginationState:
    """
    0-based page cursor.

    page_index * page_size may run past the end of the data; that page is
    simply empty.
    """
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        _check(self.page_index, self.page_size)

    def first_page(self) -> PaginationState:
        return PaginationState(page_index=0, page_size=self.page_size)

    def page_count(self, total: int) -> int:
        return page_count(total, self.page_size)


def paginate(records: Sequence[T], page_index: int, page_size: int) -> List[T]:
    """
    Half-open slice [page_index*page_size, min((page_index+1)*page_size, len)).

    :raises InvalidArgumentError: if page_size <= 0 or page_index < 0
    """
    _check(page_index, page_size)
    start = page_index * page_size
    if start >= len(records):
        return []
    return list(records[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
    return math.ceil(total / page_size) if total > 0 else 0
