"""
blog_api.db.paging

Page requests and paged results for sorted collection scans.

Responsibilities:
- Parse and validate page/sort parameters.
- Carry one page of results plus the metadata clients need to walk pages.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from blog_api.errors import InvalidPageRequest

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(enum.StrEnum):
    asc = "ASC"
    desc = "DESC"

    @classmethod
    def parse(cls, value: str) -> SortDirection:
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidPageRequest(f"Sort direction must be ASC or DESC, got '{value}'") from None


@dataclass(frozen=True, slots=True)
class PageRequest:
    page_number: int
    page_size: int
    sort_by: str = "id"
    direction: SortDirection = SortDirection.asc

    def __post_init__(self) -> None:
        if self.page_number < 0:
            raise InvalidPageRequest("Page number must not be negative")
        if self.page_size <= 0:
            raise InvalidPageRequest("Page size must be greater than zero")

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


@dataclass(frozen=True, slots=True)
class PagedResult(Generic[T]):
    content: list[T]
    page_number: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size)

    @property
    def is_last_page(self) -> bool:
        return self.page_number + 1 >= self.total_pages

    def map(self, fn: Callable[[T], U]) -> PagedResult[U]:
        return PagedResult(
            content=[fn(item) for item in self.content],
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )
