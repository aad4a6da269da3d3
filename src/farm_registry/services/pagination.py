"""Page slicing and page-button windows for list views."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_WINDOW = 5


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    page: int
    total_pages: int
    items: tuple[T, ...]
    total_items: int
    start_index: int
    end_index: int


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Page numbers to render as buttons plus group-jump targets."""

    pages: tuple[int, ...]
    prev_group_page: int
    next_group_page: int


def total_pages_for(total_items: int, page_size: int) -> int:
    return max(1, math.ceil(total_items / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    return max(1, min(requested_page, total_pages))


def paginate(items: Sequence[T], page_size: int, requested_page: int) -> Page[T]:
    """Slice ``items`` into the page at ``requested_page``, clamped into range.

    A stale or out-of-range page number (for example after deletions shrank the
    list) silently lands on the nearest valid page.
    """

    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    total_items = len(items)
    total_pages = total_pages_for(total_items, page_size)
    page = clamp_page(requested_page, total_pages)
    start_index = (page - 1) * page_size
    end_index = min(start_index + page_size, total_items)

    return Page(
        page=page,
        total_pages=total_pages,
        items=tuple(items[start_index:end_index]),
        total_items=total_items,
        start_index=start_index,
        end_index=end_index,
    )


def page_window(page: int, total_pages: int, window: int = DEFAULT_WINDOW) -> PageWindow:
    total_pages = max(1, total_pages)
    window = max(1, window)
    page = clamp_page(page, total_pages)
    group_start = ((page - 1) // window) * window + 1
    group_end = min(group_start + window - 1, total_pages)

    return PageWindow(
        pages=tuple(range(group_start, group_end + 1)),
        prev_group_page=clamp_page(page - window, total_pages),
        next_group_page=clamp_page(page + window, total_pages),
    )
