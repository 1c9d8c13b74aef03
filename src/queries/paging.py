# src/queries/paging.py
from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from .errors import InvalidArgumentError


logger = logging.getLogger(__name__)

TElement = TypeVar("TElement")
TOrderingKey = TypeVar("TOrderingKey")

DEFAULT_PAGE_SIZE = 100


def _require_positive_int(value: Any, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer >= 1. Got {value!r}.")
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1. Got {value}.")
    return value


def paging(
    elements: Iterable[TElement],
    ordering: Callable[[TElement], TOrderingKey],
    filter: Optional[Callable[[TElement], bool]] = None,
    count_on_page: int = DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> Iterator[TElement]:
    """
    Filter → stable sort by `ordering` (ascending) → return page `page_number`.

    Pages are 1-based and hold up to `count_on_page` elements; a page past the
    end is empty. Arguments are checked here, at call time; the filtering and
    sorting run on first iteration.

    Raises:
        InvalidArgumentError: count_on_page or page_number is not an integer >= 1.
    """
    _require_positive_int(count_on_page, name="count_on_page")
    _require_positive_int(page_number, name="page_number")

    skip = (page_number - 1) * count_on_page
    logger.debug("paging: page=%d size=%d → window [%d, %d)", page_number, count_on_page, skip, skip + count_on_page)
    return _page_iter(elements, ordering, filter, skip, count_on_page)


def _page_iter(
    elements: Iterable[TElement],
    ordering: Callable[[TElement], TOrderingKey],
    filter: Optional[Callable[[TElement], bool]],
    skip: int,
    take: int,
) -> Iterator[TElement]:
    kept = elements if filter is None else (e for e in elements if filter(e))
    ordered = sorted(kept, key=ordering)  # sorted() is stable
    yield from islice(ordered, skip, skip + take)


def page_count(total: int, count_on_page: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed for `total` elements (0 when there are none)."""
    _require_positive_int(count_on_page, name="count_on_page")
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise InvalidArgumentError(f"total must be an integer >= 0. Got {total!r}.")
    return -(-total // count_on_page)
