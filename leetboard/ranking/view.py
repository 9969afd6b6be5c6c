"""
Leaderboard Sort/Paginate View

Pure functions from (ranked students, sort, page) to the page that is
displayed, plus the UI state transitions for header clicks, page navigation
and uploads.

The view state is an immutable ViewState; every transition returns a new one
so the dashboard can swap it into session state in a single assignment.
"""

import math
from functools import lru_cache
from typing import NamedTuple

import pandas as pd
from pyuca import Collator

from leetboard.config import (
    ASCENDING,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
    DESCENDING,
    NUMERIC_COLUMNS,
    PAGE_SIZE,
    STUDENT_COLUMNS,
)


class SortSpec(NamedTuple):
    key: str = DEFAULT_SORT_KEY
    direction: str = DEFAULT_SORT_DIRECTION


DEFAULT_SORT = SortSpec()


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the Unicode collation table (DUCET) once per process
    return Collator()


def _collation_key(value) -> tuple:
    return _collator().sort_key(str(value))


def apply_sort(df: pd.DataFrame, spec: SortSpec) -> pd.DataFrame:
    """
    Sort students by one column.

    Numeric columns compare numerically, text columns by Unicode collation, so
    accented names sort next to their base letters instead of after "z".
    The sort is stable, so rows with equal keys keep their rank order.

    Raises:
        ValueError: If the sort key or direction is unknown
    """
    if spec.key not in STUDENT_COLUMNS:
        raise ValueError(f"Unknown sort key: '{spec.key}'. Allowed values: {', '.join(STUDENT_COLUMNS)}")
    if spec.direction not in (ASCENDING, DESCENDING):
        raise ValueError(f"Unknown sort direction: '{spec.direction}'")

    key = None if spec.key in NUMERIC_COLUMNS else (lambda col: col.map(_collation_key))
    return df.sort_values(
        spec.key,
        ascending=spec.direction == ASCENDING,
        kind='stable',
        key=key,
    ).reset_index(drop=True)


def next_sort_spec(current: SortSpec, key: str) -> SortSpec:
    """Header click: ascending on a new column, otherwise toggle between ascending and descending."""
    if current.key == key and current.direction == ASCENDING:
        return SortSpec(key, DESCENDING)
    return SortSpec(key, ASCENDING)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def paginate(df: pd.DataFrame, page: int, page_size: int = PAGE_SIZE) -> pd.DataFrame:
    """
    Return rows [(page - 1) * page_size, page * page_size).

    Pages past the end yield an empty frame; callers keep page within bounds.

    Raises:
        ValueError: If page or page_size is not positive
    """
    if page < 1:
        raise ValueError(f"Page must be a positive integer, got {page}")
    if page_size < 1:
        raise ValueError(f"Page size must be a positive integer, got {page_size}")
    return df.iloc[(page - 1) * page_size:page * page_size]


# --- UI State ---
class ViewState(NamedTuple):
    """Everything the leaderboard page renders from."""
    students: pd.DataFrame
    sort: SortSpec = DEFAULT_SORT
    page: int = 1

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.students))


def empty_students() -> pd.DataFrame:
    return pd.DataFrame(
        {col: pd.Series(dtype='int64' if col in NUMERIC_COLUMNS else 'object') for col in STUDENT_COLUMNS}
    )


def initial_state() -> ViewState:
    return ViewState(students=empty_students())


def on_upload(state: ViewState, ranked: pd.DataFrame) -> ViewState:
    """A finished upload replaces the whole dataset and resets sort and page."""
    return ViewState(students=ranked, sort=DEFAULT_SORT, page=1)


def on_sort_click(state: ViewState, key: str) -> ViewState:
    return state._replace(sort=next_sort_spec(state.sort, key), page=1)


def on_page_next(state: ViewState) -> ViewState:
    return state._replace(page=max(1, min(state.page + 1, state.total_pages)))


def on_page_prev(state: ViewState) -> ViewState:
    return state._replace(page=max(state.page - 1, 1))


def page_view(state: ViewState) -> dict:
    """
    Build the displayed page for a view state.

    Returns:
        Dictionary with:
            - rows: DataFrame slice for the current page
            - offset: number of rows before this page (for serial numbers)
            - current_page, total_pages
            - total_count, shown_count
            - sort: active SortSpec (for header indicators)
    """
    ordered = apply_sort(state.students, state.sort)
    rows = paginate(ordered, state.page)
    return {
        'rows': rows,
        'offset': (state.page - 1) * PAGE_SIZE,
        'current_page': state.page,
        'total_pages': state.total_pages,
        'total_count': len(ordered),
        'shown_count': len(rows),
        'sort': state.sort,
    }
