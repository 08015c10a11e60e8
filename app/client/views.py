"""Pure derivation of the visible page from a fetched list.

A view never patches its rows locally: the list in ``ViewState.items`` is
always the last successful fetch, and everything the user sees is recomputed
from it by :func:`derive_view`.
"""

from math import ceil
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ViewState(BaseModel):
    """Immutable snapshot of a list view."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[Dict[str, Any], ...] = ()
    search_term: str = ""
    sort_key: Optional[str] = None
    descending: bool = False
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, gt=0)


class PageView(BaseModel):
    """Rows visible on the current page."""

    model_config = ConfigDict(frozen=True)

    rows: Tuple[Dict[str, Any], ...]
    total: int
    page: int
    page_count: int


def lookup(item: Dict[str, Any], key: str) -> Any:
    """Resolve a dotted key such as ``student.firstName``."""
    value: Any = item
    for part in key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def _matches(item: Dict[str, Any], term: str, search_fields: Sequence[str]) -> bool:
    for field in search_fields:
        value = lookup(item, field)
        if value is not None and term in str(value).lower():
            return True
    return False


def _sort_value(value: Any) -> Tuple[int, Any]:
    # Rank by kind first so mixed columns never compare across types
    if isinstance(value, (bool, int, float)):
        return (0, value)
    if isinstance(value, str):
        return (1, value.casefold())
    return (2, str(value).casefold())


def derive_view(state: ViewState, search_fields: Sequence[str]) -> PageView:
    """Filter, sort and paginate ``state.items``."""
    term = state.search_term.strip().lower()
    rows = [item for item in state.items if not term or _matches(item, term, search_fields)]

    if state.sort_key:
        present = [row for row in rows if lookup(row, state.sort_key) is not None]
        missing = [row for row in rows if lookup(row, state.sort_key) is None]
        present.sort(
            key=lambda row: _sort_value(lookup(row, state.sort_key)),
            reverse=state.descending,
        )
        rows = present + missing

    total = len(rows)
    page_count = max(1, ceil(total / state.page_size))
    page = min(state.page, page_count)
    start = (page - 1) * state.page_size
    return PageView(
        rows=tuple(rows[start:start + state.page_size]),
        total=total,
        page=page,
        page_count=page_count,
    )
