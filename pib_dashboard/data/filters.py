"""
Filter state and the filter pipeline applied to the press release dataset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

from pib_dashboard.config import DEFAULT_AGGREGATION


@dataclass
class FilterState:
    selected_years: List[int] = field(default_factory=list)
    # Empty means no ministry restriction, not "exclude everything".
    selected_ministries: List[str] = field(default_factory=list)
    keyword: str = ""
    aggregation: str = DEFAULT_AGGREGATION


def available_years(df: pd.DataFrame) -> List[int]:
    if df.empty or "year" not in df:
        return []
    return sorted(int(y) for y in df["year"].dropna().unique())


def available_ministries(df: pd.DataFrame) -> List[str]:
    if df.empty or "ministry" not in df:
        return []
    # includes "" for rows without a ministry
    return sorted(str(m) for m in df["ministry"].dropna().unique())


def default_filter_state(df: pd.DataFrame) -> FilterState:
    """Most recent year, every ministry, no keyword."""
    years = available_years(df)
    return FilterState(
        selected_years=[years[-1]] if years else [],
        selected_ministries=available_ministries(df),
        keyword="",
        aggregation=DEFAULT_AGGREGATION,
    )


def filters_ready(state: FilterState) -> bool:
    return bool(state.selected_years)


def apply_filters(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """
    Apply the year, ministry and keyword predicates in sequence.

    The year predicate always applies and needs a non-empty selection; callers
    check `filters_ready` first. The ministry predicate is skipped when no
    ministry is selected, and the keyword predicate when the trimmed keyword is
    blank. Row order of the input is preserved.
    """
    if not filters_ready(state):
        raise ValueError("At least one year must be selected before filtering")

    filtered = df[df["year"].isin(state.selected_years)]

    if state.selected_ministries:
        filtered = filtered[filtered["ministry"].isin(state.selected_ministries)]

    keyword = state.keyword.strip()
    if keyword:
        titles = filtered["title"].astype(str).str.lower()
        filtered = filtered[titles.str.contains(keyword.lower(), regex=False, na=False)]

    filtered = filtered.copy()
    # assign a fresh dict; older pandas shares attrs with the source frame
    filtered.attrs = {**df.attrs, "applied_filters": serialize_filters(state)}
    return filtered


def serialize_filters(state: FilterState) -> Dict[str, Any]:
    """
    Convert the FilterState dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "selected_years": [int(y) for y in state.selected_years],
        "selected_ministries": list(state.selected_ministries),
        "keyword": state.keyword,
        "aggregation": state.aggregation,
    }
