"""
Read-only views derived from the filtered press releases: summary counts,
the trend series, and the table with clickable links.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

import pandas as pd

from pib_dashboard.config import TABLE_COLUMNS
from pib_dashboard.data.aggregation import aggregate_counts
from pib_dashboard.data.filters import FilterState


@dataclass(frozen=True)
class SummaryCounts:
    total: int
    years_covered: int
    ministries_covered: int


def summary_counts(df: pd.DataFrame) -> SummaryCounts:
    if df.empty:
        return SummaryCounts(total=0, years_covered=0, ministries_covered=0)
    return SummaryCounts(
        total=int(len(df)),
        years_covered=int(df["year"].nunique()),
        ministries_covered=int(df["ministry"].nunique()),
    )


def series_projection(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """Bucket counts for the selected aggregation plus a 1-based ordinal position."""
    counts = aggregate_counts(df, state.aggregation)
    counts.insert(0, "position", range(1, len(counts) + 1))
    return counts


def make_link(url: str) -> str:
    escaped = html.escape(str(url), quote=True)
    return f'<a href="{escaped}" target="_blank">{escaped}</a>'


def table_projection(df: pd.DataFrame) -> pd.DataFrame:
    columns = [col for col in TABLE_COLUMNS if col in df.columns]
    table = df[columns].copy()
    if "date" in table:
        table["date"] = table["date"].dt.strftime("%Y-%m-%d")
    if "month" in table:
        table["month"] = table["month"].dt.strftime("%Y-%m")
    if "url" in table:
        table["url"] = table["url"].map(make_link)
    return table.reset_index(drop=True)
