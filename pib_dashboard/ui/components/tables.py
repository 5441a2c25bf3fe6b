"""
Reusable helpers for rendering the press release table with per-column
search, sorting, and pagination.
"""

from __future__ import annotations

import html
import math
from typing import Dict, Iterable, Optional

import pandas as pd
import streamlit as st

from pib_dashboard.config import TABLE_PAGE_SIZE

TABLE_STYLE = """
<style>
table.pib-table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
table.pib-table th { text-align: left; border-bottom: 2px solid #ddd; padding: 6px; }
table.pib-table td { border-bottom: 1px solid #eee; padding: 6px; vertical-align: top; }
</style>
"""


def search_columns(
    df: pd.DataFrame,
    queries: Dict[str, str],
    search_text: Optional[Dict[str, pd.Series]] = None,
) -> pd.DataFrame:
    """Keep rows whose column text contains every non-blank query (case-insensitive).

    `search_text` maps a column to the plain text searched in place of its
    displayed cells (e.g. raw URLs behind link markup), indexed like `df`.
    """
    search_text = search_text or {}
    filtered = df
    for column, query in queries.items():
        query = (query or "").strip().lower()
        if not query or column not in filtered.columns:
            continue
        source = search_text[column].loc[filtered.index] if column in search_text else filtered[column]
        text = source.astype(str).str.lower()
        filtered = filtered[text.str.contains(query, regex=False, na=False)]
    return filtered


def sort_table(df: pd.DataFrame, column: Optional[str], ascending: bool = True) -> pd.DataFrame:
    if not column or column not in df.columns:
        return df
    # stable sort keeps the original row order among equal keys
    return df.sort_values(column, ascending=ascending, kind="mergesort")


def escape_cells(df: pd.DataFrame, html_columns: Iterable[str] = ("url",)) -> pd.DataFrame:
    """HTML-escape every cell except the columns that already hold markup."""
    escaped = df.copy()
    for column in escaped.columns:
        if column in html_columns:
            continue
        escaped[column] = escaped[column].map(lambda v: html.escape(str(v)))
    return escaped


def page_count(total_rows: int, page_size: int = TABLE_PAGE_SIZE) -> int:
    return max(1, math.ceil(total_rows / max(page_size, 1)))


def paginate(df: pd.DataFrame, page: int, page_size: int = TABLE_PAGE_SIZE) -> pd.DataFrame:
    """Return the 1-based `page` of `df`; out-of-range pages are clamped."""
    page_size = max(page_size, 1)
    page = min(max(page, 1), page_count(len(df), page_size))
    start = (page - 1) * page_size
    return df.iloc[start: start + page_size]


def render_table(
    table: pd.DataFrame,
    export_df: pd.DataFrame,
    search_text: Optional[Dict[str, pd.Series]] = None,
    key: str = "pib_table",
    page_size: int = TABLE_PAGE_SIZE,
    export_file_name: str = "pib_press_releases_filtered.csv",
) -> None:
    """
    Render an HTML table (so link cells stay clickable) with a search box on top
    of every column, a sort control and page navigation.
    """
    if table.empty:
        st.info("No press releases match the current filters.")
        return

    columns = list(table.columns)
    search_cols = st.columns(len(columns))
    queries = {}
    for col, column in zip(search_cols, columns):
        with col:
            queries[column] = st.text_input(
                column.title(),
                key=f"{key}_search_{column}",
                placeholder="All",
            )

    sort_col, order_col, page_col = st.columns([2, 1, 1])
    with sort_col:
        sort_by = st.selectbox(
            "Sort by",
            options=["(original order)"] + columns,
            key=f"{key}_sort_by",
        )
    with order_col:
        order = st.radio("Order", options=["Ascending", "Descending"], horizontal=True, key=f"{key}_order")

    working = search_columns(table, queries, search_text)
    working = sort_table(
        working,
        None if sort_by == "(original order)" else sort_by,
        ascending=order == "Ascending",
    )

    pages = page_count(len(working), page_size)
    page_key = f"{key}_page"
    if st.session_state.get(page_key, 1) > pages:
        st.session_state[page_key] = pages
    with page_col:
        page = int(
            st.number_input("Page", min_value=1, max_value=pages, step=1, key=page_key)
        )

    if working.empty:
        st.info("No rows match the column search.")
    else:
        page_df = paginate(working, page, page_size)
        st.markdown(
            TABLE_STYLE + escape_cells(page_df).to_html(escape=False, index=False, classes="pib-table", border=0),
            unsafe_allow_html=True,
        )
        first = (min(page, pages) - 1) * page_size + 1
        st.caption(f"Showing {first}–{first + len(page_df) - 1} of {len(working):,} entries (page {page} of {pages})")

    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
