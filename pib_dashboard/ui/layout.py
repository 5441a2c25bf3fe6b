"""
Layout helpers for the Streamlit application (sidebar, header, footer).
"""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from pib_dashboard.config import AGGREGATION_OPTIONS, CITATION_HTML, PAGE_TITLE
from pib_dashboard.data.filters import (
    FilterState,
    available_ministries,
    available_years,
    default_filter_state,
)

STATE_PREFIX = "pib_"
BLANK_LABEL = "(unspecified)"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":material/monitoring:",
    )


def _year_checkboxes(years: List[int], defaults: List[int]) -> List[int]:
    st.sidebar.markdown("**Select Year(s)**")
    selected = []
    for year in years:
        if st.sidebar.checkbox(str(year), value=year in defaults, key=f"{STATE_PREFIX}year_{year}"):
            selected.append(year)
    return selected


def _multiselect_with_counts(
    label: str,
    key: str,
    options: List[str],
    series: pd.Series,
) -> List[str]:
    if not options:
        return []
    counts = series.value_counts(dropna=False).to_dict()
    return st.sidebar.multiselect(
        label=label,
        options=options,
        default=options,
        key=key,
        format_func=lambda v: f"{v or BLANK_LABEL} ({int(counts.get(v, 0))})",
    )


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]


def sidebar_filters_ui(df: pd.DataFrame) -> FilterState:
    """
    Render the sidebar filter controls and return the selected values.

    Choices come from the full dataset, never from the current selection.
    """
    defaults = default_filter_state(df)
    st.sidebar.header("Filters")

    selected_years = _year_checkboxes(available_years(df), defaults.selected_years)

    selected_ministries = _multiselect_with_counts(
        "Select Ministry",
        key=f"{STATE_PREFIX}ministry",
        options=available_ministries(df),
        series=df.get("ministry", pd.Series(dtype=str)),
    )

    keyword = st.sidebar.text_input(
        "Keyword search (Title)",
        key=f"{STATE_PREFIX}keyword",
        placeholder="e.g. lithium, mining, supply chain",
    )

    aggregation_labels = list(AGGREGATION_OPTIONS.keys())
    aggregation = st.sidebar.radio(
        "Time Aggregation",
        options=aggregation_labels,
        index=aggregation_labels.index(defaults.aggregation),
        key=f"{STATE_PREFIX}aggregation",
    )

    if st.sidebar.button("Reset Filters", key=f"{STATE_PREFIX}reset_filters", type="primary"):
        _clear_state_prefixes([
            f"{STATE_PREFIX}year_",
            f"{STATE_PREFIX}ministry",
            f"{STATE_PREFIX}keyword",
            f"{STATE_PREFIX}aggregation",
        ])
        st.rerun()

    return FilterState(
        selected_years=selected_years,
        selected_ministries=list(selected_ministries),
        keyword=keyword or "",
        aggregation=aggregation,
    )


def render_citation() -> None:
    st.markdown(f"<small>{CITATION_HTML}</small>", unsafe_allow_html=True)
