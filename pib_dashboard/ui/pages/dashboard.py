from __future__ import annotations

import pandas as pd
import streamlit as st

from pib_dashboard.data.projections import series_projection, summary_counts, table_projection
from pib_dashboard.ui.components.formatting import format_number
from pib_dashboard.ui.components.charts import render_plotly, trend_chart
from pib_dashboard.ui.components.kpi import render_kpi_cards, summary_cards
from pib_dashboard.ui.components.tables import render_table
from pib_dashboard.ui.pages.context import PageContext


def _render_trend(df: pd.DataFrame, context: PageContext) -> None:
    series = series_projection(df, context.filters)
    with st.container(border=True):
        st.subheader("Press Releases Over Time")
        if series.empty:
            st.info("No press releases to chart for the current filters.")
            return
        render_plotly(trend_chart(series, context.filters.aggregation))


def _render_table(df: pd.DataFrame) -> None:
    with st.container(border=True):
        st.subheader("Filtered Press Releases")
        export_columns = [col for col in ("date", "year", "ministry", "title", "url") if col in df.columns]
        render_table(
            table_projection(df),
            export_df=df[export_columns],
            search_text={"url": df["url"].reset_index(drop=True)},
        )


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.caption(f"Showing {format_number(len(df))} of {format_number(len(context.dataset))} press releases after filters.")
    render_kpi_cards(summary_cards(summary_counts(df)))
    _render_trend(df, context)
    _render_table(df)
