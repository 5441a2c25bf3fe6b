"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        hovermode="x unified",
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True, rangemode="tozero")
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def line_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    markers: bool = True,
    height: int = 300,
) -> go.Figure:
    fig = px.line(df, x=x, y=y, markers=markers)
    fig = _configure_layout(fig, title, xaxis_title, yaxis_title)
    fig.update_layout(height=height)
    return fig


def trend_chart(series: pd.DataFrame, aggregation: str) -> go.Figure:
    """Line + markers over the bucket series; yearly keys are shown as categories."""
    plot_df = series.copy()
    if aggregation == "Yearly":
        plot_df["bucket"] = plot_df["bucket"].astype(str)
    fig = line_chart(
        plot_df,
        x="bucket",
        y="count",
        xaxis_title=aggregation,
        yaxis_title="Number of Press Releases",
    )
    if aggregation == "Yearly":
        fig.update_xaxes(type="category")
    return fig
