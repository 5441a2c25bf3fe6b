from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

from pib_dashboard.config import KPI_CARDS
from pib_dashboard.data.projections import SummaryCounts
from pib_dashboard.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    icon: Optional[str] = None
    decimals: int = 0


def _format_value(card: KpiCard) -> str:
    return format_number(card.value, decimals=card.decimals)


def _format_label(card: KpiCard) -> str:
    return f"{card.icon} {card.label}" if card.icon else card.label


def summary_cards(summary: SummaryCounts) -> List[KpiCard]:
    values = {
        "total": summary.total,
        "years_covered": summary.years_covered,
        "ministries_covered": summary.ministries_covered,
    }
    return [
        KpiCard(label=cfg.label, value=values[cfg.key], icon=cfg.icon)
        for cfg in KPI_CARDS
    ]


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=_format_label(card), value=_format_value(card), border=True)
