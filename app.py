import pib_dashboard.bootstrap_env  # must be first to set env/logging
import logging

import streamlit as st

from pib_dashboard.config import PAGE_TITLE
from pib_dashboard.data.filters import FilterState, apply_filters, filters_ready, serialize_filters
from pib_dashboard.data.loader import load_data
from pib_dashboard.errors import DashboardError
from pib_dashboard.ui.layout import render_citation, setup_page, sidebar_filters_ui
from pib_dashboard.ui.pages import dashboard
from pib_dashboard.ui.pages.context import PageContext

logger = logging.getLogger("pib_dashboard.app")


def _active_filter_summary(filters: FilterState) -> None:
    badges = []
    if filters.selected_years:
        badges.append("Years: " + ", ".join(str(y) for y in sorted(filters.selected_years)))
    if filters.selected_ministries:
        ministries = filters.selected_ministries
        badges.append(f"Ministries: {len(ministries)} selected")
    else:
        badges.append("Ministries: All")
    if filters.keyword.strip():
        badges.append(f"Keyword: “{filters.keyword.strip()}”")
    badges.append(f"Aggregation: {filters.aggregation}")
    st.markdown("**Active Filters:** " + " | ".join(badges))


def main() -> None:
    setup_page()
    st.title(PAGE_TITLE)

    try:
        dataset = load_data()
    except DashboardError as exc:
        logger.error("Dataset could not be loaded: %s", exc)
        st.error(f"Unable to load the press release dataset: {exc}")
        st.stop()

    if dataset.empty:
        st.warning("The press release dataset is empty.")
        return

    filters = sidebar_filters_ui(dataset)

    render_citation()

    if not filters_ready(filters):
        st.info("Select at least one year to see press releases.")
        return

    filtered = apply_filters(dataset, filters)
    logger.debug("Filters %s matched %d rows", serialize_filters(filters), len(filtered))

    _active_filter_summary(filters)
    dashboard.render(filtered, PageContext(dataset=dataset, filters=filters))


if __name__ == "__main__":
    main()
