"""Tests for the summary, series and table projections."""

import re

import pandas as pd

from pib_dashboard.data.filters import FilterState, apply_filters
from pib_dashboard.data.projections import (
    SummaryCounts,
    make_link,
    series_projection,
    summary_counts,
    table_projection,
)

ANCHOR_RE = re.compile(r'^<a href="(?P<href>[^"]*)" target="_blank">(?P<text>.*)</a>$')


class TestSummaryCounts:
    """Test suite for projections.summary_counts."""

    def test_full_dataset(self, sample_df):
        """Counts over the whole sample."""
        assert summary_counts(sample_df) == SummaryCounts(total=6, years_covered=2, ministries_covered=3)

    def test_empty_subset(self, empty_df):
        """An empty subset yields zero counts."""
        assert summary_counts(empty_df) == SummaryCounts(total=0, years_covered=0, ministries_covered=0)

    def test_scenario(self, scenario_df):
        """2023 rows of the A/A/B scenario."""
        filtered = apply_filters(scenario_df, FilterState(selected_years=[2023], selected_ministries=[]))
        assert summary_counts(filtered) == SummaryCounts(total=2, years_covered=1, ministries_covered=1)


class TestSeriesProjection:
    """Test suite for projections.series_projection."""

    def test_positions_follow_buckets(self, sample_df):
        """Positions are 1..n over ascending buckets."""
        series = series_projection(sample_df, FilterState(selected_years=[2023, 2024], aggregation='Monthly'))
        assert series['position'].tolist() == [1, 2, 3, 4]
        assert series['count'].tolist() == [2, 1, 2, 1]
        assert series['bucket'].tolist() == [
            pd.Timestamp('2023-01-01'),
            pd.Timestamp('2023-02-01'),
            pd.Timestamp('2024-03-01'),
            pd.Timestamp('2024-11-01'),
        ]

    def test_uses_selected_aggregation(self, sample_df):
        """The state's aggregation picks the bucket column."""
        series = series_projection(sample_df, FilterState(selected_years=[2023, 2024], aggregation='Yearly'))
        assert series['bucket'].tolist() == [2023, 2024]
        assert series['count'].tolist() == [3, 3]

    def test_empty_subset(self, empty_df):
        """An empty subset gives an empty series."""
        series = series_projection(empty_df, FilterState(selected_years=[2024]))
        assert series.empty
        assert list(series.columns) == ['position', 'bucket', 'count']


class TestTableProjection:
    """Test suite for make_link and projections.table_projection."""

    def test_link_href_and_text_match_url(self):
        """The anchor uses the same URL as href and visible text."""
        match = ANCHOR_RE.match(make_link("https://pib.gov.in/x"))
        assert match is not None
        assert match.group('href') == "https://pib.gov.in/x"
        assert match.group('text') == "https://pib.gov.in/x"

    def test_link_escapes_markup(self):
        """Quotes and angle brackets cannot break out of the anchor."""
        link = make_link('https://pib.gov.in/x?a="1"&b=<2>')
        assert '"1"' not in link
        assert '<2>' not in link
        assert '&quot;1&quot;' in link

    def test_table_columns_and_links(self, sample_df):
        """Display columns only, with dates as text and links as anchors."""
        table = table_projection(sample_df)
        assert list(table.columns) == ['date', 'year', 'month', 'ministry', 'title', 'url']
        assert table.loc[0, 'date'] == '2023-01-05'
        assert table.loc[0, 'month'] == '2023-01'
        assert table.loc[0, 'url'] == '<a href="https://pib.gov.in/1" target="_blank">https://pib.gov.in/1</a>'

    def test_source_urls_untouched(self, sample_df):
        """The projection never rewrites the dataset's url values."""
        before = sample_df['url'].tolist()
        table_projection(sample_df)
        assert sample_df['url'].tolist() == before
        assert sample_df['date'].dtype.kind == 'M'

    def test_filtered_subset_is_reindexed(self, sample_df):
        """The table starts at row 0 even when the subset does not."""
        filtered = apply_filters(sample_df, FilterState(selected_years=[2024]))
        table = table_projection(filtered)
        assert table.index.tolist() == [0, 1, 2]
        assert table['title'].tolist() == filtered['title'].tolist()

    def test_empty_subset(self, empty_df):
        """An empty subset gives an empty table with the display columns."""
        table = table_projection(empty_df)
        assert table.empty
        assert 'url' in table.columns
