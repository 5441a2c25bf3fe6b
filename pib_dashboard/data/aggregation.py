"""
Time-bucketed counts of press releases.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import List, Union

import pandas as pd

from pib_dashboard.config import AGGREGATION_OPTIONS

BucketKey = Union[dt.date, int]


@dataclass(frozen=True)
class AggregatedBucket:
    key: BucketKey
    count: int


def bucket_column(granularity: str) -> str:
    try:
        return AGGREGATION_OPTIONS[granularity]
    except KeyError:
        raise ValueError(
            f"Unknown aggregation {granularity!r}; expected one of {list(AGGREGATION_OPTIONS)}"
        ) from None


def aggregate_counts(df: pd.DataFrame, granularity: str) -> pd.DataFrame:
    """Count rows per bucket, ascending by bucket, without zero-filling gaps."""
    column = bucket_column(granularity)
    if df.empty or column not in df.columns:
        return pd.DataFrame({"bucket": pd.Series(dtype=object), "count": pd.Series(dtype=int)})
    counts = (
        df.groupby(column, sort=True)
        .size()
        .reset_index(name="count")
        .rename(columns={column: "bucket"})
    )
    counts["count"] = counts["count"].astype(int)
    return counts


def _to_key(value) -> BucketKey:
    if isinstance(value, pd.Timestamp):
        return value.date()
    return int(value)


def aggregate(df: pd.DataFrame, granularity: str) -> List[AggregatedBucket]:
    counts = aggregate_counts(df, granularity)
    return [
        AggregatedBucket(key=_to_key(bucket), count=int(count))
        for bucket, count in zip(counts["bucket"], counts["count"])
    ]
