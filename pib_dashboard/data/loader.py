import logging
from pathlib import Path
from typing import List, Union

import pandas as pd
import streamlit as st

from pib_dashboard.config import DATA_FILE, DATE_ERROR_POLICY, REQUIRED_COLUMNS
from pib_dashboard.errors import DataLoadError, DateParseError

logger = logging.getLogger(__name__)

DATE_ERROR_POLICIES = ("drop", "raise")
TEXT_COLUMNS: List[str] = ["ministry", "title", "url"]
MAX_REPORTED_BAD_DATES = 5


def _read_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise DataLoadError(f"Dataset file not found: {path}")
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as exc:
        raise DataLoadError(f"Dataset file is empty: {path}") from exc
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise DataLoadError(f"Unable to read dataset file {path}: {exc}") from exc


def _parse_dates(df: pd.DataFrame, date_errors: str) -> pd.DataFrame:
    """Parse the date column, applying one bad-date policy to the whole load.

    Row numbers in warnings and errors are 1-based data rows (header excluded).
    """
    raw = df["date"]
    parsed = pd.to_datetime(raw, errors="coerce", format="mixed")
    if getattr(parsed.dt, "tz", None) is not None:
        parsed = parsed.dt.tz_localize(None)
    bad_mask = parsed.isna()
    if bad_mask.any():
        bad_rows = [int(idx) + 1 for idx in df.index[bad_mask]]
        bad_values = ["" if pd.isna(v) else str(v) for v in raw[bad_mask]]
        sample = ", ".join(
            f"row {row}: {value!r}"
            for row, value in list(zip(bad_rows, bad_values))[:MAX_REPORTED_BAD_DATES]
        )
        if date_errors == "raise":
            raise DateParseError(
                f"{len(bad_rows)} row(s) have unparseable dates ({sample})",
                rows=bad_rows,
                values=bad_values,
            )
        logger.warning("Dropping %d row(s) with unparseable dates (%s)", len(bad_rows), sample)

    working = df.loc[~bad_mask].copy()
    working["date"] = parsed[~bad_mask].dt.normalize()
    working.attrs["dropped_dates"] = int(bad_mask.sum())
    return working


def read_press_releases(path: Union[str, Path], date_errors: str = DATE_ERROR_POLICY) -> pd.DataFrame:
    """Read the press release table and derive the calendar fields.

    Raises DataLoadError for missing/unreadable files or absent required columns
    and DateParseError for bad dates when ``date_errors="raise"``.
    """
    if date_errors not in DATE_ERROR_POLICIES:
        raise ValueError(f"Unknown date error policy {date_errors!r}; expected one of {DATE_ERROR_POLICIES}")

    path = Path(path)
    df = _read_csv(path)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DataLoadError(f"Dataset {path.name} is missing required columns: {missing}")

    raw_row_count = int(len(df))
    df = _parse_dates(df.reset_index(drop=True), date_errors)
    dropped = df.attrs.pop("dropped_dates", 0)

    for col in TEXT_COLUMNS:
        df[col] = df[col].fillna("").astype(str)

    df["year"] = df["date"].dt.year.astype(int)
    df["month"] = df["date"].dt.to_period("M").dt.to_timestamp()
    df = df.reset_index(drop=True)

    df.attrs["diagnostics"] = {
        "source": str(path),
        "raw_row_count": raw_row_count,
        "dataframe_row_count": int(len(df)),
        "dropped_date_rows": dropped,
    }
    logger.info("Loaded %d press releases from %s", len(df), path.name)
    return df


@st.cache_data(show_spinner=False)
def load_data() -> pd.DataFrame:
    """Load the fixed dataset once per process; shared read-only by every session."""
    return read_press_releases(DATA_FILE, DATE_ERROR_POLICY)
