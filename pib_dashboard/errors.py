"""
Exception types raised while preparing the dashboard dataset.
"""

from __future__ import annotations

from typing import List, Optional


class DashboardError(Exception):
    """Base class for errors that prevent the dashboard from rendering."""


class DataLoadError(DashboardError):
    """The source file is missing, unreadable, or lacks required columns."""


class DateParseError(DashboardError):
    """One or more rows carry a date value that cannot be parsed."""

    def __init__(self, message: str, rows: Optional[List[int]] = None, values: Optional[List[str]] = None):
        super().__init__(message)
        self.rows = rows or []
        self.values = values or []
