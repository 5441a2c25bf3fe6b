from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from pib_dashboard.data.filters import FilterState


@dataclass
class PageContext:
    dataset: pd.DataFrame
    filters: FilterState
