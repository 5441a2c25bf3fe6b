"""
Application-wide configuration constants.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List


@dataclass(frozen=True)
class KpiConfig:
    key: str
    label: str
    icon: str


PAGE_TITLE = "PIB Critical Minerals Dashboard"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_FILE = PROJECT_ROOT / "data" / "pib_critical_minerals_clean_v2.csv"

REQUIRED_COLUMNS: List[str] = ["date", "ministry", "title", "url"]

# Unparseable dates: "drop" skips the row with a warning, "raise" aborts the load.
DATE_ERROR_POLICY = "drop"

# Aggregation label -> column used as the bucket key
AGGREGATION_OPTIONS: Dict[str, str] = {
    "Daily": "date",
    "Monthly": "month",
    "Yearly": "year",
}
DEFAULT_AGGREGATION = "Monthly"

TABLE_COLUMNS: List[str] = ["date", "year", "month", "ministry", "title", "url"]
TABLE_PAGE_SIZE = 10

# Ordered KPI definitions for the summary row
KPI_CARDS: List[KpiConfig] = [
    KpiConfig("total", "Total Press Releases", ":material/description:"),
    KpiConfig("years_covered", "Years Covered", ":material/calendar_month:"),
    KpiConfig("ministries_covered", "Ministries Covered", ":material/account_balance:"),
]

APP_URL = "https://mousumib.shinyapps.io/pib_shiny_app/"
CITATION_HTML = (
    "Citation: Baruah, Mousumi (2025). "
    "<em>PIB Critical Minerals Dashboard</em>. "
    f"<a href='{APP_URL}' target='_blank'>{APP_URL}</a>"
)

DEFAULT_LOG_LEVEL = "INFO"
