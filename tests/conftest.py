"""Pytest fixtures for test suite."""

import os
import sys

import pandas as pd
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pib_dashboard.data.loader import read_press_releases  # noqa: E402


SAMPLE_CSV = """date,ministry,title,url
2023-01-05,Ministry of Mines,Lithium Mining Update,https://pib.gov.in/1
2023-01-20,Ministry of Mines,Coal block auction results,https://pib.gov.in/2
2023-02-10,Ministry of Steel,Critical minerals supply chain review,https://pib.gov.in/3
2024-03-01,Ministry of Mines,National Critical Mineral Mission launched,https://pib.gov.in/4
2024-03-01,NITI Aayog,Rare earth roadmap (draft),https://pib.gov.in/5
2024-11-15,Ministry of Steel,Steel scrap recycling policy,https://pib.gov.in/6
"""

SCENARIO_CSV = """date,ministry,title,url
2023-01-05,A,First release,https://pib.gov.in/a
2023-02-10,A,Second release,https://pib.gov.in/b
2024-03-01,B,Third release,https://pib.gov.in/c
"""


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_csv(tmp_path):
    """Fixture returning a helper that writes CSV text into tmp_path."""
    def _writer(text, name="press_releases.csv"):
        return _write(tmp_path, name, text)
    return _writer


@pytest.fixture
def sample_csv(tmp_path):
    """Fixture for a six-row press release file spanning 2023 and 2024."""
    return _write(tmp_path, "sample.csv", SAMPLE_CSV)


@pytest.fixture
def sample_df(sample_csv):
    """Fixture for the loaded six-row dataset."""
    return read_press_releases(sample_csv)


@pytest.fixture
def scenario_df(tmp_path):
    """Fixture for the three-row A/A/B dataset."""
    return read_press_releases(_write(tmp_path, "scenario.csv", SCENARIO_CSV))


@pytest.fixture
def empty_df(sample_df):
    """Fixture for a dataset with the right columns and no rows."""
    return sample_df.iloc[0:0].copy()


@pytest.fixture
def raw_table():
    """Fixture for an already projected table used by the table helpers."""
    return pd.DataFrame({
        'date': ['2023-01-05', '2023-01-20', '2023-02-10', '2024-03-01'],
        'ministry': ['Ministry of Mines', 'Ministry of Mines', 'Ministry of Steel', 'NITI Aayog'],
        'title': ['Lithium Mining Update', 'Coal auction', 'Supply chain review', 'Rare earth <b>roadmap</b>'],
        'url': [
            '<a href="https://pib.gov.in/1" target="_blank">https://pib.gov.in/1</a>',
            '<a href="https://pib.gov.in/2" target="_blank">https://pib.gov.in/2</a>',
            '<a href="https://pib.gov.in/3" target="_blank">https://pib.gov.in/3</a>',
            '<a href="https://pib.gov.in/4" target="_blank">https://pib.gov.in/4</a>',
        ],
    })
