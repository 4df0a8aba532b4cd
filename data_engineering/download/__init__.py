"""
Data Download Module

Scripts to download raw data:
- NYPD Shooting Incident Data (Historic), NYC Open Data
"""

from .download_nypd_shootings import (
    MalformedDatasetError,
    fetch_incidents,
    load_incidents_csv,
    parse_incidents,
    save_raw,
)

__all__ = [
    'MalformedDatasetError',
    'fetch_incidents',
    'load_incidents_csv',
    'parse_incidents',
    'save_raw',
]
