#!/usr/bin/env python3
"""
Build Annual Summary Datasets

Silver → Gold: group cleaned incidents by calendar year of OCCUR_DATE.

Outputs:
- annual_summary.csv:          year, total_incidents, total_deaths
- annual_borough_summary.csv:  year, BORO, total_incidents, total_deaths

total_incidents counts rows (one row per shooting victim record), total_deaths
counts rows whose STATISTICAL_MURDER_FLAG is true.
"""

from pathlib import Path
from typing import Optional

import pandas as pd

from config.paths import NYPD_GOLD_SUMMARIES
from config.settings import DATE_COLUMN, MURDER_FLAG_COLUMN
from data_engineering.utils.validation import validate_annual_summary


def _with_year(df: pd.DataFrame) -> pd.DataFrame:
    return df.assign(year=df[DATE_COLUMN].dt.year.astype(int))


def summarize_by_year(df: pd.DataFrame, verbose: bool = True) -> pd.DataFrame:
    """
    Annual incident and death totals

    Args:
        df: Cleaned incidents (OCCUR_DATE datetime, murder flag bool)
        verbose: Print the table

    Returns:
        DataFrame with one row per distinct year, sorted by year
    """
    annual = (
        _with_year(df)
        .groupby('year')
        .agg(
            total_incidents=(MURDER_FLAG_COLUMN, 'size'),
            total_deaths=(MURDER_FLAG_COLUMN, 'sum'),
        )
        .reset_index()
        .sort_values('year')
        .reset_index(drop=True)
    )
    annual = annual.astype({'year': int, 'total_incidents': int, 'total_deaths': int})

    annual = validate_annual_summary(annual, verbose=verbose)

    if verbose:
        print(f'\nIncidents and deaths by year:')
        for row in annual.itertuples(index=False):
            print(f'  {row.year}: {row.total_incidents:6,} incidents | {row.total_deaths:5,} deaths')

    return annual


def summarize_by_year_and_borough(df: pd.DataFrame) -> pd.DataFrame:
    """Annual totals per borough, one row per (year, BORO) pair present"""
    summary = (
        _with_year(df)
        .groupby(['year', 'BORO'], observed=True)
        .agg(
            total_incidents=(MURDER_FLAG_COLUMN, 'size'),
            total_deaths=(MURDER_FLAG_COLUMN, 'sum'),
        )
        .reset_index()
        .sort_values(['year', 'BORO'])
        .reset_index(drop=True)
    )
    summary['BORO'] = summary['BORO'].astype(str)
    return summary.astype({'year': int, 'total_incidents': int, 'total_deaths': int})


def save_summary(df: pd.DataFrame, name: str, output_dir: Optional[Path] = None) -> Path:
    """Save a summary table as CSV in the gold layer"""
    output_dir = Path(output_dir) if output_dir else NYPD_GOLD_SUMMARIES
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f'{name}.csv'
    df.to_csv(filepath, index=False)
    print(f'💾 Saved {name} ({len(df)} rows) to: {filepath}')
    return filepath
