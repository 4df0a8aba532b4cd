#!/usr/bin/env python3
"""
Clean NYPD Shooting Incident Data

Bronze → Silver:
1. Drop rows with no JURISDICTION_CODE (two rows in the published data)
2. Drop geographic and free-text location columns
3. Parse OCCUR_DATE, convert demographics/boroughs to categoricals,
   convert STATISTICAL_MURDER_FLAG to bool
4. Validate against the cleaned incident schema

Usage:
    python -m data_engineering.clean.clean_incidents                      # Latest bronze snapshot
    python -m data_engineering.clean.clean_incidents --input raw.csv
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from config.paths import DEFAULT_RAW_FILE, NYPD_SILVER_SHOOTINGS
from config.settings import (
    CATEGORICAL_COLUMNS,
    DATE_COLUMN,
    DATE_FORMAT,
    DROP_COLUMNS,
    JURISDICTION_COLUMN,
    MURDER_FLAG_COLUMN,
    MURDER_FLAG_VALUES,
)
from data_engineering.download.download_nypd_shootings import load_incidents_csv
from data_engineering.utils.validation import validate_incident_dataset


def drop_missing_jurisdiction(df: pd.DataFrame, verbose: bool = True) -> pd.DataFrame:
    """Drop rows whose JURISDICTION_CODE is missing"""
    before = len(df)
    df = df.dropna(subset=[JURISDICTION_COLUMN])
    dropped = before - len(df)
    if verbose:
        print(f'  ✓ Dropped {dropped:,} rows with missing {JURISDICTION_COLUMN}')
    return df


def drop_low_value_columns(df: pd.DataFrame, columns: Optional[Iterable[str]] = None,
                           verbose: bool = True) -> pd.DataFrame:
    """
    Remove a fixed list of columns

    Listed columns that are absent from the input are skipped; all other
    columns are left untouched.
    """
    columns = list(DROP_COLUMNS if columns is None else columns)
    present = [col for col in columns if col in df.columns]
    df = df.drop(columns=present)
    if verbose:
        print(f'  ✓ Dropped {len(present)} columns: {", ".join(present) if present else "none"}')
    return df


def parse_murder_flag(series: pd.Series) -> pd.Series:
    """
    Convert the murder flag to bool

    Raises:
        ValueError: If any value is missing or not a recognized spelling
    """
    if pd.api.types.is_bool_dtype(series):
        return series.astype(bool)

    normalized = series.astype(str).str.strip().str.lower()
    parsed = normalized.map(MURDER_FLAG_VALUES)
    bad = series[parsed.isna()]
    if len(bad) > 0:
        raise ValueError(
            f'Unrecognized {MURDER_FLAG_COLUMN} values: {sorted(bad.astype(str).unique())[:10]}'
        )
    return parsed.astype(bool)


def coerce_types(df: pd.DataFrame, verbose: bool = True) -> pd.DataFrame:
    """Parse dates, convert categoricals and the murder flag"""
    df = df.copy()

    # A date that fails to parse aborts the run
    df[DATE_COLUMN] = pd.to_datetime(df[DATE_COLUMN], format=DATE_FORMAT)

    categorical = [col for col in CATEGORICAL_COLUMNS if col in df.columns]
    for col in categorical:
        df[col] = df[col].astype('category')

    df[MURDER_FLAG_COLUMN] = parse_murder_flag(df[MURDER_FLAG_COLUMN])

    if verbose:
        print(f'  ✓ Parsed {DATE_COLUMN} ({df[DATE_COLUMN].min().date() if len(df) else "n/a"}'
              f' to {df[DATE_COLUMN].max().date() if len(df) else "n/a"})')
        print(f'  ✓ Converted {len(categorical)} categorical columns')
        print(f'  ✓ Converted {MURDER_FLAG_COLUMN} to bool')

    return df


def clean_incidents(df: pd.DataFrame, validate: bool = True, verbose: bool = True) -> pd.DataFrame:
    """
    Run the full cleaning step on a raw incident table

    Args:
        df: Raw DataFrame as downloaded (not modified)
        validate: Run schema validation on the result
        verbose: Print progress

    Returns:
        Cleaned DataFrame
    """
    if verbose:
        print(f'\n{"="*70}')
        print('CLEANING INCIDENTS')
        print(f'{"="*70}')
        print(f'  Input: {len(df):,} rows × {df.shape[1]} columns')

    cleaned = drop_missing_jurisdiction(df, verbose=verbose)
    cleaned = drop_low_value_columns(cleaned, verbose=verbose)
    cleaned = coerce_types(cleaned, verbose=verbose)
    cleaned = cleaned.reset_index(drop=True)

    if verbose:
        print(f'  Output: {len(cleaned):,} rows × {cleaned.shape[1]} columns')

    if validate:
        cleaned = validate_incident_dataset(cleaned, verbose=verbose)

    return cleaned


def save_clean(df: pd.DataFrame, output_dir: Optional[Path] = None) -> Path:
    """Save cleaned incidents to the silver layer (pickle keeps dtypes)"""
    output_dir = Path(output_dir) if output_dir else NYPD_SILVER_SHOOTINGS
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / 'nypd_shootings_clean.pkl'
    df.to_pickle(filepath)
    print(f'💾 Saved cleaned incidents to: {filepath}')
    return filepath


def main():
    parser = argparse.ArgumentParser(description='Clean raw NYPD shooting incident data')
    parser.add_argument('--input', type=Path, default=DEFAULT_RAW_FILE,
                       help=f'Raw CSV (default: {DEFAULT_RAW_FILE})')
    parser.add_argument('--no-save', action='store_true',
                       help='Do not write the silver table')

    args = parser.parse_args()

    if not args.input.exists():
        print(f'❌ File not found: {args.input}')
        print('   Run: python -m data_engineering.download.download_nypd_shootings')
        sys.exit(1)

    raw = load_incidents_csv(args.input)
    cleaned = clean_incidents(raw)

    if not args.no_save:
        save_clean(cleaned)

    print('\n✅ Done!')


if __name__ == '__main__':
    main()
