#!/usr/bin/env python3
"""
Download NYPD Shooting Incident Data (Historic) from NYC Open Data

Every shooting incident recorded in New York City since 2006, one row per
incident, with borough, jurisdiction, perpetrator/victim demographics and a
statistical murder flag.

Data source: https://data.cityofnewyork.us/Public-Safety/NYPD-Shooting-Incident-Data-Historic-/833y-ss6s
CSV export:  https://data.cityofnewyork.us/api/views/833y-ss6s/rows.csv?accessType=DOWNLOAD

Usage:
    python -m data_engineering.download.download_nypd_shootings            # Download and save
    python -m data_engineering.download.download_nypd_shootings --no-save  # Download and summarize only
"""

import argparse
import shutil
import sys
from datetime import datetime
from io import StringIO
from pathlib import Path
from typing import Optional

import pandas as pd
import requests

from config.paths import NYPD_BRONZE_SHOOTINGS
from config.settings import DATASET_URL, REQUEST_TIMEOUT, REQUIRED_COLUMNS

OUTPUT_DIR = NYPD_BRONZE_SHOOTINGS


class MalformedDatasetError(ValueError):
    """Raised when the downloaded resource is not the expected incident table"""


def parse_incidents(text: str) -> pd.DataFrame:
    """
    Parse CSV text into a DataFrame and check the required columns

    Args:
        text: Raw CSV body

    Returns:
        DataFrame with one row per incident

    Raises:
        MalformedDatasetError: If the body is empty or lacks required columns
    """
    if not text or not text.strip():
        raise MalformedDatasetError('Dataset body is empty')

    try:
        # Keep codes such as JURISDICTION_CODE exactly as published
        df = pd.read_csv(StringIO(text), dtype=str, keep_default_na=True)
    except pd.errors.ParserError as e:
        raise MalformedDatasetError(f'Could not parse dataset as CSV: {e}') from e

    check_required_columns(df)
    return df


def check_required_columns(df: pd.DataFrame):
    """Raise MalformedDatasetError if any required column is missing"""
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise MalformedDatasetError(
            f'Dataset is missing required columns: {missing}\n'
            f'   Columns found: {list(df.columns)}'
        )


def fetch_incidents(url: str = DATASET_URL, timeout: int = REQUEST_TIMEOUT,
                    verbose: bool = True) -> pd.DataFrame:
    """
    Download the shooting incident CSV

    Args:
        url: CSV export URL
        timeout: Request timeout in seconds
        verbose: Print progress

    Returns:
        DataFrame with raw (untyped) incident data

    Raises:
        requests.RequestException: If the resource is unreachable or returns an error status
        MalformedDatasetError: If the resource is not a usable incident table
    """
    if verbose:
        print(f"📥 Downloading shooting incident data...")
        print(f"   URL: {url}")

    response = requests.get(url, timeout=timeout)
    response.raise_for_status()

    df = parse_incidents(response.text)

    if verbose:
        print(f"✅ Download complete!")
        print(f"📋 DataFrame shape: {df.shape}")

    return df


def load_incidents_csv(path) -> pd.DataFrame:
    """
    Load a previously saved raw snapshot (offline re-runs)

    Args:
        path: Path to a bronze-layer CSV

    Returns:
        DataFrame with raw (untyped) incident data
    """
    path = Path(path)
    print(f"Loading raw incidents from {path}...")
    df = parse_incidents(path.read_text(encoding='utf-8'))
    print(f"✓ Loaded {len(df):,} incidents")
    return df


def save_raw(df: pd.DataFrame, output_dir: Optional[Path] = None) -> Path:
    """Save DataFrame to a timestamped CSV and refresh the _latest copy"""
    output_dir = Path(output_dir) if output_dir else OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = output_dir / f"nypd_shootings_{timestamp}.csv"

    df.to_csv(filepath, index=False)
    print(f"\n💾 Saved to: {filepath}")
    print(f"   File size: {filepath.stat().st_size / 1024 / 1024:.1f} MB")

    latest = output_dir / "nypd_shootings_latest.csv"
    shutil.copyfile(filepath, latest)
    print(f"   Latest: {latest}")

    return filepath


def print_summary(df: pd.DataFrame):
    """Print summary statistics"""
    print("\n" + "="*60)
    print("📊 DATA SUMMARY")
    print("="*60)

    print(f"\nTotal incidents: {len(df):,}")

    if 'STATISTICAL_MURDER_FLAG' in df.columns:
        flags = df['STATISTICAL_MURDER_FLAG'].astype(str).str.strip().str.lower()
        murders = flags.isin(['true', 'y', '1']).sum()
        print(f"Flagged as murder: {murders:,} ({murders / max(len(df), 1) * 100:.1f}%)")

    if 'BORO' in df.columns:
        print(f"\nIncidents by borough:")
        for boro, count in df['BORO'].value_counts().items():
            print(f"  {boro}: {count:,}")

    if 'JURISDICTION_CODE' in df.columns:
        missing = df['JURISDICTION_CODE'].isna().sum()
        print(f"\nMissing jurisdiction code: {missing:,}")

    if 'OCCUR_DATE' in df.columns:
        years = pd.to_datetime(df['OCCUR_DATE'], format='%m/%d/%Y', errors='coerce').dt.year
        if years.notna().any():
            print(f"\nYears covered: {int(years.min())} to {int(years.max())}")

    print("\n" + "="*60)


def main():
    parser = argparse.ArgumentParser(
        description="Download NYPD shooting incident data from NYC Open Data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Download and save a bronze snapshot
  python -m data_engineering.download.download_nypd_shootings

  # Inspect without saving
  python -m data_engineering.download.download_nypd_shootings --no-save
        """
    )

    parser.add_argument('--url', default=DATASET_URL,
                       help='CSV export URL (default: NYC Open Data)')
    parser.add_argument('--no-save', action='store_true',
                       help='Do not save to file (useful for testing)')
    parser.add_argument('--quiet', action='store_true',
                       help='Suppress progress messages')

    args = parser.parse_args()

    print("🚀 NYPD Shooting Incident Downloader")
    print("="*60 + "\n")

    try:
        df = fetch_incidents(args.url, verbose=not args.quiet)
    except (requests.RequestException, MalformedDatasetError) as e:
        print(f"\n❌ Download failed: {e}")
        sys.exit(1)

    print_summary(df)

    if not args.no_save:
        save_raw(df)

    print("\n✅ Done!")


if __name__ == "__main__":
    main()
