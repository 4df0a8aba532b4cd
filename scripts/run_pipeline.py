#!/usr/bin/env python3
"""
Master Pipeline Orchestration Script

Runs the complete shooting incident analysis:
1. Download (or load) the raw incident CSV
2. Clean incidents
3. Build annual summaries
4. Fit deaths ~ incidents (OLS)
5. Render figures
6. Write the Markdown report

Any failure aborts the run.

Usage:
    # Full pipeline (downloads from NYC Open Data)
    python scripts/run_pipeline.py

    # Re-run from a saved snapshot
    python scripts/run_pipeline.py --input-file data/bronze/nypd/shootings/nypd_shootings_latest.csv

    # Print results only
    python scripts/run_pipeline.py --no-save
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import matplotlib.pyplot as plt
import requests
from pandera.errors import SchemaErrors

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))

from config.paths import (
    FIGURES,
    NYPD_BRONZE_SHOOTINGS,
    NYPD_GOLD_SUMMARIES,
    NYPD_SILVER_SHOOTINGS,
    REPORTS,
    ensure_directories,
)
from config.settings import DATASET_URL
from analysis.reports.figures import generate_all_figures
from analysis.reports.regression_report import build_report, format_regression_summary, write_report
from data_engineering.clean.clean_incidents import clean_incidents, save_clean
from data_engineering.datasets.build_annual_summary import (
    save_summary,
    summarize_by_year,
    summarize_by_year_and_borough,
)
from data_engineering.download.download_nypd_shootings import (
    MalformedDatasetError,
    fetch_incidents,
    load_incidents_csv,
    save_raw,
)
from ml_engineering.evaluation.metrics import evaluate_regressor
from ml_engineering.models.linear_regression import fit_deaths_on_incidents


def print_header(text):
    """Print a formatted header"""
    print('\n' + '=' * 80)
    print(text.center(80))
    print('=' * 80 + '\n')


def run_pipeline(url: str = DATASET_URL, input_file: Optional[Path] = None,
                 save: bool = True, figures_dir: Optional[Path] = None,
                 report_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Run load → clean → aggregate → model → visualize → report

    Args:
        url: CSV export URL (ignored when input_file is given)
        input_file: Local raw CSV to use instead of downloading
        save: Write intermediate tables, figures and the report
        figures_dir: Override the figures directory
        report_dir: Override the report directory

    Returns:
        Dict with the cleaned incidents, summaries, model, regression summary,
        metrics and any written paths
    """
    print_header('STEP 1: LOAD')
    if input_file is not None:
        raw = load_incidents_csv(input_file)
    else:
        raw = fetch_incidents(url)
        if save:
            save_raw(raw, NYPD_BRONZE_SHOOTINGS)

    print_header('STEP 2: CLEAN')
    incidents = clean_incidents(raw)
    if save:
        save_clean(incidents, NYPD_SILVER_SHOOTINGS)

    print_header('STEP 3: AGGREGATE')
    annual = summarize_by_year(incidents)
    borough_annual = summarize_by_year_and_borough(incidents)
    if save:
        save_summary(annual, 'annual_summary', NYPD_GOLD_SUMMARIES)
        save_summary(borough_annual, 'annual_borough_summary', NYPD_GOLD_SUMMARIES)

    print_header('STEP 4: MODEL')
    model, summary = fit_deaths_on_incidents(annual)
    metrics = evaluate_regressor(model, annual['total_incidents'], annual['total_deaths'])
    print('\n' + format_regression_summary(summary))

    result = {
        'incidents': incidents,
        'annual': annual,
        'borough_annual': borough_annual,
        'model': model,
        'summary': summary,
        'metrics': metrics,
        'figure_paths': {},
        'report_path': None,
    }

    if save:
        print_header('STEP 5: FIGURES')
        figures_dir = Path(figures_dir) if figures_dir else FIGURES
        result['figure_paths'] = generate_all_figures(
            incidents, annual, borough_annual, model, summary, figures_dir
        )

        print_header('STEP 6: REPORT')
        report_dir = Path(report_dir) if report_dir else REPORTS
        text = build_report(incidents, annual, summary, model=model, metrics=metrics,
                            figure_paths=result['figure_paths'], report_dir=report_dir)
        result['report_path'] = write_report(text, report_dir)
    else:
        plt.close('all')

    return result


def main():
    """Main pipeline orchestration"""
    parser = argparse.ArgumentParser(
        description='Run the NYPD shooting incident analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full pipeline
  python scripts/run_pipeline.py

  # From a saved snapshot
  python scripts/run_pipeline.py --input-file data/bronze/nypd/shootings/nypd_shootings_latest.csv

  # Print results only
  python scripts/run_pipeline.py --no-save
        """
    )

    parser.add_argument(
        '--input-file',
        type=Path,
        help='Raw CSV to analyse instead of downloading'
    )

    parser.add_argument(
        '--url',
        default=DATASET_URL,
        help='CSV export URL (default: NYC Open Data)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not write data files, figures or the report'
    )

    args = parser.parse_args()

    print_header('NYPD SHOOTING INCIDENTS - ANALYSIS PIPELINE')
    start_time = datetime.now()
    print(f'Started: {start_time.strftime("%Y-%m-%d %H:%M:%S")}')
    print(f'Source: {args.input_file or args.url}')

    if not args.no_save:
        print('Ensuring directory structure...')
        ensure_directories()
        print('✓ Directory structure ready')

    try:
        result = run_pipeline(url=args.url, input_file=args.input_file, save=not args.no_save)
    except (requests.RequestException, MalformedDatasetError, SchemaErrors, ValueError, OSError) as e:
        print(f'\n❌ Pipeline failed: {e}')
        sys.exit(1)

    elapsed = (datetime.now() - start_time).total_seconds()
    print_header('PIPELINE COMPLETE')
    print(f'Incidents: {len(result["incidents"]):,}')
    print(f'Years:     {len(result["annual"])}')
    print(f'R²:        {result["summary"].r_squared:.4f}')
    if result['report_path']:
        print(f'Report:    {result["report_path"]}')
    print(f'Elapsed:   {elapsed:.1f}s')


if __name__ == '__main__':
    main()
