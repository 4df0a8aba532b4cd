#!/usr/bin/env python3
"""
Regression Report

Writes the Markdown report: dataset overview, figures, and the OLS summary
of annual deaths on annual incidents.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from config.paths import REPORTS
from config.settings import DATASET_URL

FIGURE_CAPTIONS = {
    'incidents_by_borough': 'Shooting incidents by borough',
    'annual_trend': 'Shooting incidents and deaths per year',
    'borough_trend': 'Shooting incidents per year by borough',
    'victim_demographics': 'Shooting victims by race and sex',
    'regression_fit': 'Annual deaths vs. incidents with the OLS fit',
}


def format_regression_summary(summary) -> str:
    """One-paragraph plain-text description of the fit"""
    direction = 'positive' if summary.coefficient >= 0 else 'negative'
    return (
        f'Across {summary.n_obs} years, an ordinary least-squares fit of annual deaths '
        f'on annual incidents gives a {direction} coefficient of {summary.coefficient:.4f} '
        f'deaths per incident (intercept {summary.intercept:.2f}). '
        f'The model explains {summary.r_squared * 100:.1f}% of the variance in annual deaths '
        f'(R² = {summary.r_squared:.4f}, p = {summary.p_value:.3g}).'
    )


def _overview_lines(incidents: pd.DataFrame, annual: pd.DataFrame):
    years = f'{annual["year"].min()}–{annual["year"].max()}' if len(annual) else 'n/a'
    deaths = int(incidents['STATISTICAL_MURDER_FLAG'].sum())
    return [
        f'- Incidents analysed: {len(incidents):,}',
        f'- Incidents flagged as murder: {deaths:,}',
        f'- Years covered: {years}',
        f'- Boroughs: {", ".join(sorted(incidents["BORO"].astype(str).unique()))}',
    ]


def build_report(incidents: pd.DataFrame, annual: pd.DataFrame, summary,
                 model=None, metrics: Optional[Dict] = None,
                 figure_paths: Optional[Dict[str, Path]] = None,
                 report_dir: Optional[Path] = None) -> str:
    """
    Assemble the Markdown report text

    Args:
        incidents: Cleaned incidents
        annual: Annual summary table
        summary: RegressionSummary
        model: OLSWrapper, for the full statsmodels table
        metrics: Output of evaluate_regressor
        figure_paths: Figure name → PNG path
        report_dir: Directory the report will be written to (for relative links)

    Returns:
        Markdown text
    """
    lines = [
        '# NYPD Shooting Incidents: Exploratory Analysis',
        '',
        f'_Generated {datetime.now().strftime("%Y-%m-%d %H:%M")}_',
        '',
        f'Source: [NYPD Shooting Incident Data (Historic)]({DATASET_URL})',
        '',
        '## Dataset',
        '',
        *_overview_lines(incidents, annual),
        '',
        '## Annual Summary',
        '',
        '```',
        annual.to_string(index=False),
        '```',
        '',
    ]

    if figure_paths:
        lines += ['## Figures', '']
        for name, path in figure_paths.items():
            link = Path(path)
            if report_dir is not None:
                link = Path(os.path.relpath(link, report_dir))
            lines += [f'![{FIGURE_CAPTIONS.get(name, name)}]({link.as_posix()})', '']

    lines += [
        '## Regression: Deaths ~ Incidents',
        '',
        format_regression_summary(summary),
        '',
        '| Statistic | Value |',
        '|---|---|',
        f'| Coefficient | {summary.coefficient:.4f} |',
        f'| Intercept | {summary.intercept:.4f} |',
        f'| R² | {summary.r_squared:.4f} |',
        f'| p-value | {summary.p_value:.3g} |',
        f'| Years | {summary.n_obs} |',
    ]
    if metrics:
        lines += [
            f'| RMSE | {metrics["rmse"]:.2f} |',
            f'| MAE | {metrics["mae"]:.2f} |',
        ]
    lines.append('')

    if model is not None:
        lines += ['```', model.summary_text(), '```', '']

    return '\n'.join(lines)


def write_report(text: str, report_dir: Optional[Path] = None,
                 filename: str = 'nypd_shootings_report.md') -> Path:
    """Write report text to the reports directory"""
    report_dir = Path(report_dir) if report_dir else REPORTS
    report_dir.mkdir(parents=True, exist_ok=True)
    filepath = report_dir / filename
    filepath.write_text(text, encoding='utf-8')
    print(f'💾 Report written to: {filepath}')
    return filepath
