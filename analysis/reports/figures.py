#!/usr/bin/env python3
"""
Report Figures

Descriptive charts for the shooting incident report:
- Figure 1: Incidents by borough (bar)
- Figure 2: Incidents and deaths per year (line)
- Figure 3: Incidents per year by borough (line)
- Figure 4: Victim race by victim sex (horizontal bar)
- Figure 5: Annual deaths vs. incidents with the OLS fit (scatter + line)

Every function returns the matplotlib Figure; pass output_path to also save a PNG.
"""

from pathlib import Path
from typing import Dict, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from config.paths import FIGURES
from config.settings import CHART_COLORS, DEATH_COLOR, FIGURE_DPI, INCIDENT_COLOR

# Styling
sns.set_style('whitegrid')


def _finish(fig: plt.Figure, output_path: Optional[Path]) -> plt.Figure:
    fig.tight_layout()
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
        print(f'  ✓ Saved → {output_path}')
    return fig


def plot_incidents_by_borough(incidents: pd.DataFrame,
                              output_path: Optional[Path] = None) -> plt.Figure:
    """Bar chart of incident counts per borough, largest first"""
    counts = incidents['BORO'].astype(str).value_counts()

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.barplot(x=counts.index, y=counts.values, color=INCIDENT_COLOR, ax=ax)

    ax.set_xlabel('Borough', fontsize=12, fontweight='bold')
    ax.set_ylabel('Number of Incidents', fontsize=12, fontweight='bold')
    ax.set_title('Shooting Incidents by Borough', fontsize=14, fontweight='bold', pad=15)

    for i, value in enumerate(counts.values):
        ax.text(i, value, f'{value:,}', ha='center', va='bottom', fontsize=9, fontweight='bold')

    return _finish(fig, output_path)


def plot_annual_trend(annual: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """Line chart of total incidents and total deaths per year"""
    fig, ax = plt.subplots(figsize=(12, 6))

    ax.plot(annual['year'], annual['total_incidents'], color=INCIDENT_COLOR,
            lw=2.5, marker='o', label='Incidents')
    ax.plot(annual['year'], annual['total_deaths'], color=DEATH_COLOR,
            lw=2.5, marker='o', label='Deaths')

    ax.set_xlabel('Year', fontsize=12, fontweight='bold')
    ax.set_ylabel('Count', fontsize=12, fontweight='bold')
    ax.set_title('Shooting Incidents and Deaths per Year', fontsize=14, fontweight='bold', pad=15)
    ax.set_xticks(annual['year'])
    ax.tick_params(axis='x', rotation=45)
    ax.set_ylim(bottom=0)
    ax.legend(fontsize=11)

    return _finish(fig, output_path)


def plot_borough_trend(borough_annual: pd.DataFrame,
                       output_path: Optional[Path] = None) -> plt.Figure:
    """Line chart of incidents per year, one line per borough"""
    fig, ax = plt.subplots(figsize=(12, 6))

    boroughs = sorted(borough_annual['BORO'].unique())
    sns.lineplot(
        data=borough_annual, x='year', y='total_incidents', hue='BORO',
        hue_order=boroughs, palette=sns.color_palette(CHART_COLORS, n_colors=len(boroughs)),
        marker='o', lw=2, ax=ax
    )

    ax.set_xlabel('Year', fontsize=12, fontweight='bold')
    ax.set_ylabel('Number of Incidents', fontsize=12, fontweight='bold')
    ax.set_title('Shooting Incidents per Year by Borough', fontsize=14, fontweight='bold', pad=15)
    ax.set_ylim(bottom=0)
    ax.get_legend().set_title('Borough')

    return _finish(fig, output_path)


def plot_victim_demographics(incidents: pd.DataFrame,
                             output_path: Optional[Path] = None) -> plt.Figure:
    """Horizontal stacked bars of incidents by victim race, split by victim sex"""
    table = pd.crosstab(
        incidents['VIC_RACE'].astype(str),
        incidents['VIC_SEX'].astype(str),
    )
    table = table.loc[table.sum(axis=1).sort_values().index]

    fig, ax = plt.subplots(figsize=(12, 6))
    table.plot.barh(stacked=True, ax=ax, color=CHART_COLORS[:table.shape[1]], alpha=0.9)

    ax.set_xlabel('Number of Incidents', fontsize=12, fontweight='bold')
    ax.set_ylabel('Victim Race', fontsize=12, fontweight='bold')
    ax.set_title('Shooting Victims by Race and Sex', fontsize=14, fontweight='bold', pad=15)
    ax.legend(title='Victim Sex', fontsize=10)

    return _finish(fig, output_path)


def plot_regression_fit(annual: pd.DataFrame, model, summary,
                        output_path: Optional[Path] = None) -> plt.Figure:
    """Annual deaths against annual incidents with the fitted line"""
    fig, ax = plt.subplots(figsize=(10, 6))

    sns.scatterplot(data=annual, x='total_incidents', y='total_deaths',
                    color=INCIDENT_COLOR, s=80, ax=ax, label='Observed year')
    for row in annual.itertuples(index=False):
        ax.annotate(str(row.year), (row.total_incidents, row.total_deaths),
                    textcoords='offset points', xytext=(5, 5), fontsize=8, color='gray')

    x_line = np.linspace(annual['total_incidents'].min(), annual['total_incidents'].max(), 100)
    ax.plot(x_line, model.predict(x_line), color=DEATH_COLOR, lw=2.5,
            label=f'OLS fit (R² = {summary.r_squared:.3f})')

    ax.set_xlabel('Incidents per Year', fontsize=12, fontweight='bold')
    ax.set_ylabel('Deaths per Year', fontsize=12, fontweight='bold')
    ax.set_title('Annual Deaths vs. Incidents', fontsize=14, fontweight='bold', pad=15)
    ax.legend(fontsize=11)

    return _finish(fig, output_path)


def generate_all_figures(incidents: pd.DataFrame, annual: pd.DataFrame,
                         borough_annual: pd.DataFrame, model, summary,
                         output_dir: Optional[Path] = None) -> Dict[str, Path]:
    """
    Render and save every report figure

    Returns:
        Dict mapping figure name to PNG path
    """
    output_dir = Path(output_dir) if output_dir else FIGURES

    print(f'\n{"="*70}')
    print('GENERATING FIGURES')
    print(f'{"="*70}')

    paths = {
        'incidents_by_borough': output_dir / 'figure_1_incidents_by_borough.png',
        'annual_trend': output_dir / 'figure_2_annual_trend.png',
        'borough_trend': output_dir / 'figure_3_borough_trend.png',
        'victim_demographics': output_dir / 'figure_4_victim_demographics.png',
        'regression_fit': output_dir / 'figure_5_regression_fit.png',
    }

    figures = [
        plot_incidents_by_borough(incidents, paths['incidents_by_borough']),
        plot_annual_trend(annual, paths['annual_trend']),
        plot_borough_trend(borough_annual, paths['borough_trend']),
        plot_victim_demographics(incidents, paths['victim_demographics']),
        plot_regression_fit(annual, model, summary, paths['regression_fit']),
    ]
    for fig in figures:
        plt.close(fig)

    return paths
