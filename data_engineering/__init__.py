"""
Data Engineering Module for the NYPD Shooting Incident Analysis

This module contains all data engineering code organized by pipeline stage:
1. download/ - Data acquisition (NYC Open Data CSV export)
2. clean/ - Type coercion, column pruning, missing-value filtering
3. datasets/ - Annual aggregates
4. utils/ - Schema validation

Usage:
    from data_engineering.clean.clean_incidents import clean_incidents
    from data_engineering.datasets.build_annual_summary import summarize_by_year
"""

__version__ = "1.0.0"
