"""
Gold-layer datasets: annual incident/death summaries
"""

from .build_annual_summary import (
    save_summary,
    summarize_by_year,
    summarize_by_year_and_borough,
)

__all__ = ['save_summary', 'summarize_by_year', 'summarize_by_year_and_borough']
