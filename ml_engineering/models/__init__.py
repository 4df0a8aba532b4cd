"""
Model implementations
"""

from .linear_regression import (
    OLSWrapper,
    RegressionSummary,
    fit_deaths_on_incidents,
    fit_ols,
)

__all__ = ['OLSWrapper', 'RegressionSummary', 'fit_deaths_on_incidents', 'fit_ols']
