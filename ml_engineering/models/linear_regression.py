#!/usr/bin/env python3
"""
Annual Deaths vs. Incidents Linear Regression

Ordinary least squares fit of total_deaths on total_incidents over the annual
summary table, using statsmodels.

Usage:
    from ml_engineering.models.linear_regression import fit_deaths_on_incidents

    model, summary = fit_deaths_on_incidents(annual_df)
    print(summary.coefficient, summary.r_squared)
"""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple

import numpy as np
import pandas as pd
import statsmodels.api as sm

DEPENDENT = 'total_deaths'
INDEPENDENT = 'total_incidents'
MIN_OBSERVATIONS = 3


@dataclass(frozen=True)
class RegressionSummary:
    """Headline numbers of a two-variable OLS fit"""
    coefficient: float
    intercept: float
    r_squared: float
    p_value: float
    n_obs: int

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class OLSWrapper:
    """
    Wrapper around a statsmodels OLS result to provide sklearn-like interface
    """
    def __init__(self, results):
        self.results = results

    def predict(self, incidents):
        """Predict deaths for one or more incident counts"""
        x = np.asarray(incidents, dtype=float).reshape(-1)
        exog = sm.add_constant(x, has_constant='add')
        return self.results.predict(exog)

    def get_params(self):
        """Get model parameters (intercept, slope)"""
        return self.results.params

    def summary_text(self) -> str:
        """Full statsmodels regression table"""
        return self.results.summary().as_text()


def fit_ols(x, y) -> OLSWrapper:
    """Fit y = intercept + coefficient * x"""
    exog = sm.add_constant(np.asarray(x, dtype=float), has_constant='add')
    results = sm.OLS(np.asarray(y, dtype=float), exog).fit()
    return OLSWrapper(results)


def fit_deaths_on_incidents(
    annual: pd.DataFrame,
    verbose: bool = True
) -> Tuple[OLSWrapper, RegressionSummary]:
    """
    Fit annual deaths on annual incidents

    Args:
        annual: Annual summary with total_incidents and total_deaths
        verbose: Print the fitted coefficients

    Returns:
        Tuple of (wrapped_model, summary)

    Raises:
        ValueError: If fewer than three years are available
    """
    if len(annual) < MIN_OBSERVATIONS:
        raise ValueError(
            f'Need at least {MIN_OBSERVATIONS} annual rows to fit a regression, got {len(annual)}'
        )

    if verbose:
        print(f'\n{"="*70}')
        print(f'FITTING: {DEPENDENT} ~ {INDEPENDENT} (OLS)')
        print(f'{"="*70}')
        print(f'  Observations: {len(annual)} years')

    model = fit_ols(annual[INDEPENDENT], annual[DEPENDENT])
    results = model.results

    summary = RegressionSummary(
        coefficient=float(results.params[1]),
        intercept=float(results.params[0]),
        r_squared=float(results.rsquared),
        p_value=float(results.pvalues[1]),
        n_obs=int(results.nobs),
    )

    if verbose:
        print(f'\n✓ Fit complete')
        print(f'  Coefficient: {summary.coefficient:.4f} deaths per incident')
        print(f'  Intercept:   {summary.intercept:.4f}')
        print(f'  R²:          {summary.r_squared:.4f}')
        print(f'  p-value:     {summary.p_value:.3g}')

    return model, summary
