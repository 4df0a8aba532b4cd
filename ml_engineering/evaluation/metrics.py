#!/usr/bin/env python3
"""
Model Evaluation

Goodness-of-fit metrics for the annual regression.

Usage:
    from ml_engineering.evaluation.metrics import evaluate_regressor

    metrics = evaluate_regressor(model, annual['total_incidents'], annual['total_deaths'])
"""

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from typing import Dict, Optional


def evaluate_regressor(
    model,
    X,
    y,
    name: str = 'Annual summary',
    verbose: bool = True
) -> Dict[str, Optional[float]]:
    """
    Evaluation of a fitted regressor

    Args:
        model: Fitted regressor with predict()
        X: Feature values (annual incident counts)
        y: True values (annual deaths)
        name: Dataset name for logging
        verbose: Print metrics

    Returns:
        Dict of metrics
    """
    y = np.asarray(y, dtype=float)
    y_pred = np.asarray(model.predict(X), dtype=float)

    residuals = y - y_pred
    metrics = {
        'rmse': float(np.sqrt(mean_squared_error(y, y_pred))),
        'mae': float(mean_absolute_error(y, y_pred)),
        'r2': float(r2_score(y, y_pred)),
        'max_abs_residual': float(np.abs(residuals).max()) if len(residuals) else None,
    }

    if verbose:
        print(f'\n{"="*70}')
        print(f'EVALUATION: {name}')
        print(f'{"="*70}')
        print(f'\nMetrics:')
        print(f'  RMSE: {metrics["rmse"]:.4f}')
        print(f'  MAE:  {metrics["mae"]:.4f}')
        print(f'  R²:   {metrics["r2"]:.4f}')

        print(f'\nResiduals:')
        print(f'  Min:    {residuals.min():.2f}')
        print(f'  Max:    {residuals.max():.2f}')
        print(f'  Mean:   {residuals.mean():.2f}')

    return metrics
