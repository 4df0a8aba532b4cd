"""
Model Evaluation Module

Goodness-of-fit metrics for the annual regression
"""

from .metrics import evaluate_regressor

__all__ = [
    'evaluate_regressor',
]
