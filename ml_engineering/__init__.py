"""
ML Engineering Module

Statistical modelling for the shooting incident report.

Modules:
- models: OLS regression of annual deaths on annual incidents
- evaluation: Goodness-of-fit metrics
"""

__version__ = "1.0.0"
