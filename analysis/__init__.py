"""
Analysis Module

Visualization and reporting for the shooting incident analysis

Modules:
- reports.figures: Descriptive charts (matplotlib/seaborn)
- reports.regression_report: Markdown report with the regression summary
"""

__version__ = "1.0.0"
