"""
Cleaning step: raw incident CSV → typed silver table
"""

from .clean_incidents import (
    clean_incidents,
    coerce_types,
    drop_low_value_columns,
    drop_missing_jurisdiction,
    parse_murder_flag,
)

__all__ = [
    'clean_incidents',
    'coerce_types',
    'drop_low_value_columns',
    'drop_missing_jurisdiction',
    'parse_murder_flag',
]
