#!/usr/bin/env python3
"""
Data Quality and Schema Validation

Uses pandera to validate datasets for:
- Schema compliance (correct data types, no missing key fields)
- Dropped columns (geographic fields must not survive cleaning)
- Data quality checks (missing values, duplicate incident keys)

Usage:
    from data_engineering.utils.validation import validate_incident_dataset, validate_annual_summary

    validate_incident_dataset(clean_df)
    validate_annual_summary(annual_df)
"""

import pandera as pa
from pandera import Column, Check
import pandas as pd

from config.settings import DROP_COLUMNS


def _is_datetime(series: pd.Series) -> bool:
    return pd.api.types.is_datetime64_any_dtype(series)


def _is_categorical(series: pd.Series) -> bool:
    return isinstance(series.dtype, pd.CategoricalDtype)


# ============================================================================
# CLEANED INCIDENT SCHEMA
# ============================================================================

incident_schema = pa.DataFrameSchema(
    {
        'OCCUR_DATE': Column(
            checks=Check(_is_datetime, element_wise=False, error='OCCUR_DATE must be datetime'),
            nullable=False,
            description='Date of the shooting'
        ),
        'BORO': Column(
            checks=Check(_is_categorical, element_wise=False),
            nullable=False,
        ),
        'JURISDICTION_CODE': Column(
            checks=Check(_is_categorical, element_wise=False),
            nullable=False,
            description='0 = Patrol, 1 = Transit, 2 = Housing'
        ),
        'STATISTICAL_MURDER_FLAG': Column(
            bool,
            nullable=False,
            description='True if the shooting resulted in a murder'
        ),
        # Demographics are frequently unknown for perpetrators
        'PERP_SEX': Column(checks=Check(_is_categorical, element_wise=False), nullable=True),
        'PERP_RACE': Column(checks=Check(_is_categorical, element_wise=False), nullable=True),
        'VIC_SEX': Column(checks=Check(_is_categorical, element_wise=False), nullable=True),
        'VIC_RACE': Column(checks=Check(_is_categorical, element_wise=False), nullable=True),
    },
    strict=False,  # Allow extra columns not defined here
    coerce=False,
    description='Cleaned shooting incident schema'
)


# ============================================================================
# ANNUAL SUMMARY SCHEMA
# ============================================================================

annual_summary_schema = pa.DataFrameSchema(
    {
        'year': Column(int, Check.in_range(1900, 2100), nullable=False, unique=True),
        'total_incidents': Column(int, Check.greater_than_or_equal_to(0), nullable=False),
        'total_deaths': Column(int, Check.greater_than_or_equal_to(0), nullable=False),
    },
    checks=[
        Check(lambda df: df['total_deaths'] <= df['total_incidents'],
              error='total_deaths cannot exceed total_incidents'),
    ],
    strict=False,
    coerce=True,
    description='Annual incident/death totals'
)


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_incident_dataset(df: pd.DataFrame, name: str = 'incidents',
                              verbose: bool = True) -> pd.DataFrame:
    """
    Validate the cleaned incident table

    Args:
        df: Cleaned DataFrame
        name: Dataset name for logging
        verbose: Print progress

    Returns:
        The validated DataFrame

    Raises:
        ValueError: If dropped columns are still present
        pandera.errors.SchemaErrors: If schema validation fails
    """
    if verbose:
        print(f'\n{"="*70}')
        print(f'Validating {name} dataset')
        print(f'{"="*70}')

    leftover = set(DROP_COLUMNS) & set(df.columns)
    if leftover:
        raise ValueError(
            f'❌ DROPPED COLUMNS STILL PRESENT in {name}: {sorted(leftover)}'
        )
    if verbose:
        print(f'  ✓ Geographic columns removed')

    try:
        validated = incident_schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Schema validation failed for {name}:')
        print(err.failure_cases)
        raise
    if verbose:
        print(f'  ✓ Schema validation passed')
        check_data_quality(df, name)
        print(f'  ✓ All validations passed for {name}\n')

    return validated


def validate_annual_summary(df: pd.DataFrame, verbose: bool = True) -> pd.DataFrame:
    """Validate the annual summary table, returning it with coerced dtypes"""
    try:
        validated = annual_summary_schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Annual summary validation failed:')
        print(err.failure_cases)
        raise
    if verbose:
        print(f'  ✓ Annual summary validation passed ({len(validated)} years)')
    return validated


def check_data_quality(df: pd.DataFrame, name: str):
    """
    Data quality notes beyond schema validation

    Checks:
    - Missing value percentages
    - Duplicate incident keys
    - Murder rate
    """
    if len(df) == 0:
        print(f'  ⚠️  {name} is empty')
        return

    missing_pct = (df.isnull().sum() / len(df) * 100).sort_values(ascending=False)
    high_missing = missing_pct[missing_pct > 25]
    if len(high_missing) > 0:
        print(f'  ⚠️  High missing values (>25%):')
        for col, pct in high_missing.items():
            print(f'     - {col}: {pct:.1f}%')

    # One shooting with several victims shares an INCIDENT_KEY
    if 'INCIDENT_KEY' in df.columns:
        dup_count = df['INCIDENT_KEY'].duplicated().sum()
        if dup_count > 0:
            print(f'  Note: {dup_count:,} rows share an INCIDENT_KEY (multi-victim incidents)')

    if 'STATISTICAL_MURDER_FLAG' in df.columns:
        murder_rate = df['STATISTICAL_MURDER_FLAG'].mean() * 100
        print(f'  Murder rate: {murder_rate:.1f}%')
