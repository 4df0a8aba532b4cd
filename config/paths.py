"""
Project Path Configuration

Centralized path definitions for data and outputs
Using Medallion Architecture: Bronze (raw) → Silver (cleaned) → Gold (aggregated)
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# MEDALLION ARCHITECTURE (Bronze / Silver / Gold)
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Bronze Layer: Raw, immutable data (as downloaded)
BRONZE = DATA_ROOT / "bronze"
NYPD_BRONZE_SHOOTINGS = BRONZE / "nypd" / "shootings"

# Silver Layer: Cleaned, typed incidents
SILVER = DATA_ROOT / "silver"
NYPD_SILVER_SHOOTINGS = SILVER / "nypd" / "shootings"

# Gold Layer: Annual aggregates used by the report
GOLD = DATA_ROOT / "gold"
NYPD_GOLD_SUMMARIES = GOLD / "nypd" / "summaries"

# ==============================================================================
# DEFAULT FILES
# ==============================================================================

DEFAULT_RAW_FILE = NYPD_BRONZE_SHOOTINGS / "nypd_shootings_latest.csv"

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
FIGURES = OUTPUTS_ROOT / "figures"
REPORTS = OUTPUTS_ROOT / "reports"


def ensure_directories():
    """Create all necessary directories if they don't exist"""
    all_dirs = [
        BRONZE, NYPD_BRONZE_SHOOTINGS,
        SILVER, NYPD_SILVER_SHOOTINGS,
        GOLD, NYPD_GOLD_SUMMARIES,
        OUTPUTS_ROOT, FIGURES, REPORTS,
    ]
    for directory in all_dirs:
        directory.mkdir(parents=True, exist_ok=True)


ARCHITECTURE_DOCS = """
MEDALLION DATA ARCHITECTURE
===========================

Bronze Layer (data/bronze/nypd/shootings/):
  - CSV snapshot exactly as downloaded from NYC Open Data
  - Never modified after download

Silver Layer (data/silver/nypd/shootings/):
  - Typed dates, categorical demographics, boolean murder flag
  - Geographic columns dropped, rows without a jurisdiction code dropped

Gold Layer (data/gold/nypd/summaries/):
  - Annual incident/death totals (overall and per borough)
  - Input to the regression and the trend charts
"""


def print_architecture():
    """Print architecture documentation"""
    print(ARCHITECTURE_DOCS)
