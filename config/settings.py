"""
Dataset and report settings for the NYPD shooting incident analysis
Source URL, schema constants, and chart styling
"""

# NYC Open Data: NYPD Shooting Incident Data (Historic)
DATASET_URL = (
    "https://data.cityofnewyork.us/api/views/833y-ss6s/rows.csv?accessType=DOWNLOAD"
)
REQUEST_TIMEOUT = 120  # seconds; the full export is ~10 MB

# Columns the analysis cannot run without
REQUIRED_COLUMNS = [
    'OCCUR_DATE',
    'BORO',
    'JURISDICTION_CODE',
    'PERP_SEX',
    'PERP_RACE',
    'VIC_SEX',
    'VIC_RACE',
    'STATISTICAL_MURDER_FLAG',
]

DATE_COLUMN = 'OCCUR_DATE'
DATE_FORMAT = '%m/%d/%Y'
MURDER_FLAG_COLUMN = 'STATISTICAL_MURDER_FLAG'
JURISDICTION_COLUMN = 'JURISDICTION_CODE'

# Geographic and free-text location fields, not used by the report
DROP_COLUMNS = [
    'X_COORD_CD',
    'Y_COORD_CD',
    'Latitude',
    'Longitude',
    'Lon_Lat',
    'LOC_OF_OCCUR_DESC',
    'LOC_CLASSFCTN_DESC',
    'LOCATION_DESC',
]

CATEGORICAL_COLUMNS = [
    'BORO',
    'PRECINCT',
    'JURISDICTION_CODE',
    'PERP_AGE_GROUP',
    'PERP_SEX',
    'PERP_RACE',
    'VIC_AGE_GROUP',
    'VIC_SEX',
    'VIC_RACE',
]

# Text spellings of the murder flag seen across dataset revisions
MURDER_FLAG_VALUES = {
    'true': True,
    'false': False,
    'y': True,
    'n': False,
    '1': True,
    '0': False,
}

BOROUGHS = ['BRONX', 'BROOKLYN', 'MANHATTAN', 'QUEENS', 'STATEN ISLAND']

# Chart Color Palette
CHART_COLORS = [
    '#3498db',  # Blue
    '#e74c3c',  # Red
    '#2ecc71',  # Green
    '#f39c12',  # Orange
    '#9b59b6',  # Purple
    '#1abc9c',  # Turquoise
    '#34495e',  # Dark gray
    '#e67e22',  # Carrot
]
INCIDENT_COLOR = '#3498db'
DEATH_COLOR = '#e74c3c'

FIGURE_DPI = 150
