"""
Shared fixtures: a small raw incident table shaped like the NYC Open Data export
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from data_engineering.download.download_nypd_shootings import parse_incidents

RAW_COLUMNS = [
    'INCIDENT_KEY', 'OCCUR_DATE', 'OCCUR_TIME', 'BORO', 'LOC_OF_OCCUR_DESC',
    'PRECINCT', 'JURISDICTION_CODE', 'LOC_CLASSFCTN_DESC', 'LOCATION_DESC',
    'STATISTICAL_MURDER_FLAG', 'PERP_AGE_GROUP', 'PERP_SEX', 'PERP_RACE',
    'VIC_AGE_GROUP', 'VIC_SEX', 'VIC_RACE', 'X_COORD_CD', 'Y_COORD_CD',
    'Latitude', 'Longitude', 'Lon_Lat',
]

# (date, borough, jurisdiction, murder flag, victim race, victim sex)
INCIDENT_ROWS = [
    ('01/15/2018', 'BRONX', '0', 'true', 'BLACK', 'M'),
    ('03/02/2018', 'BROOKLYN', '0', 'false', 'BLACK', 'M'),
    ('07/21/2018', 'BROOKLYN', '2', 'false', 'WHITE HISPANIC', 'F'),
    ('12/31/2018', 'QUEENS', '0', 'false', 'BLACK HISPANIC', 'M'),
    ('02/11/2019', 'BRONX', '0', 'true', 'BLACK', 'M'),
    ('05/05/2019', 'MANHATTAN', '1', 'true', 'WHITE', 'M'),
    ('08/19/2019', 'BRONX', '0', 'false', 'BLACK', 'F'),
    ('09/09/2019', 'BROOKLYN', '', 'true', 'BLACK', 'M'),
    ('01/01/2020', 'STATEN ISLAND', '0', 'true', 'WHITE', 'M'),
    ('04/14/2020', 'BROOKLYN', '0', 'false', 'BLACK', 'M'),
    ('06/30/2020', 'BROOKLYN', '2', 'false', 'BLACK', 'M'),
    ('10/10/2020', 'QUEENS', '0', 'false', 'ASIAN / PACIFIC ISLANDER', 'F'),
    ('11/11/2020', 'BRONX', '0', 'false', 'BLACK', 'M'),
    ('12/25/2020', 'MANHATTAN', '', 'false', 'BLACK', 'M'),
]

# After dropping the two rows without a jurisdiction code
EXPECTED_ANNUAL = {
    2018: (4, 1),
    2019: (3, 2),
    2020: (5, 1),
}


def make_raw_rows(rows=INCIDENT_ROWS):
    records = []
    for i, (date, boro, jurisdiction, flag, vic_race, vic_sex) in enumerate(rows):
        records.append({
            'INCIDENT_KEY': str(200000000 + i),
            'OCCUR_DATE': date,
            'OCCUR_TIME': '21:30:00',
            'BORO': boro,
            'LOC_OF_OCCUR_DESC': '',
            'PRECINCT': str(40 + i % 5),
            'JURISDICTION_CODE': jurisdiction,
            'LOC_CLASSFCTN_DESC': '',
            'LOCATION_DESC': 'MULTI DWELL - PUBLIC HOUS' if i % 3 == 0 else '',
            'STATISTICAL_MURDER_FLAG': flag,
            'PERP_AGE_GROUP': '18-24' if i % 2 == 0 else '',
            'PERP_SEX': 'M' if i % 2 == 0 else '',
            'PERP_RACE': 'BLACK' if i % 2 == 0 else '',
            'VIC_AGE_GROUP': '25-44',
            'VIC_SEX': vic_sex,
            'VIC_RACE': vic_race,
            'X_COORD_CD': '1006343',
            'Y_COORD_CD': '234270',
            'Latitude': '40.8',
            'Longitude': '-73.9',
            'Lon_Lat': 'POINT (-73.9 40.8)',
        })
    return pd.DataFrame(records, columns=RAW_COLUMNS)


@pytest.fixture
def raw_csv_text():
    """CSV body as served by the open data portal"""
    return make_raw_rows().to_csv(index=False)


@pytest.fixture
def raw_incidents(raw_csv_text):
    """Raw incidents parsed the same way as a download"""
    return parse_incidents(raw_csv_text)


@pytest.fixture
def raw_csv_file(tmp_path, raw_csv_text):
    path = tmp_path / 'nypd_shootings_latest.csv'
    path.write_text(raw_csv_text, encoding='utf-8')
    return path


@pytest.fixture
def clean_df(raw_incidents):
    from data_engineering.clean.clean_incidents import clean_incidents
    return clean_incidents(raw_incidents, verbose=False)


@pytest.fixture
def annual_df(clean_df):
    from data_engineering.datasets.build_annual_summary import summarize_by_year
    return summarize_by_year(clean_df, verbose=False)


@pytest.fixture
def noisy_annual():
    """Ten years of annual totals with a roughly 19% death rate"""
    incidents = [1500, 1700, 1800, 1650, 1400, 1300, 1000, 950, 1900, 2000]
    deaths = [290, 330, 335, 320, 265, 250, 195, 185, 370, 380]
    return pd.DataFrame({
        'year': list(range(2011, 2021)),
        'total_incidents': incidents,
        'total_deaths': deaths,
    })
