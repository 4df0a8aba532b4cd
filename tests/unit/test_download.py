"""
Tests for loading the raw incident CSV
"""

import pandas as pd
import pytest
import requests

from data_engineering.download import download_nypd_shootings
from data_engineering.download.download_nypd_shootings import (
    MalformedDatasetError,
    fetch_incidents,
    load_incidents_csv,
    parse_incidents,
    save_raw,
)
from tests.conftest import RAW_COLUMNS


class FakeResponse:
    def __init__(self, text='', status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error')


class TestParseIncidents:
    def test_parses_all_rows_and_columns(self, raw_csv_text):
        df = parse_incidents(raw_csv_text)
        assert len(df) == 14
        assert list(df.columns) == RAW_COLUMNS

    def test_codes_kept_as_text(self, raw_csv_text):
        df = parse_incidents(raw_csv_text)
        assert df['JURISDICTION_CODE'].dropna().isin(['0', '1', '2']).all()

    def test_blank_jurisdiction_is_missing(self, raw_csv_text):
        df = parse_incidents(raw_csv_text)
        assert df['JURISDICTION_CODE'].isna().sum() == 2

    def test_empty_body_rejected(self):
        with pytest.raises(MalformedDatasetError):
            parse_incidents('   \n')

    def test_missing_required_column_rejected(self, raw_incidents):
        text = raw_incidents.drop(columns=['STATISTICAL_MURDER_FLAG']).to_csv(index=False)
        with pytest.raises(MalformedDatasetError, match='STATISTICAL_MURDER_FLAG'):
            parse_incidents(text)

    def test_non_csv_body_rejected(self):
        with pytest.raises(MalformedDatasetError):
            parse_incidents('<html><body>Service Unavailable</body></html>')

    def test_malformed_is_a_value_error(self):
        assert issubclass(MalformedDatasetError, ValueError)


class TestFetchIncidents:
    def test_downloads_and_parses(self, monkeypatch, raw_csv_text):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(raw_csv_text)

        monkeypatch.setattr(download_nypd_shootings.requests, 'get', fake_get)

        df = fetch_incidents('https://example.test/rows.csv', timeout=5, verbose=False)

        assert calls == [('https://example.test/rows.csv', 5)]
        assert len(df) == 14

    def test_http_error_propagates(self, monkeypatch):
        monkeypatch.setattr(download_nypd_shootings.requests, 'get',
                            lambda url, timeout: FakeResponse(status_code=503))

        with pytest.raises(requests.HTTPError):
            fetch_incidents('https://example.test/rows.csv', verbose=False)

    def test_connection_error_propagates(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.ConnectionError('unreachable')

        monkeypatch.setattr(download_nypd_shootings.requests, 'get', fake_get)

        with pytest.raises(requests.RequestException):
            fetch_incidents('https://example.test/rows.csv', verbose=False)


def test_load_incidents_csv(raw_csv_file):
    df = load_incidents_csv(raw_csv_file)
    assert len(df) == 14


def test_save_raw_writes_snapshot_and_latest(tmp_path, raw_incidents):
    path = save_raw(raw_incidents, tmp_path)

    assert path.exists()
    assert path.name.startswith('nypd_shootings_')
    latest = tmp_path / 'nypd_shootings_latest.csv'
    assert latest.exists()
    assert len(pd.read_csv(latest)) == len(raw_incidents)
