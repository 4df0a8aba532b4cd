"""
Tests for the deaths ~ incidents regression
"""

import numpy as np
import pandas as pd
import pytest

from ml_engineering.evaluation.metrics import evaluate_regressor
from ml_engineering.models.linear_regression import (
    OLSWrapper,
    RegressionSummary,
    fit_deaths_on_incidents,
)


@pytest.fixture
def exact_annual():
    """Deaths are exactly 20% of incidents"""
    return pd.DataFrame({
        'year': [2018, 2019, 2020],
        'total_incidents': [100, 90, 150],
        'total_deaths': [20, 18, 30],
    })


class TestFitDeathsOnIncidents:
    def test_exact_linear_relationship(self, exact_annual):
        model, summary = fit_deaths_on_incidents(exact_annual, verbose=False)

        assert isinstance(model, OLSWrapper)
        assert isinstance(summary, RegressionSummary)
        assert summary.r_squared == pytest.approx(1.0, abs=1e-9)
        assert summary.coefficient == pytest.approx(0.2)
        assert summary.intercept == pytest.approx(0.0, abs=1e-9)
        assert summary.n_obs == 3

    def test_deterministic(self, noisy_annual):
        _, first = fit_deaths_on_incidents(noisy_annual, verbose=False)
        _, second = fit_deaths_on_incidents(noisy_annual.copy(), verbose=False)

        assert first.coefficient == pytest.approx(second.coefficient, rel=1e-12)
        assert first.intercept == pytest.approx(second.intercept, rel=1e-12)
        assert first.r_squared == pytest.approx(second.r_squared, rel=1e-12)

    def test_matches_closed_form(self, noisy_annual):
        _, summary = fit_deaths_on_incidents(noisy_annual, verbose=False)

        slope, intercept = np.polyfit(noisy_annual['total_incidents'], noisy_annual['total_deaths'], 1)
        r = np.corrcoef(noisy_annual['total_incidents'], noisy_annual['total_deaths'])[0, 1]

        assert summary.coefficient == pytest.approx(slope)
        assert summary.intercept == pytest.approx(intercept)
        assert summary.r_squared == pytest.approx(r ** 2)

    def test_strong_positive_relationship_is_significant(self, noisy_annual):
        _, summary = fit_deaths_on_incidents(noisy_annual, verbose=False)
        assert summary.coefficient > 0
        assert summary.r_squared > 0.95
        assert 0 <= summary.p_value < 0.001

    def test_row_order_does_not_matter(self, noisy_annual):
        _, ordered = fit_deaths_on_incidents(noisy_annual, verbose=False)
        _, reversed_ = fit_deaths_on_incidents(noisy_annual.iloc[::-1], verbose=False)
        assert ordered.coefficient == pytest.approx(reversed_.coefficient)

    def test_too_few_years(self, exact_annual):
        with pytest.raises(ValueError, match='at least 3'):
            fit_deaths_on_incidents(exact_annual.head(2), verbose=False)

    def test_summary_to_dict(self, exact_annual):
        _, summary = fit_deaths_on_incidents(exact_annual, verbose=False)
        assert set(summary.to_dict()) == {'coefficient', 'intercept', 'r_squared', 'p_value', 'n_obs'}


class TestOLSWrapper:
    def test_predict(self, exact_annual):
        model, _ = fit_deaths_on_incidents(exact_annual, verbose=False)
        np.testing.assert_allclose(model.predict([50, 200]), [10.0, 40.0], atol=1e-8)

    def test_predict_scalar(self, exact_annual):
        model, _ = fit_deaths_on_incidents(exact_annual, verbose=False)
        np.testing.assert_allclose(model.predict(120), [24.0], atol=1e-8)

    def test_params(self, exact_annual):
        model, _ = fit_deaths_on_incidents(exact_annual, verbose=False)
        np.testing.assert_allclose(model.get_params(), [0.0, 0.2], atol=1e-8)

    def test_summary_text(self, noisy_annual):
        model, _ = fit_deaths_on_incidents(noisy_annual, verbose=False)
        text = model.summary_text()
        assert 'OLS Regression Results' in text
        assert 'R-squared' in text


def test_evaluate_regressor(noisy_annual):
    model, summary = fit_deaths_on_incidents(noisy_annual, verbose=False)
    metrics = evaluate_regressor(model, noisy_annual['total_incidents'],
                                 noisy_annual['total_deaths'], verbose=False)

    assert metrics['r2'] == pytest.approx(summary.r_squared)
    assert metrics['rmse'] >= 0
    assert metrics['mae'] <= metrics['rmse'] + 1e-12
    assert metrics['max_abs_residual'] >= metrics['mae']
