import numpy as np
import pytest
from sklearn.linear_model import LinearRegression

from conftest import make_records
from eda.statistics import (
    calculate_pollutant_lag_correlations,
    calculate_regression_analysis,
    correlation_strength,
    lag_correlation_matrix,
    pearson_correlation,
    pm25_weather_correlations,
    risk_distribution
)


# =====================================================
# PEARSON
# =====================================================
def test_pearson_degenerate_inputs_are_zero():
    assert pearson_correlation([], []) == 0
    assert pearson_correlation([5, 5, 5], [1, 2, 3]) == 0
    assert pearson_correlation([1, 2, 3], [4, 4, 4]) == 0
    assert pearson_correlation([1, 2, 3], [1, 2]) == 0


def test_pearson_perfect_relationships():
    assert pearson_correlation([1, 2, 3, 4], [2, 4, 6, 8]) == pytest.approx(1.0)
    assert pearson_correlation([1, 2, 3, 4], [8, 6, 4, 2]) == pytest.approx(-1.0)


def test_pearson_symmetric_and_bounded():
    rng = np.random.default_rng(7)
    for _ in range(20):
        x = rng.normal(size=50)
        y = 0.3 * x + rng.normal(size=50)
        r = pearson_correlation(x, y)
        assert r == pytest.approx(pearson_correlation(y, x))
        assert -1 <= r <= 1
        assert r == pytest.approx(np.corrcoef(x, y)[0, 1])


# =====================================================
# REGRESSION
# =====================================================
def test_regression_empty_dataset_is_all_zero():
    result = calculate_regression_analysis([])
    assert result == {"slope": 0.0, "intercept": 0.0, "r_squared": 0.0, "correlation_coefficient": 0.0}


def test_regression_exact_line():
    df = make_records([10, 20, 30, 40], [0, 0, 0, 0])
    df["aqi"] = [10, 20, 30, 40]
    df["symptom_severity"] = [2.0, 4.0, 6.0, 8.0]

    result = calculate_regression_analysis(df)
    assert result["slope"] == pytest.approx(0.2)
    assert result["intercept"] == pytest.approx(0.0, abs=1e-12)
    assert result["correlation_coefficient"] == pytest.approx(1.0)
    assert result["r_squared"] == pytest.approx(1.0)


def test_regression_constant_aqi_has_zero_slope(small_df):
    small_df["aqi"] = 50
    result = calculate_regression_analysis(small_df)
    assert result["slope"] == 0
    assert result["correlation_coefficient"] == 0
    assert result["intercept"] == pytest.approx(small_df["symptom_severity"].mean())


def test_regression_matches_sklearn(delhi_df):
    result = calculate_regression_analysis(delhi_df)

    model = LinearRegression().fit(delhi_df[["aqi"]], delhi_df["symptom_severity"])
    assert result["slope"] == pytest.approx(model.coef_[0])
    assert result["intercept"] == pytest.approx(model.intercept_)
    assert result["r_squared"] == pytest.approx(result["correlation_coefficient"] ** 2)


def test_delhi_aqi_drives_severity(delhi_df):
    result = calculate_regression_analysis(delhi_df)
    assert result["correlation_coefficient"] > 0
    assert result["slope"] > 0


def test_regression_accepts_list_of_records(small_df):
    records = small_df.to_dict("records")
    assert calculate_regression_analysis(records) == calculate_regression_analysis(small_df)


# =====================================================
# LAG CORRELATIONS
# =====================================================
def test_lags_at_or_beyond_length_are_omitted(small_df):
    results = calculate_pollutant_lag_correlations(small_df, ["pm2_5"], [0, 1, 3, 7, 14])
    assert [r["lag_days"] for r in results] == [0, 1, 3]
    assert all(r["pollutant"] == "pm2_5" for r in results)


def test_lag_equal_to_length_is_omitted(small_df):
    n = len(small_df)
    results = calculate_pollutant_lag_correlations(small_df, ["pm2_5"], [n - 1, n])
    assert [r["lag_days"] for r in results] == [n - 1]
    # a single aligned pair has no variance
    assert results[0]["correlation"] == 0


def test_results_ordered_pollutant_then_lag(small_df):
    results = calculate_pollutant_lag_correlations(small_df, ["pm2_5", "no2"], [0, 1])
    assert [(r["pollutant"], r["lag_days"]) for r in results] == [
        ("pm2_5", 0), ("pm2_5", 1), ("no2", 0), ("no2", 1)
    ]


def test_lag_alignment_pairs_past_exposure_with_later_severity():
    pm25 = [5, 40, 12, 90, 33, 61, 7, 80]
    # severity today mirrors PM2.5 from two days earlier
    severity = [1.0, 1.0] + [p / 10 for p in pm25[:-2]]
    df = make_records(pm25, severity)

    results = {r["lag_days"]: r["correlation"]
               for r in calculate_pollutant_lag_correlations(df, ["pm2_5"], [0, 2])}

    assert results[2] == pytest.approx(1.0)
    assert results[0] < 0.9


def test_lag_zero_equals_plain_pearson(delhi_df):
    results = calculate_pollutant_lag_correlations(delhi_df, ["pm2_5"], [0])
    assert results[0]["correlation"] == pytest.approx(
        pearson_correlation(delhi_df["pm2_5"], delhi_df["symptom_severity"])
    )


def test_empty_dataset_has_no_lag_results():
    assert calculate_pollutant_lag_correlations([], ["pm2_5"], [0, 1]) == []


def test_unknown_field_rejected(small_df):
    with pytest.raises(ValueError, match="Unknown dataset field"):
        calculate_pollutant_lag_correlations(small_df, ["benzene"], [0])


def test_lag_correlation_matrix(delhi_df):
    results = calculate_pollutant_lag_correlations(delhi_df, ["pm2_5", "no2", "o3"], [0, 1, 3, 7, 14])
    matrix = lag_correlation_matrix(results)

    assert list(matrix.index) == [0, 1, 3, 7, 14]
    assert sorted(matrix.columns) == ["no2", "o3", "pm2_5"]
    assert matrix.loc[3, "pm2_5"] == pytest.approx(
        next(r["correlation"] for r in results if r["pollutant"] == "pm2_5" and r["lag_days"] == 3)
    )
    assert lag_correlation_matrix([]).empty


# =====================================================
# SUMMARIES
# =====================================================
@pytest.mark.parametrize("r, label", [
    (0.9, "Strong"),
    (-0.75, "Strong"),
    (0.6, "Moderate"),
    (0.4, "Weak"),
    (0.3, "Negligible"),
    (0.0, "Negligible"),
])
def test_correlation_strength(r, label):
    assert correlation_strength(r) == label


def test_risk_distribution(small_df):
    distribution = risk_distribution(small_df)
    assert distribution == [
        {"label": "Good", "count": 2, "percent": 40.0},
        {"label": "Satisfactory", "count": 1, "percent": 20.0},
        {"label": "Moderate", "count": 1, "percent": 20.0},
        {"label": "Severe", "count": 1, "percent": 20.0},
    ]
    assert risk_distribution([]) == []


def test_risk_distribution_rounds_ties_up():
    # 1 of 16 days is exactly 6.25 percent
    df = make_records([10] * 15 + [300], [2.0] * 16)
    distribution = risk_distribution(df)
    assert distribution == [
        {"label": "Good", "count": 15, "percent": 93.8},
        {"label": "Severe", "count": 1, "percent": 6.3},
    ]


def test_pm25_weather_correlations(delhi_df):
    result = pm25_weather_correlations(delhi_df)
    assert set(result) == {"temperature", "humidity"}
    for value in result.values():
        assert -1 <= value <= 1
    assert pm25_weather_correlations([]) == {"temperature": 0.0, "humidity": 0.0}
