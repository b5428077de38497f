# =========================================================
# CORRELATION / REGRESSION ANALYSIS
# ---------------------------------------------------------
# Works on any dataset with the synthetic record layout
# (DataFrame or list of dicts). Never raises on degenerate
# input: empty / mismatched / constant series give 0.
# =========================================================

import numpy as np
import pandas as pd

from config.constants import LAGS
from app.services.aqi_utils import PM25_CATEGORIES, get_pm25_category
from data_pipeline.synthetic_generator import round_half_up


def _as_frame(data) -> pd.DataFrame:
    if isinstance(data, pd.DataFrame):
        return data
    return pd.DataFrame(list(data))


def _column(df: pd.DataFrame, field: str) -> np.ndarray:
    if field not in df.columns:
        raise ValueError(f"Unknown dataset field: {field}")
    return df[field].to_numpy(dtype=float)


# =========================================================
# PEARSON
# =========================================================
def pearson_correlation(x, y) -> float:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    n = len(x)
    if n == 0 or n != len(y):
        return 0.0

    x_diff = x - x.mean()
    y_diff = y - y.mean()

    num = np.sum(x_diff * y_diff)
    den_x = np.sum(x_diff * x_diff)
    den_y = np.sum(y_diff * y_diff)

    if den_x == 0 or den_y == 0:
        return 0.0

    return float(np.clip(num / np.sqrt(den_x * den_y), -1.0, 1.0))


# =========================================================
# REGRESSION: SYMPTOM SEVERITY ~ AQI
# =========================================================
def calculate_regression_analysis(data) -> dict:
    """
    Ordinary least squares of symptom severity on AQI.

    Returns slope, intercept, r_squared and the Pearson coefficient.
    All zeros for an empty dataset.
    """
    df = _as_frame(data)
    if len(df) == 0:
        return {"slope": 0.0, "intercept": 0.0, "r_squared": 0.0, "correlation_coefficient": 0.0}

    x = _column(df, "aqi")
    y = _column(df, "symptom_severity")

    r = pearson_correlation(x, y)

    x_mean = x.mean()
    y_mean = y.mean()
    den = np.sum((x - x_mean) ** 2)
    slope = 0.0 if den == 0 else float(np.sum((x - x_mean) * (y - y_mean)) / den)
    intercept = float(y_mean - slope * x_mean)

    return {
        "slope": slope,
        "intercept": intercept,
        "r_squared": r * r,
        "correlation_coefficient": r
    }


# =========================================================
# LAGGED CORRELATIONS
# =========================================================
def calculate_pollutant_lag_correlations(data, pollutants, lags=LAGS) -> list:
    """
    Correlation of each pollutant with symptom severity `lag` days later.

    For a dataset of n rows, pollutant rows [0, n - lag) are paired with
    severity rows [lag, n). Pairs with lag >= n cannot be aligned and are
    left out of the result (no placeholder entry).
    """
    df = _as_frame(data)
    n = len(df)
    results = []
    if n == 0:
        return results

    health = _column(df, "symptom_severity")

    for pollutant in pollutants:
        values = _column(df, pollutant)

        for lag in lags:
            if lag < 0 or lag >= n:
                continue

            x = values[0:n - lag]
            y = health[lag:n]

            results.append({
                "pollutant": pollutant,
                "lag_days": lag,
                "correlation": pearson_correlation(x, y)
            })

    return results


def lag_correlation_matrix(results) -> pd.DataFrame:
    """Pivot lag results into a lag x pollutant table (for grouped bar charts)."""
    if not results:
        return pd.DataFrame()

    df = pd.DataFrame(results)
    matrix = df.pivot(index="lag_days", columns="pollutant", values="correlation")
    matrix.columns.name = None
    return matrix.sort_index()


# =========================================================
# SUPPORTING SUMMARIES
# =========================================================
def correlation_strength(r: float) -> str:
    abs_r = abs(r)
    if abs_r > 0.7:
        return "Strong"
    elif abs_r > 0.5:
        return "Moderate"
    elif abs_r > 0.3:
        return "Weak"
    return "Negligible"


def pm25_weather_correlations(data) -> dict:
    df = _as_frame(data)
    if len(df) == 0:
        return {"temperature": 0.0, "humidity": 0.0}

    pm25 = _column(df, "pm2_5")
    return {
        "temperature": pearson_correlation(pm25, _column(df, "temperature")),
        "humidity": pearson_correlation(pm25, _column(df, "humidity"))
    }


def risk_distribution(data) -> list:
    """
    Days per PM2.5 category, in band order.
    Categories with no days are omitted.
    """
    df = _as_frame(data)
    total = len(df)
    if total == 0:
        return []

    labels = df["pm2_5"].apply(lambda v: get_pm25_category(v)["label"])
    counts = labels.value_counts()

    distribution = []
    for category in PM25_CATEGORIES:
        count = int(counts.get(category["label"], 0))
        if count == 0:
            continue
        distribution.append({
            "label": category["label"],
            "count": count,
            "percent": round_half_up(count / total * 100, 1)
        })

    return distribution
