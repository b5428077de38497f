# =========================================================
# DATASET SANITY CHECK
# ---------------------------------------------------------
# Generates: one city (or "All Cities") synthetic dataset
# Validates:
# - schema (all DATASET_COLUMNS present)
# - one row per day per city, full date range
# - humidity / air density ranges
# - pollutant floors
# - admissions >= 0 and sub-counts add up
# - AQI >= 0, severity in [0, 10]
# =========================================================

import sys
import pandas as pd

from config.logging import logger
from config.settings import settings
from config.constants import (
    DATASET_COLUMNS,
    POLLUTANT_FLOORS,
    HUMIDITY_RANGE,
    AIR_DENSITY_RANGE,
    DATA_START_DATE,
    DATA_END_DATE
)
from data_pipeline.synthetic_generator import generate_city_dataset


# =========================================================
# CHECKS
# =========================================================
def validate_schema(df: pd.DataFrame):
    missing = [c for c in DATASET_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required dataset columns: {missing}")


def validate_date_coverage(df: pd.DataFrame):
    expected = len(pd.date_range(DATA_START_DATE, DATA_END_DATE, freq="D"))

    for city, group in df.groupby("city", sort=False):
        if len(group) != expected:
            raise ValueError(f"{city}: expected {expected} daily rows, found {len(group)}")
        if group["date"].duplicated().any():
            raise ValueError(f"{city}: duplicate dates found")
        if not group["date"].is_monotonic_increasing:
            raise ValueError(f"{city}: dates are not in chronological order")


def validate_ranges(df: pd.DataFrame):
    low, high = HUMIDITY_RANGE
    if not df["humidity"].between(low, high).all():
        raise ValueError(f"Humidity outside [{low}, {high}]")

    low, high = AIR_DENSITY_RANGE
    if not df["air_density"].between(low, high).all():
        raise ValueError(f"Air density outside [{low}, {high}]")

    for pollutant, floor in POLLUTANT_FLOORS.items():
        if (df[pollutant] < floor).any():
            raise ValueError(f"{pollutant} below configured floor {floor}")

    if (df["aqi"] < 0).any():
        raise ValueError("Negative AQI values found")

    if not df["symptom_severity"].between(0, 10).all():
        raise ValueError("Symptom severity outside [0, 10]")


def validate_health_counts(df: pd.DataFrame):
    if (df["admissions"] < 0).any():
        raise ValueError("Negative admission counts found")

    for col in ["asthma", "copd", "bronchitis"]:
        if (df[col] < 0).any() or (df[col] > df["admissions"]).any():
            raise ValueError(f"{col} count outside [0, admissions]")

    total = df["asthma"] + df["copd"] + df["bronchitis"]
    if not (total == df["admissions"]).all():
        bad_rows = int((total != df["admissions"]).sum())
        raise ValueError(f"asthma + copd + bronchitis != admissions in {bad_rows} rows")


def validate_dataset(df: pd.DataFrame):
    validate_schema(df)
    validate_date_coverage(df)
    validate_ranges(df)
    validate_health_counts(df)


# =========================================================
# MAIN PIPELINE
# =========================================================
def run_sanity_check(selection: str) -> dict:
    logger.info(f"========== DATASET SANITY CHECK STARTED | {selection} ==========")

    df = generate_city_dataset(selection)
    validate_dataset(df)

    summary = {
        "selection": selection,
        "rows": len(df),
        "cities": df["city"].nunique(),
        "first_date": df["date"].min(),
        "last_date": df["date"].max(),
        "mean_aqi": round(float(df["aqi"].mean()), 2),
        "mean_admissions": round(float(df["admissions"].mean()), 2)
    }

    logger.info(f"========== DATASET SANITY CHECK PASSED | ROWS={len(df)} ==========")
    return summary


# =========================================================
# RUN
# =========================================================
if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else settings.DEFAULT_CITY
    summary = run_sanity_check(target)

    print("\n===== DATASET SANITY SUMMARY =====")
    for k, v in summary.items():
        print(f"{k}: {v}")
    print("==================================")
