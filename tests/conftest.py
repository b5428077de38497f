import pandas as pd
import pytest

from config.constants import DATASET_COLUMNS
from data_pipeline.synthetic_generator import generate_synthetic_city_data


@pytest.fixture(scope="session")
def delhi_df():
    return generate_synthetic_city_data("Delhi")


def make_records(pm25, severity, city="Testville"):
    """Minimal dataset with the synthetic record layout."""
    rows = []
    for i, (pm, sev) in enumerate(zip(pm25, severity)):
        admissions = int(sev * 10)
        asthma = admissions // 2
        copd = admissions // 4
        rows.append({
            "city": city,
            "date": f"2019-01-{i + 1:02d}",
            "aqi": int(pm * 2),
            "pm2_5": pm,
            "pm10": pm * 2,
            "no2": 20.0 + i,
            "so2": 5.0,
            "co": 0.5,
            "o3": 20.0 - i,
            "temperature": 25.0 + i % 3,
            "humidity": 50 + i,
            "air_density": 1.2,
            "admissions": admissions,
            "asthma": asthma,
            "copd": copd,
            "bronchitis": admissions - asthma - copd,
            "symptom_severity": sev
        })
    return pd.DataFrame(rows, columns=DATASET_COLUMNS)


@pytest.fixture
def small_df():
    return make_records([10, 40, 25, 80, 300], [1.5, 2.0, 2.2, 3.1, 4.0])
