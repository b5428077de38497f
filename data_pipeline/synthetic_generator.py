# =========================================================
# SYNTHETIC CITY DATASET GENERATOR
# ---------------------------------------------------------
# Daily pollutant / weather / health records per city,
# 2019-01-01 .. 2024-12-31, fully deterministic per city.
# ---------------------------------------------------------
# Pass 1: air quality + weather (seasonal + weekly + noise)
# Pass 2: respiratory admissions driven by PM2.5 (3-day lag)
# =========================================================

import math
import pandas as pd

from config.logging import logger
from config.constants import (
    CITIES,
    ALL_CITIES,
    CITY_BASE_PROFILES,
    DEFAULT_PROFILE_CITY,
    DATA_START_DATE,
    DATA_END_DATE,
    DATASET_COLUMNS,
    POLLUTANT_FLOORS,
    HUMIDITY_RANGE,
    AIR_DENSITY_RANGE,
    BASE_ADMISSIONS,
    PM25_SENSITIVITY,
    HEALTH_LAG_DAYS
)
from data_pipeline.seeded_random import SeededRandom, city_seed, random_normal

TWO_PI = 2 * math.pi


# =========================================================
# HELPERS
# =========================================================
def clip(value: float, low: float, high: float = None) -> float:
    v = low if value < low else value
    if high is not None and v > high:
        v = high
    return v


def round_half_up(value: float, ndigits: int = 0):
    """Nearest value, ties rounded up (Python's round() is banker's rounding)."""
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def pm25_to_aqi(pm25: float) -> int:
    """Two-segment US AQI approximation from a PM2.5 concentration."""
    if pm25 <= 12:
        aqi = (50 / 12) * pm25
    elif pm25 <= 35.4:
        aqi = 50 + (49 / 23.3) * (pm25 - 12)
    else:
        aqi = 100 + (49 / 20) * (pm25 - 35.5)
    return round_half_up(aqi)


def get_base_profile(city_name: str) -> dict:
    profile = CITY_BASE_PROFILES.get(city_name)
    if profile is None:
        logger.warning(f"No base profile for '{city_name}', using {DEFAULT_PROFILE_CITY} profile")
        profile = CITY_BASE_PROFILES[DEFAULT_PROFILE_CITY]
    return profile


# =========================================================
# PASS 1: AIR QUALITY + WEATHER
# =========================================================
def _generate_air_and_weather(p: dict, rng: SeededRandom) -> list:
    raw = []

    for ts in pd.date_range(DATA_START_DATE, DATA_END_DATE, freq="D"):
        doy = ts.dayofyear
        dow = (ts.dayofweek + 1) % 7  # Sunday = 0

        seasonal_pm = 20 * math.sin(TWO_PI * (doy + 10) / 365)
        seasonal_temp = 6 * math.sin(TWO_PI * (doy - 80) / 365)
        weekly = 5 * math.sin(TWO_PI * dow / 7)

        # draw order matters: it fixes the whole stream
        noise_pm = random_normal(0, p["pm2_5"] * 0.12, rng)

        pm2_5 = clip(p["pm2_5"] + seasonal_pm + weekly + noise_pm, POLLUTANT_FLOORS["pm2_5"])
        pm10 = clip(p["pm10"] + 0.8 * seasonal_pm + weekly + noise_pm * 0.9, POLLUTANT_FLOORS["pm10"])
        no2 = clip(p["no2"] + 5 * math.sin(TWO_PI * doy / 180) + random_normal(0, 5, rng), POLLUTANT_FLOORS["no2"])
        so2 = clip(p["so2"] + random_normal(0, 1.5, rng), POLLUTANT_FLOORS["so2"])
        co = clip(p["co"] + random_normal(0, 0.1, rng), POLLUTANT_FLOORS["co"])
        o3 = clip(p["o3"] + 6 * math.cos(TWO_PI * doy / 365) + random_normal(0, 2, rng), POLLUTANT_FLOORS["o3"])

        temp = p["temp"] + seasonal_temp + random_normal(0, 1.5, rng)
        hum = clip(
            p["hum"] + 8 * math.sin(TWO_PI * (doy + 50) / 365) + random_normal(0, 5, rng),
            *HUMIDITY_RANGE
        )
        air_density = clip(
            1.225 - (temp - 15) * 0.003 - (hum - 50) * 0.0005 + random_normal(0, 0.002, rng),
            *AIR_DENSITY_RANGE
        )

        raw.append({
            "date": ts,
            "day_of_year": doy,
            "pm2_5": pm2_5,
            "pm10": pm10,
            "no2": no2,
            "so2": so2,
            "co": co,
            "o3": o3,
            "temperature": temp,
            "humidity": hum,
            "air_density": air_density
        })

    return raw


# =========================================================
# PASS 2: HEALTH OUTCOMES
# =========================================================
def _generate_health_records(city_name: str, raw: list, rng: SeededRandom) -> list:
    records = []

    for i, d in enumerate(raw):
        doy = d["day_of_year"]

        # earliest days have no 3-day history: use same-day PM2.5
        pm_lagged = raw[i - HEALTH_LAG_DAYS]["pm2_5"] if i >= HEALTH_LAG_DAYS else d["pm2_5"]

        seasonal_health = 3 * math.sin(TWO_PI * doy / 365)
        temp_factor = max(0, 30 - d["temperature"]) * 0.05
        hum_factor = max(0, d["humidity"] - 80) * 0.02

        adm = BASE_ADMISSIONS + seasonal_health + PM25_SENSITIVITY * pm_lagged + temp_factor + hum_factor
        adm += random_normal(0, 4, rng)
        admissions = round_half_up(clip(adm, 0))

        asthma_factor = clip(0.45 + 0.1 * math.sin(TWO_PI * doy / 365), 0.2, 0.7)
        copd_factor = clip(0.25 + 0.05 * math.cos(TWO_PI * doy / 365), 0.1, 0.5)

        asthma = round_half_up(admissions * asthma_factor)
        copd = round_half_up(admissions * copd_factor)
        bronchitis = max(0, admissions - asthma - copd)

        symptom_severity = min(10.0, round_half_up((admissions / 50) * 5, 1))

        records.append({
            "city": city_name,
            "date": d["date"].strftime("%Y-%m-%d"),
            "aqi": pm25_to_aqi(d["pm2_5"]),
            "pm2_5": round_half_up(d["pm2_5"]),
            "pm10": round_half_up(d["pm10"]),
            "no2": round_half_up(d["no2"], 1),
            "so2": round_half_up(d["so2"], 1),
            "co": round_half_up(d["co"], 2),
            "o3": round_half_up(d["o3"], 1),
            "temperature": round_half_up(d["temperature"], 1),
            "humidity": round_half_up(d["humidity"]),
            "air_density": round_half_up(d["air_density"], 3),
            "admissions": admissions,
            "asthma": asthma,
            "copd": copd,
            "bronchitis": bronchitis,
            "symptom_severity": symptom_severity
        })

    return records


# =========================================================
# PUBLIC API
# =========================================================
def generate_synthetic_city_data(city_name: str) -> pd.DataFrame:
    """
    Six years of daily records for one city.
    Unknown cities are generated from the default profile (never raises).
    """
    profile = get_base_profile(city_name)
    rng = SeededRandom(city_seed(city_name))

    raw = _generate_air_and_weather(profile, rng)
    records = _generate_health_records(city_name, raw, rng)

    df = pd.DataFrame(records, columns=DATASET_COLUMNS)
    logger.info(f"Synthetic dataset generated | city={city_name} | rows={len(df)}")
    return df


def generate_all_cities_data() -> pd.DataFrame:
    """Every city in CITIES, generated independently and stacked in list order."""
    frames = [generate_synthetic_city_data(city) for city in CITIES]
    return pd.concat(frames, ignore_index=True)


def generate_city_dataset(selection: str) -> pd.DataFrame:
    if selection == ALL_CITIES:
        return generate_all_cities_data()
    return generate_synthetic_city_data(selection)


if __name__ == "__main__":
    df = generate_synthetic_city_data(CITIES[0])
    print(df.head(10).to_string(index=False))
    print("Rows:", len(df))
