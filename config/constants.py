# =========================
# CITIES & BASE PROFILES
# =========================

CITIES = [
    "Delhi",
    "Mumbai",
    "Kolkata",
    "Bengaluru",
    "Chennai",
    "Hyderabad",
    "Pune",
    "Aurangabad"
]

ALL_CITIES = "All Cities"

# Mean levels the synthetic generator oscillates around.
CITY_BASE_PROFILES = {
    "Delhi":      {"pm2_5": 70, "pm10": 150, "no2": 55, "so2": 10, "co": 0.9, "o3": 20, "temp": 25, "hum": 45},
    "Mumbai":     {"pm2_5": 40, "pm10": 80,  "no2": 35, "so2": 6,  "co": 0.6, "o3": 18, "temp": 27, "hum": 70},
    "Kolkata":    {"pm2_5": 55, "pm10": 110, "no2": 45, "so2": 8,  "co": 0.8, "o3": 22, "temp": 26, "hum": 65},
    "Bengaluru":  {"pm2_5": 30, "pm10": 60,  "no2": 25, "so2": 4,  "co": 0.5, "o3": 25, "temp": 24, "hum": 60},
    "Chennai":    {"pm2_5": 35, "pm10": 70,  "no2": 30, "so2": 5,  "co": 0.6, "o3": 28, "temp": 28, "hum": 75},
    "Hyderabad":  {"pm2_5": 45, "pm10": 90,  "no2": 30, "so2": 6,  "co": 0.7, "o3": 24, "temp": 26, "hum": 60},
    "Pune":       {"pm2_5": 30, "pm10": 60,  "no2": 20, "so2": 3,  "co": 0.4, "o3": 20, "temp": 25, "hum": 55},
    "Aurangabad": {"pm2_5": 29, "pm10": 70,  "no2": 25, "so2": 2,  "co": 0.6, "o3": 18, "temp": 27, "hum": 51},
}

DEFAULT_PROFILE_CITY = "Delhi"

# =========================
# DATA CONFIG
# =========================

DATA_START_DATE = "2019-01-01"
DATA_END_DATE = "2024-12-31"

LAGS = [0, 1, 3, 7, 14]
LAG_POLLUTANTS = ["pm2_5", "no2", "o3"]

# =========================
# HEALTH MODEL
# =========================

BASE_ADMISSIONS = 20
PM25_SENSITIVITY = 0.03
HEALTH_LAG_DAYS = 3

# =========================
# DATASET SCHEMA
# =========================

POLLUTANT_FEATURES = [
    "pm2_5",
    "pm10",
    "no2",
    "so2",
    "co",
    "o3"
]

WEATHER_FEATURES = [
    "temperature",
    "humidity",
    "air_density"
]

HEALTH_FEATURES = [
    "admissions",
    "asthma",
    "copd",
    "bronchitis",
    "symptom_severity"
]

DATASET_COLUMNS = ["city", "date", "aqi"] + POLLUTANT_FEATURES + WEATHER_FEATURES + HEALTH_FEATURES

# Column order of the CSV export (air_density is written as "density")
EXPORT_COLUMNS = [
    "city", "date", "pm2_5", "pm10", "no2", "so2", "co", "o3",
    "temperature", "humidity", "density",
    "admissions", "asthma", "copd", "bronchitis"
]

POLLUTANT_FLOORS = {
    "pm2_5": 2,
    "pm10": 5,
    "no2": 2,
    "so2": 0.5,
    "co": 0.1,
    "o3": 1
}

HUMIDITY_RANGE = (10, 100)
AIR_DENSITY_RANGE = (0.9, 1.3)

# =========================
# PM2.5 CATEGORY BANDS
# =========================

PM25_THRESHOLDS = {
    "good": 30,
    "satisfactory": 60,
    "moderate": 90,
    "poor": 120,
    "very_poor": 250
}

# =========================
# US AQI THRESHOLDS (dashboard bands)
# =========================

AQI_THRESHOLDS = {
    "good": 50,
    "moderate": 100,
    "unhealthy_sensitive": 150,
    "unhealthy": 200,
    "very_unhealthy": 300,
    "hazardous": 500
}
