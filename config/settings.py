import os
from dotenv import load_dotenv

# -----------------------------------------------------
# LOAD LOCAL .env IF EXISTS
# -----------------------------------------------------
load_dotenv()  # safe: only affects local dev


def _split_list(raw: str):
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Central configuration for AeroPulse.
    Everything is read from the environment (.env for local dev).
    """

    # ---------------- ENV ----------------
    ENV = os.getenv("AEROPULSE_ENV", "dev")

    # ---------------- DASHBOARD ----------------
    DEFAULT_CITY = os.getenv("DEFAULT_CITY", "Delhi")

    # ---------------- PERSONAL ALERTS ----------------
    ALERT_THRESHOLD = int(os.getenv("ALERT_THRESHOLD", "100"))
    HEALTH_CONDITIONS = _split_list(os.getenv("HEALTH_CONDITIONS", ""))

    # ---------------- OUTPUT ----------------
    EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# ---------------- CREATE INSTANCE ----------------
settings = Settings()

# ---------------- FAIL FAST ----------------
if settings.ENV not in ["dev", "prod"]:
    raise ValueError("AEROPULSE_ENV must be 'dev' or 'prod'")

if settings.ALERT_THRESHOLD <= 0:
    raise ValueError("ALERT_THRESHOLD must be a positive AQI value")

if settings.LOG_LEVEL not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
    raise ValueError(f"Invalid LOG_LEVEL: {settings.LOG_LEVEL}")
