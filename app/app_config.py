from config.settings import settings
from config.constants import CITIES, ALL_CITIES

APP_CONFIG = {
    "title": "AeroPulse",
    "icon": "🌫️",
    "layout": "wide",
    "initial_sidebar_state": "expanded",
}

CITY_OPTIONS = CITIES + [ALL_CITIES]

USER_PROFILE = {
    "threshold": settings.ALERT_THRESHOLD,
    "conditions": settings.HEALTH_CONDITIONS
}


def default_city_index() -> int:
    if settings.DEFAULT_CITY in CITY_OPTIONS:
        return CITY_OPTIONS.index(settings.DEFAULT_CITY)
    return 0
