from config.constants import AQI_THRESHOLDS, PM25_THRESHOLDS

# =====================================================
# PM2.5 CATEGORY BANDS (ordered, upper bound inclusive)
# =====================================================

PM25_CATEGORIES = [
    {"max": PM25_THRESHOLDS["good"],         "label": "Good",         "desc": "Low health risk",     "color": "#2ecc71"},
    {"max": PM25_THRESHOLDS["satisfactory"], "label": "Satisfactory", "desc": "Moderate",            "color": "#f1c40f"},
    {"max": PM25_THRESHOLDS["moderate"],     "label": "Moderate",     "desc": "Unhealthy for SG",    "color": "#e67e22"},
    {"max": PM25_THRESHOLDS["poor"],         "label": "Poor",         "desc": "Unhealthy",           "color": "#e74c3c"},
    {"max": PM25_THRESHOLDS["very_poor"],    "label": "Very Poor",    "desc": "Very Unhealthy",      "color": "#8e44ad"},
    {"max": None,                            "label": "Severe",       "desc": "Hazardous",           "color": "#7f0000"},
]

AQI_CATEGORY_COLORS = {
    "Good": "#2ecc71",
    "Moderate": "#f1c40f",
    "Unhealthy (Sensitive)": "#e67e22",
    "Unhealthy": "#e74c3c",
    "Very Unhealthy": "#8e44ad",
    "Hazardous": "#7f0000"
}

UNKNOWN_COLOR = "#95a5a6"


# =====================================================
# PM2.5 VALUE -> CATEGORY
# =====================================================
def get_pm25_category(pm25: float) -> dict:
    """
    Six ordered severity bands. Anything above the last bound
    is Severe, and so is NaN (it fails every <= comparison).
    """
    for band in PM25_CATEGORIES[:-1]:
        if pm25 <= band["max"]:
            return {"label": band["label"], "desc": band["desc"], "color": band["color"]}

    last = PM25_CATEGORIES[-1]
    return {"label": last["label"], "desc": last["desc"], "color": last["color"]}


# =====================================================
# LATEST SNAPSHOT WARNING (4 bands)
# =====================================================
def latest_snapshot_warning(pm25: float) -> dict:
    if pm25 <= PM25_THRESHOLDS["good"]:
        return {
            "warning": "GOOD - Air quality is clean.",
            "impact": "No major health impact.",
            "color": "#2ecc71"
        }
    elif pm25 <= PM25_THRESHOLDS["satisfactory"]:
        return {
            "warning": "MODERATE - Sensitive people may feel discomfort.",
            "impact": "Minor breathing discomfort for sensitive groups.",
            "color": "#f1c40f"
        }
    elif pm25 <= PM25_THRESHOLDS["moderate"]:
        return {
            "warning": "POOR - Breathing irritation likely.",
            "impact": "Coughing, throat irritation, breathing issues.",
            "color": "#e67e22"
        }
    return {
        "warning": "SEVERE - Dangerous for health!",
        "impact": "High risk of asthma, lung stress, chest pain.",
        "color": "#e74c3c"
    }


# =====================================================
# AQI VALUE -> CATEGORY / COLOR
# =====================================================
def aqi_category(aqi: float) -> str:
    if aqi is None:
        return "Unknown"

    try:
        aqi = float(aqi)
    except (TypeError, ValueError):
        return "Unknown"

    if aqi <= AQI_THRESHOLDS["good"]:
        return "Good"
    elif aqi <= AQI_THRESHOLDS["moderate"]:
        return "Moderate"
    elif aqi <= AQI_THRESHOLDS["unhealthy_sensitive"]:
        return "Unhealthy (Sensitive)"
    elif aqi <= AQI_THRESHOLDS["unhealthy"]:
        return "Unhealthy"
    elif aqi <= AQI_THRESHOLDS["very_unhealthy"]:
        return "Very Unhealthy"
    else:
        return "Hazardous"


def aqi_color_from_value(aqi: float) -> str:
    return AQI_CATEGORY_COLORS.get(aqi_category(aqi), UNKNOWN_COLOR)


# =====================================================
# PERSONAL ALERT
# =====================================================
def personal_alert(current_aqi: float, threshold: int, conditions=None):
    """
    Alert payload when AQI reaches the user's threshold, else None.
    """
    if current_aqi < threshold:
        return None

    conditions = conditions or []
    alert = {
        "title": "Health Alert Triggered",
        "message": (
            f"Current AQI ({current_aqi}) has exceeded your personal alert "
            f"threshold of {threshold}."
        ),
        "precautions": None
    }

    if conditions:
        alert["precautions"] = f"Please take extra precautions for: {', '.join(conditions)}."

    return alert
