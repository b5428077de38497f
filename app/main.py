import streamlit as st

from app.app_config import APP_CONFIG, CITY_OPTIONS, USER_PROFILE, default_city_index
from app.services.dataset_service import DatasetService
from app.services.aqi_utils import (
    aqi_category,
    aqi_color_from_value,
    get_pm25_category,
    latest_snapshot_warning,
    personal_alert
)
from config.constants import ALL_CITIES
from data_pipeline.build_city_report import build_city_report, get_presentation_bullets
from eda.export_city_dataset import dataset_to_csv, export_filename

# =====================================================
# PAGE CONFIG
# =====================================================
st.set_page_config(
    page_title=APP_CONFIG["title"],
    page_icon=APP_CONFIG["icon"],
    layout=APP_CONFIG["layout"],
    initial_sidebar_state=APP_CONFIG["initial_sidebar_state"]
)

# =====================================================
# HELPERS
# =====================================================
def safe_round(val, n=2):
    try:
        return round(float(val), n)
    except (TypeError, ValueError):
        return None


def chip(label: str, bg: str):
    """Small colored chip (safe HTML, never breaks)."""
    if not label:
        label = "Unknown"
    if not bg:
        bg = "#95a5a6"
    return f"""
    <span style="
        display:inline-block;
        padding:6px 12px;
        border-radius:999px;
        font-size:14px;
        font-weight:700;
        background:{bg};
        color:white;
    ">
        {label}
    </span>
    """

# =====================================================
# CITY SELECTION
# =====================================================
selection = st.sidebar.selectbox(
    "City to analyze",
    CITY_OPTIONS,
    index=default_city_index(),
    key="selection"
)

# =====================================================
# HEADER
# =====================================================
st.title("🌫️ AeroPulse")
st.caption(f"Synthetic air quality & respiratory health data: **{selection}** (2019-2024)")
st.divider()

# =====================================================
# LOAD DATA
# =====================================================
df = DatasetService.get_dataset(selection)
latest = DatasetService.get_latest_record(selection)

if not latest:
    st.error("❌ No data generated for this selection.")
    st.stop()

# =====================================================
# LATEST SNAPSHOT
# =====================================================
col1, col2 = st.columns([1.2, 1])

with col1:
    st.subheader(f"📍 {latest['city']} | {latest['date']}")

    current_aqi = latest["aqi"]
    st.metric("AQI", current_aqi)
    st.markdown(chip(aqi_category(current_aqi), aqi_color_from_value(current_aqi)), unsafe_allow_html=True)

    m1, m2 = st.columns(2)
    with m1:
        st.metric("PM2.5 (µg/m³)", latest["pm2_5"])
        st.metric("Temperature (°C)", safe_round(latest["temperature"], 1))
    with m2:
        st.metric("Humidity (%)", latest["humidity"])
        st.metric("Air Density (kg/m³)", safe_round(latest["air_density"], 3))

with col2:
    st.subheader("Warning Analysis")

    category = get_pm25_category(latest["pm2_5"])
    st.markdown(chip(category["label"], category["color"]), unsafe_allow_html=True)
    st.caption(category["desc"])

    warning = latest_snapshot_warning(latest["pm2_5"])
    st.markdown(f"**{warning['warning']}**")
    st.write(warning["impact"])

# =====================================================
# PERSONAL ALERT
# =====================================================
alert = personal_alert(current_aqi, USER_PROFILE["threshold"], USER_PROFILE["conditions"])
if alert:
    msg = f"**{alert['title']}**\n\n{alert['message']}"
    if alert["precautions"]:
        msg += f"\n\n{alert['precautions']}"
    st.warning(msg)

st.divider()

# =====================================================
# DOWNLOADS
# =====================================================
st.subheader("📥 Downloads")

d1, d2 = st.columns(2)

with d1:
    st.download_button(
        "Download dataset (CSV)",
        data=dataset_to_csv(df),
        file_name=export_filename(selection, "merged.csv"),
        mime="text/csv"
    )

with d2:
    if selection != ALL_CITIES:
        st.download_button(
            "Download auto report (Markdown)",
            data=build_city_report(selection),
            file_name=export_filename(selection, "auto_report.md"),
            mime="text/markdown"
        )

# =====================================================
# PRESENTATION BULLETS
# =====================================================
if selection != ALL_CITIES:
    st.divider()
    st.subheader("🗒️ Presentation Notes")
    for bullet in get_presentation_bullets(selection):
        st.markdown(bullet)

st.caption(f"Rows in dataset: {len(df)}")
