import streamlit as st
import pandas as pd
import matplotlib.pyplot as plt

from app.app_config import CITY_OPTIONS, default_city_index
from app.services.dataset_service import DatasetService
from app.services.aqi_utils import PM25_CATEGORIES
from eda.statistics import risk_distribution

# =====================================================
# PAGE CONFIG
# =====================================================
st.set_page_config(
    page_title="AQI Trends",
    layout="wide"
)

# =====================================================
# MATPLOTLIB DARK THEME
# =====================================================
plt.rcParams.update({
    "figure.facecolor": "#0f172a",
    "axes.facecolor": "#0f172a",
    "axes.edgecolor": "#334155",
    "axes.labelcolor": "#e5e7eb",
    "text.color": "#e5e7eb",
    "xtick.color": "#cbd5f5",
    "ytick.color": "#cbd5f5",
    "grid.color": "#334155",
    "legend.facecolor": "#0f172a",
    "legend.edgecolor": "#334155"
})

# =====================================================
# HEADER
# =====================================================
selection = st.sidebar.selectbox(
    "City to analyze",
    CITY_OPTIONS,
    index=default_city_index(),
    key="selection"
)

st.title("📊 PM2.5 Trends & History")
st.caption(f"{selection}: last 365 days of synthetic daily data")
st.divider()

# =====================================================
# LOAD DATA
# =====================================================
df = DatasetService.get_recent_records(selection).copy()

if df.empty:
    st.warning("Not enough historical data available.")
    st.stop()

df["date"] = pd.to_datetime(df["date"])

# =====================================================
# PM2.5 TREND CHART (per city)
# =====================================================
st.subheader("PM2.5 Trend")

fig, ax = plt.subplots(figsize=(14, 5))

# PM2.5 category background bands
low = 0
for band in PM25_CATEGORIES[:-1]:
    ax.axhspan(low, band["max"], color=band["color"], alpha=0.12)
    low = band["max"]

for city, group in df.groupby("city", sort=False):
    ax.plot(group["date"], group["pm2_5"], label=city, linewidth=1.2)

    if df["city"].nunique() == 1:
        # 7-day rolling mean only for the single-city view
        rolling = group["pm2_5"].rolling(7).mean()
        ax.plot(group["date"], rolling, label="7-Day Moving Avg", linestyle="--", linewidth=2, color="#1abc9c")

ax.set_ylim(bottom=0, top=max(df["pm2_5"].max() * 1.1, 60))
ax.set_xlabel("Date")
ax.set_ylabel("PM2.5 (µg/m³)")
ax.set_title("PM2.5 Level", fontsize=14, weight="bold")
ax.tick_params(axis='x', rotation=45)
ax.grid(alpha=0.35)
ax.legend()

st.pyplot(fig, use_container_width=True)

st.divider()

# =====================================================
# PM2.5 CATEGORY DISTRIBUTION (full dataset)
# =====================================================
st.subheader("Air Quality Category Distribution (2019-2024)")

distribution = risk_distribution(DatasetService.get_dataset(selection))

labels = [d["label"] for d in distribution]
counts = [d["count"] for d in distribution]
category_colors = {band["label"]: band["color"] for band in PM25_CATEGORIES}
colors = [category_colors[label] for label in labels]

fig2, ax2 = plt.subplots(figsize=(12, 4))

bars = ax2.bar(labels, counts, color=colors, edgecolor="#0f172a")

# VALUE LABELS ON TOP
for bar, d in zip(bars, distribution):
    ax2.text(
        bar.get_x() + bar.get_width() / 2,
        bar.get_height(),
        f"{d['count']} ({d['percent']}%)",
        ha="center",
        va="bottom",
        fontsize=10,
        color="#e5e7eb"
    )

ax2.set_ylabel("Days")
ax2.set_title("PM2.5 Category Distribution", fontsize=14, weight="bold")
ax2.grid(axis='y', alpha=0.35)

st.pyplot(fig2, use_container_width=True)
