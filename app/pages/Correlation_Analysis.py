import streamlit as st
import plotly.express as px

from app.app_config import CITY_OPTIONS, default_city_index
from app.services.dataset_service import DatasetService
from config.constants import LAGS, LAG_POLLUTANTS
from eda.statistics import (
    calculate_regression_analysis,
    calculate_pollutant_lag_correlations,
    lag_correlation_matrix,
    correlation_strength,
    pm25_weather_correlations
)

st.set_page_config(
    page_title="Correlation Analysis",
    layout="wide"
)

selection = st.sidebar.selectbox(
    "City to analyze",
    CITY_OPTIONS,
    index=default_city_index(),
    key="selection"
)

st.title("🫁 Historical Health Impact Analysis")
st.caption(f"Pollution vs. respiratory admissions: **{selection}**")

df = DatasetService.get_dataset(selection)

if df.empty:
    st.error("No data available.")
    st.stop()

# -----------------------------
# REGRESSION: SEVERITY ~ AQI
# -----------------------------
stats = calculate_regression_analysis(df)
r = stats["correlation_coefficient"]

c1, c2, c3, c4 = st.columns(4)
c1.metric("Correlation (r)", f"{r:.3f}", delta=f"{correlation_strength(r)} relationship", delta_color="off")
c2.metric("R²", f"{stats['r_squared']:.3f}")
c3.metric("Slope", f"{stats['slope']:.4f}")
c4.metric("Intercept", f"{stats['intercept']:.3f}")

# large datasets are thinned for the scatter only
display_df = df.iloc[::5] if len(df) > 2000 else df

fig = px.scatter(
    display_df,
    x="aqi",
    y="symptom_severity",
    color="city" if df["city"].nunique() > 1 else None,
    opacity=0.5,
    labels={"aqi": "Air Quality Index", "symptom_severity": "Est. Health Impact (Severity /10)"},
    hover_data=["date", "pm2_5", "admissions", "asthma", "copd", "temperature"]
)
fig.update_yaxes(range=[0, 10])
st.plotly_chart(fig, use_container_width=True)

# -----------------------------
# PM2.5 vs WEATHER
# -----------------------------
st.subheader("PM2.5 vs Weather")

weather = pm25_weather_correlations(df)
w1, w2 = st.columns(2)
w1.metric("PM2.5 ~ Temperature", f"{weather['temperature']:.3f}")
w2.metric("PM2.5 ~ Humidity", f"{weather['humidity']:.3f}")

# -----------------------------
# POLLUTANT LAG ANALYSIS
# -----------------------------
st.subheader("Pollutant-Specific Lag Analysis")
st.caption("Correlation between pollutant level and symptom severity N days later")

lag_results = calculate_pollutant_lag_correlations(df, LAG_POLLUTANTS, LAGS)
matrix = lag_correlation_matrix(lag_results)

if matrix.empty:
    st.info("Dataset too short for lag analysis.")
else:
    chart_df = matrix.round(2).reset_index().melt(
        id_vars="lag_days",
        var_name="pollutant",
        value_name="correlation"
    )
    chart_df["lag"] = "Lag " + chart_df["lag_days"].astype(str)

    fig2 = px.bar(
        chart_df,
        x="lag",
        y="correlation",
        color="pollutant",
        barmode="group"
    )
    st.plotly_chart(fig2, use_container_width=True)

    st.dataframe(matrix.style.format("{:.3f}"), use_container_width=True)
