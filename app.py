import streamlit as st

from flight_perf.analyze import analyze
from flight_perf.domain import FlightState
from flight_perf.history import SampleHistory, seed_synthetic_history
from flight_perf.profiles import DEFAULT_AIRCRAFT, PRESET_AIRCRAFT
from flight_perf.render import make_plot_figure
from flight_perf.report import report_to_dict, report_to_frame


# -----------------------------
# Streamlit page setup
# -----------------------------
st.set_page_config(page_title="Flight Performance MFD", layout="wide")
st.title("✈️ Flight Performance MFD")
st.write("Set the aircraft state and get wind, envelope, energy and glide figures.")


# -----------------------------
# Sidebar: aircraft + state
# -----------------------------
with st.sidebar:
    st.header("Aircraft")
    aircraft_name = st.selectbox(
        "Preset",
        options=list(PRESET_AIRCRAFT.keys()),
        index=list(PRESET_AIRCRAFT.keys()).index(DEFAULT_AIRCRAFT),
    )
    limits = PRESET_AIRCRAFT[aircraft_name]
    st.write({"vso_kts": limits.vso_kts, "vne_kts": limits.vne_kts, "mmo": limits.mmo})

    st.divider()
    st.header("Air data")
    tas = st.number_input("TAS (kt)", value=150.0, step=1.0)
    ias = st.number_input("IAS (kt)", value=150.0, step=1.0)
    mach = st.number_input("Mach", value=0.3, step=0.01, format="%.3f")
    heading = st.number_input("Heading (deg)", value=90.0, step=1.0)
    bank = st.slider("Bank (deg)", min_value=-75.0, max_value=75.0, value=0.0, step=1.0)

    st.header("Ground data")
    gs = st.number_input("GS (kt)", value=140.0, step=1.0)
    track = st.number_input("Track (deg)", value=85.0, step=1.0)

    st.header("Vertical")
    altitude = st.number_input("Altitude (ft)", value=10000.0, step=100.0)
    agl = st.number_input("Height AGL (ft)", value=5000.0, step=100.0)
    vs = st.number_input("Vertical speed (fpm)", value=500.0, step=50.0)

    st.divider()
    st.header("IAS history")
    simulate = st.checkbox("Simulate gusty history around IAS", value=True)


history = SampleHistory()
if simulate:
    seed_synthetic_history(history, ias)
else:
    history.extend([ias] * history.capacity)

state = FlightState(
    tas_kts=tas, gs_kts=gs, heading_deg=heading, track_deg=track,
    ias_kts=ias, mach=mach, altitude_ft=altitude, agl_ft=agl,
    vs_fpm=vs, bank_deg=bank,
)


# -----------------------------
# Run analysis
# -----------------------------
result = analyze(state, limits, history)

if not result.ok:
    st.error(f"{result.outcome.name}: {result.message}")
    st.stop()

report = result.value


# -----------------------------
# Display results
# -----------------------------
col1, col2, col3, col4 = st.columns(4)
col1.metric("Wind", f"{report.wind.direction_from:03.0f}° / {report.wind.speed_kts:.0f} kt")
col2.metric("Min margin", f"{report.envelope.min_margin_pct:.1f} %")
col3.metric("Energy", report.energy.trend.value, f"{report.energy.energy_rate_kts:+.1f} kt")
col4.metric("Glide (wind)", f"{report.glide.wind_adjusted_range_nm:.1f} nm")

if report.envelope.is_degenerate:
    st.warning("Bank angle too steep: envelope margins are not meaningful.")

left, right = st.columns([1, 1])
with left:
    st.subheader("Report")
    st.json(report_to_dict(report))
with right:
    st.subheader("Table")
    st.dataframe(report_to_frame(report), use_container_width=True)

st.subheader("Performance plot")
fig = make_plot_figure(history.snapshot(), report, limits)
st.pyplot(fig, clear_figure=True)
