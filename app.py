"""Assessment results — Streamlit entry point.

Individual report lookup and CSV export. Department analytics live in
``pages/1_📊_Department_Insights.py``.
"""

from __future__ import annotations

from disc_insights.config import configure_logging, get_data_path
from disc_insights.disc_types import TRAIT_NAMES, TRAITS
from disc_insights.export import profiles_to_csv
from disc_insights.insights import InsightsService
from disc_insights.profile_repository import DataAccessError, ProfileRepository
import plotly.graph_objects as go  # type: ignore[import-untyped]
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

st.set_page_config(page_title="DISC Results", page_icon="🧭", layout="wide")
st.title("🧭 DISC & Driving Forces Results")

configure_logging()
_REPO = ProfileRepository(get_data_path())
_SERVICE = InsightsService(_REPO)


# ---------------------------------------------------------------------------
# Individual report
# ---------------------------------------------------------------------------
profile_id = st.number_input("Result ID", min_value=1, step=1)
try:
    report = _SERVICE.individual_report(int(profile_id))
except DataAccessError as exc:
    st.error(f"Results are currently unavailable: {exc}")
    st.stop()

if report is None:
    st.info("No result with that ID.")
else:
    p = report.profile
    st.subheader(f"{p.name} — {p.department}")
    st.caption(
        f"Natural: {p.primary_natural.value} ({TRAIT_NAMES[p.primary_natural]}) · "
        f"Adaptive: {p.primary_adaptive.value} ({TRAIT_NAMES[p.primary_adaptive]})"
    )

    fig = go.Figure()
    fig.add_trace(go.Bar(name="Natural", x=[t.value for t in TRAITS], y=[p.natural.get(t) for t in TRAITS]))
    fig.add_trace(go.Bar(name="Adaptive", x=[t.value for t in TRAITS], y=[p.adaptive.get(t) for t in TRAITS]))
    fig.update_layout(barmode="group", yaxis_range=[0, 100], height=340)
    st.plotly_chart(fig, use_container_width=True)

    if report.is_shifter:
        st.warning("Primary style shifts under pressure.")
    st.dataframe([s.model_dump() for s in report.shifts], hide_index=True, use_container_width=True)

    df = report.driving_forces
    if df is not None:
        st.subheader("Driving Forces")
        st.write(", ".join(f"{m.value}: {pole.value}" for m, pole in df.result.primary_forces.items()))
        st.markdown(f"**Alignment with DISC style:** {df.integration.alignment}")
        for line in df.integration.insights + df.team_dynamics.potential_frictions:
            st.markdown(f"- {line}")


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
st.divider()
if st.button("⬇️ Export all results as CSV"):
    try:
        profiles = _REPO.list_profiles()
    except DataAccessError as exc:
        st.error(f"Export failed: {exc}")
    else:
        st.download_button(
            "Download CSV",
            data=profiles_to_csv(profiles).encode("utf-8"),
            file_name="disc_results.csv",
            mime="text/csv",
        )
