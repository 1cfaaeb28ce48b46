# app.py
"""
Alajuelita Crime Analytics - Main Entry Point (District Overview)

Version: 1.0.0
"""

import streamlit as st
import logging

from utils.config import config
from utils.kpi_analytics import (
    ALL,
    load_catalog,
    filter_kpis,
    render_district_selector,
    get_state,
    set_state,
    select_district,
    restore_state,
    KPIMetrics,
)
from utils.district_overview import (
    build_stat_cards,
    combine_district_stats,
    render_stat_cards,
    render_district_header,
    activity_trends_fragment,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.get_app_setting("ENABLE_DEBUG_MODE") else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ==================== PAGE CONFIGURATION ====================

APP_NAME = "Alajuelita Crime Analytics"
APP_ICON = "🛡️"
APP_VERSION = "1.0.0"

st.set_page_config(
    page_title=APP_NAME,
    page_icon=APP_ICON,
    layout="wide",
    initial_sidebar_state="expanded"
)

# ==================== CUSTOM CSS ====================

st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        margin-bottom: 0.25rem;
        color: #1f77b4;
    }

    .sub-header {
        font-size: 1.05rem;
        color: #666;
        margin-bottom: 1.5rem;
    }

    .footer {
        text-align: center;
        color: #888;
        padding: 1rem;
        margin-top: 3rem;
        border-top: 1px solid #eee;
        font-size: 0.9rem;
    }
</style>
""", unsafe_allow_html=True)


# ==================== HELPER FUNCTIONS ====================

def show_overview():
    """District selector, stat cards and activity trends"""
    catalog = load_catalog()
    districts = catalog.districts

    state = restore_state(
        get_state(config.get_app_setting("DEFAULT_DISTRICT", ALL)),
        [d.id for d in districts]
    )

    with st.sidebar:
        st.markdown(f"### {APP_ICON} {APP_NAME}")
        district_id = render_district_selector(districts, selected=state.district_id, key="overview_district")
        st.markdown("---")
        st.caption("Pages: 📊 KPI Analytics · 🧠 AI Advisory · ⚙️ Settings · 🗺️ Maps · 📹 CCTV")

    state = select_district(state, district_id)
    set_state(state)

    st.markdown(f'<p class="main-header">{APP_ICON} {APP_NAME}</p>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">District safety overview for the canton of Alajuelita</p>',
                unsafe_allow_html=True)

    district = catalog.get_district(district_id) if district_id != ALL else None
    render_district_header(district)

    stats = district.stats if district else combine_district_stats(districts)
    render_stat_cards(build_stat_cards(stats))

    # KPI snapshot for the selected district
    kpis = filter_kpis(catalog.kpis, district_id, ALL)
    summary = KPIMetrics(kpis).summarize()
    st.caption(
        f"📊 {summary['kpi_count']} KPIs tracked • {summary['on_target_count']} on target • "
        f"{summary['favorable_trends']} trending favorably"
    )

    st.markdown("---")
    st.markdown("### 📈 Activity Trends")

    reference = combine_district_stats(districts).get('drugIncidents', 0) / max(len(districts), 1)
    activity_trends_fragment(district, districts, reference)

    st.markdown(f"""
    <div class="footer">
        <strong>{APP_NAME}</strong> v{APP_VERSION} | Mock data for demonstration only
    </div>
    """, unsafe_allow_html=True)


# ==================== MAIN ====================

def main():
    """Main application entry point"""
    show_overview()


if __name__ == "__main__":
    main()
