# utils/district_overview/fragments.py
"""
Streamlit components for the District Overview page.
"""

import logging
from typing import List, Optional

import streamlit as st

from ..kpi_analytics.constants import CRIME_LEVEL_ICONS
from ..kpi_analytics.models import District
from .charts import DistrictCharts
from .stats import (
    StatCard,
    hourly_activity,
    response_time_by_district,
    crime_type_breakdown,
)

logger = logging.getLogger(__name__)


def render_stat_cards(cards: List[StatCard]):
    """One st.metric per stat; delta colored by trend semantics."""
    if not cards:
        st.info("No statistics available")
        return

    columns = st.columns(len(cards))
    for col, card in zip(columns, cards):
        with col:
            # st.metric colors positive deltas green under "normal"
            if card.indicator.sentiment == 'neutral':
                delta_color = "off"
            elif card.indicator.is_favorable == card.change.startswith('+'):
                delta_color = "normal"
            else:
                delta_color = "inverse"

            value = f"{card.value:g}{card.unit}" if isinstance(card.value, float) else f"{card.value}{card.unit}"
            st.metric(
                label=f"{card.indicator.icon} {card.title}",
                value=value,
                delta=card.change,
                delta_color=delta_color
            )


def render_district_header(district: Optional[District]):
    if district is None:
        st.markdown("### 🌐 All districts")
        return

    icon = CRIME_LEVEL_ICONS.get(district.crime_level, "⚪")
    st.markdown(f"### {icon} {district.name}")
    st.caption(
        f"Population {district.population:,} • Area {district.area} km² • "
        f"{district.density:,.0f} residents/km² • Crime level: {district.crime_level}"
    )


@st.fragment
def activity_trends_fragment(
    district: Optional[District],
    districts: List[District],
    reference_incidents: float,
    fragment_key: str = "overview_trends"
):
    """Hourly activity, crime-type mix and response times."""
    freeze = st.checkbox(
        "Freeze jitter",
        value=False,
        key=f"{fragment_key}_freeze",
        help="Use a fixed seed so the mock hourly data stops changing between reruns"
    )
    seed = 7 if freeze else None

    st.altair_chart(
        DistrictCharts.build_hourly_activity_chart(
            hourly_activity(district, reference_incidents, seed=seed)
        ),
        use_container_width=True
    )

    col1, col2 = st.columns(2)
    with col1:
        st.altair_chart(
            DistrictCharts.build_crime_type_chart(crime_type_breakdown()),
            use_container_width=True
        )
    with col2:
        st.altair_chart(
            DistrictCharts.build_response_time_chart(
                response_time_by_district(districts),
                highlight=district.name if district else None
            ),
            use_container_width=True
        )
