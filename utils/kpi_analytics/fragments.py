# utils/kpi_analytics/fragments.py
"""
Streamlit Fragments for KPI Analytics

Each fragment receives the already-filtered KPI list and reruns on its own
when its local widgets change.

VERSION: 1.0.0
"""

import logging
from typing import List

import pandas as pd
import streamlit as st

from ..config import config
from .charts import KPIAnalyticsCharts
from .constants import CATEGORY_BADGE_COLORS, EXPORT_FORMATS
from .export import ExportError, export_data
from .metrics import KPIMetrics
from .models import KPI

logger = logging.getLogger(__name__)


# =============================================================================
# SUMMARY CARDS
# =============================================================================

def render_summary_cards(kpis: List[KPI]):
    """Four header metrics for the current selection."""
    summary = KPIMetrics(kpis).summarize()

    with st.container(border=True):
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric("KPIs", summary['kpi_count'])

        with col2:
            st.metric(
                "On Target",
                f"{summary['on_target_count']} / {summary['kpi_count']}",
                help="Safety KPIs are on target when current ≤ target; all others when current ≥ target"
            )

        with col3:
            avg = summary['avg_achievement']
            st.metric(
                "Avg Achievement",
                f"{avg:.0%}" if avg is not None else "N/A",
                help="Mean of current/target (target/current for safety), capped at 150% per KPI"
            )

        with col4:
            st.metric(
                "Favorable Trends",
                summary['favorable_trends'],
                delta=f"{summary['critical_count']} critical" if summary['critical_count'] else None,
                delta_color="off"
            )


# =============================================================================
# TABLE VIEW
# =============================================================================

@st.fragment
def kpi_table_fragment(kpis: List[KPI], fragment_key: str = "kpi_table"):
    """KPI table with narrative columns and resolved trend semantics."""
    if not kpis:
        st.info("No KPIs match the selected district and category")
        return

    df = KPIMetrics(kpis).to_dataframe()

    compact = st.toggle(
        "Compact view",
        value=False,
        key=f"{fragment_key}_compact",
        help="Hide the narrative columns"
    )

    display_df = pd.DataFrame({
        'name': df['name'],
        'problem': df['problem'],
        'solution': df['solution'],
        'application': df['application'],
        'stakeholder_benefits': df['stakeholder_benefits'],
        'current_value': df['current_value'],
        'target_value': df['target_value'],
        'achievement': pd.to_numeric(df['achievement'], errors='coerce') * 100,
        'trend': df['trend_icon'] + " " + df['trend'],
        'category': df['category_label'],
        'priority': df['priority'],
    })

    if compact:
        display_df = display_df.drop(columns=['problem', 'solution', 'application', 'stakeholder_benefits'])

    column_config = {
        'name': st.column_config.TextColumn("KPI Name", width="medium"),
        'problem': st.column_config.TextColumn("Problem", width="large"),
        'solution': st.column_config.TextColumn("Solution", width="large"),
        'application': st.column_config.TextColumn("Application in Alajuelita", width="large"),
        'stakeholder_benefits': st.column_config.TextColumn("Stakeholder Benefits", width="large"),
        'current_value': st.column_config.NumberColumn("Current", format="%.1f"),
        'target_value': st.column_config.NumberColumn("Target", format="%.1f"),
        'achievement': st.column_config.ProgressColumn(
            "Achievement", format="%.0f%%", min_value=0, max_value=150
        ),
        'trend': st.column_config.TextColumn("Trend"),
        'category': st.column_config.TextColumn("Category"),
        'priority': st.column_config.TextColumn("Priority"),
    }

    st.dataframe(
        display_df,
        column_config=column_config,
        use_container_width=True,
        hide_index=True,
        height=min(600, 80 + 45 * len(display_df))
    )

    # Colored trend legend per row
    with st.expander("📖 Trend details"):
        for row in df.itertuples():
            badge = CATEGORY_BADGE_COLORS.get(row.category, "gray")
            st.markdown(
                f"**{row.name}** · :{badge}-background[{row.category_label}] · "
                f":{row.trend_color}[{row.trend_icon} {row.trend}]"
            )
        st.caption("Safety: falling values are favorable. Other categories: rising values are favorable.")


# =============================================================================
# CHARTS VIEW
# =============================================================================

@st.fragment
def kpi_charts_fragment(kpis: List[KPI]):
    """Current vs target, performance line and category distribution."""
    if not kpis:
        st.info("No KPIs match the selected district and category")
        return

    aggregated = KPIMetrics(kpis).aggregate()

    st.altair_chart(
        KPIAnalyticsCharts.build_current_vs_target_chart(aggregated['series']),
        use_container_width=True
    )

    col1, col2 = st.columns(2)
    with col1:
        st.altair_chart(
            KPIAnalyticsCharts.build_performance_line_chart(aggregated['series']),
            use_container_width=True
        )
    with col2:
        donut = KPIAnalyticsCharts.build_category_donut(aggregated['distribution'])
        if donut is not None:
            st.plotly_chart(donut, use_container_width=True)


# =============================================================================
# EXPORT
# =============================================================================

def _export_signature(filter_summary: str, export_format: str, include_charts: bool) -> tuple:
    return (filter_summary, export_format, bool(include_charts) and export_format == 'json')


def _prepared_payload(store, key: str, signature: tuple):
    """Payload stored under `key` if it was prepared for `signature`, else None."""
    prepared = store.get(key)
    if prepared is None or prepared[0] != signature:
        return None
    return prepared[1]


def export_fragment(kpis: List[KPI], filter_summary: str = "", fragment_key: str = "kpi_export"):
    """Export the filtered KPIs as CSV, JSON or Excel."""
    st.subheader("📥 Export Data")

    formats = ['csv', 'json']
    if config.is_feature_enabled("EXCEL_EXPORT"):
        formats.append('xlsx')

    col1, col2 = st.columns([2, 1])
    with col1:
        export_format = st.radio(
            "Export Format",
            options=formats,
            format_func=lambda f: EXPORT_FORMATS[f]['label'],
            key=f"{fragment_key}_format",
            horizontal=True
        )
    with col2:
        include_charts = st.checkbox(
            "Include chart data (JSON only)",
            value=False,
            disabled=export_format != 'json',
            key=f"{fragment_key}_charts"
        )

    st.caption(f"Exporting {len(kpis)} KPI records from selected filters.")
    signature = _export_signature(filter_summary, export_format, include_charts)
    payload_key = f'{fragment_key}_payload'

    if st.button("🔄 Prepare Export", key=f"{fragment_key}_btn", type="primary"):
        try:
            payload = export_data(
                kpis,
                export_format,
                include_charts=signature[2],
                filter_summary=filter_summary,
                prefix=config.get_app_setting("EXPORT_FILE_PREFIX", "alajuelita-kpis"),
            )
            st.session_state[payload_key] = (signature, payload)
            st.success("✅ Export ready! Click download below.")
        except ExportError as e:
            logger.error(f"Export error: {e}")
            st.error("Export failed. Please try again.")
        except Exception as e:
            logger.error(f"Unexpected export error: {e}", exc_info=True)
            st.error("Export failed. Please try again.")

    # Payload must match the current filters and format
    payload = _prepared_payload(st.session_state, payload_key, signature)
    if payload is not None:
        st.download_button(
            label=f"⬇️ Download {payload.filename}",
            data=payload.content,
            file_name=payload.filename,
            mime=payload.mime,
            key=f"{fragment_key}_download"
        )
