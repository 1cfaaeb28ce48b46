# utils/kpi_analytics/charts.py
"""
Chart Builders for KPI Analytics

Altair for bar/line charts, Plotly for the category donut.

VERSION: 1.0.0
"""

import logging
from typing import Dict, List, Optional

import altair as alt
import pandas as pd
import plotly.graph_objects as go

from .constants import COLORS, DISTRIBUTION_COLORS, CATEGORY_LABELS, CHART_WIDTH, CHART_HEIGHT
from .metrics import short_label

logger = logging.getLogger(__name__)


def _plotly_layout_defaults(fig: go.Figure, height: int = CHART_HEIGHT) -> go.Figure:
    fig.update_layout(
        height=height,
        margin=dict(l=20, r=20, t=40, b=20),
        font=dict(size=11),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        hoverlabel=dict(bgcolor="white"),
    )
    return fig


class KPIAnalyticsCharts:
    """Chart builders fed by metrics.aggregate() output."""

    @staticmethod
    def series_dataframe(series: List[Dict]) -> pd.DataFrame:
        """Long-form (label, measure, value) frame for grouped bars."""
        if not series:
            return pd.DataFrame(columns=['label', 'name', 'measure', 'value', 'order'])

        df = pd.DataFrame(series)
        df['label'] = df['name'].map(short_label)
        df['order'] = range(len(df))
        long_df = df.melt(
            id_vars=['label', 'name', 'order'],
            value_vars=['current', 'target'],
            var_name='measure',
            value_name='value'
        )
        long_df['measure'] = long_df['measure'].map({'current': 'Current', 'target': 'Target'})
        return long_df

    @staticmethod
    def build_current_vs_target_chart(series: List[Dict], title: str = "Current vs Target Values") -> alt.Chart:
        """Grouped bars: current and target per KPI."""
        if not series:
            return KPIAnalyticsCharts._empty_chart()

        chart_df = KPIAnalyticsCharts.series_dataframe(series)

        return alt.Chart(chart_df).mark_bar(
            cornerRadiusTopLeft=3,
            cornerRadiusTopRight=3
        ).encode(
            x=alt.X('label:N',
                    sort=alt.EncodingSortField(field='order', order='ascending'),
                    title=None,
                    axis=alt.Axis(labelAngle=-45, labelLimit=120)),
            xOffset=alt.XOffset('measure:N'),
            y=alt.Y('value:Q', title='Value'),
            color=alt.Color(
                'measure:N',
                scale=alt.Scale(domain=['Current', 'Target'],
                                range=[COLORS['current'], COLORS['target']]),
                legend=alt.Legend(title=None, orient='top')
            ),
            tooltip=[
                alt.Tooltip('name:N', title='KPI'),
                alt.Tooltip('measure:N', title='Measure'),
                alt.Tooltip('value:Q', title='Value', format=',.1f'),
            ]
        ).properties(width=CHART_WIDTH, height=CHART_HEIGHT, title=title)

    @staticmethod
    def build_performance_line_chart(series: List[Dict], title: str = "Performance Trends") -> alt.Chart:
        """Line of current values in catalog order."""
        if not series:
            return KPIAnalyticsCharts._empty_chart()

        chart_df = pd.DataFrame(series)
        chart_df['label'] = chart_df['name'].map(short_label)
        chart_df['order'] = range(len(chart_df))

        return alt.Chart(chart_df).mark_line(
            color=COLORS['current'],
            strokeWidth=3,
            point=alt.OverlayMarkDef(color=COLORS['current'], size=60)
        ).encode(
            x=alt.X('label:N', sort=alt.EncodingSortField(field='order', order='ascending'), title=None),
            y=alt.Y('current:Q', title='Current'),
            tooltip=[
                alt.Tooltip('name:N', title='KPI'),
                alt.Tooltip('current:Q', title='Current', format=',.1f'),
            ]
        ).properties(width=CHART_WIDTH, height=CHART_HEIGHT, title=title)

    @staticmethod
    def build_category_donut(distribution: List[Dict], title: str = "KPI Distribution by Category") -> Optional[go.Figure]:
        """Donut of KPI counts per category; None when empty."""
        if not distribution:
            return None

        labels = [CATEGORY_LABELS.get(d['category'], d['category']) for d in distribution]
        values = [d['count'] for d in distribution]
        colors = [DISTRIBUTION_COLORS[i % len(DISTRIBUTION_COLORS)] for i in range(len(values))]

        fig = go.Figure(data=[go.Pie(
            labels=labels,
            values=values,
            marker=dict(colors=colors),
            textinfo="label+percent",
            hovertemplate="%{label}: %{value} KPIs<br>(%{percent})<extra></extra>",
            hole=0.4,
            sort=False,
        )])
        fig = _plotly_layout_defaults(fig)
        fig.update_layout(title=title, showlegend=True)
        return fig

    @staticmethod
    def _empty_chart(message: str = "No data") -> alt.Chart:
        """Return an empty chart with a message."""
        return alt.Chart(pd.DataFrame({'text': [message]})).mark_text(
            fontSize=14,
            color='gray'
        ).encode(
            text='text:N'
        ).properties(
            width=400,
            height=200
        )
