# utils/district_overview/charts.py
"""
Altair Chart Builders for the District Overview
"""

import logging

import altair as alt
import pandas as pd

logger = logging.getLogger(__name__)

ACTIVITY_COLORS = {
    'incidents': '#EF4444',
    'patrols': '#3B82F6',
    'tips': '#10B981',
}


class DistrictCharts:

    @staticmethod
    def build_hourly_activity_chart(activity_df: pd.DataFrame, title: str = "Activity by Hour") -> alt.Chart:
        long_df = activity_df.melt(id_vars=['time'], var_name='series', value_name='count')

        return alt.Chart(long_df).mark_line(point=True, strokeWidth=2).encode(
            x=alt.X('time:N', sort=list(activity_df['time']), title=None),
            y=alt.Y('count:Q', title='Count'),
            color=alt.Color(
                'series:N',
                scale=alt.Scale(domain=list(ACTIVITY_COLORS), range=list(ACTIVITY_COLORS.values())),
                legend=alt.Legend(title=None, orient='top')
            ),
            tooltip=['time:N', 'series:N', 'count:Q']
        ).properties(width='container', height=300, title=title)

    @staticmethod
    def build_crime_type_chart(breakdown_df: pd.DataFrame, title: str = "Crime Types") -> alt.Chart:
        return alt.Chart(breakdown_df).mark_arc(innerRadius=50).encode(
            theta=alt.Theta('share:Q'),
            color=alt.Color(
                'crime_type:N',
                scale=alt.Scale(domain=list(breakdown_df['crime_type']), range=list(breakdown_df['color'])),
                legend=alt.Legend(title=None)
            ),
            tooltip=[alt.Tooltip('crime_type:N', title='Type'), alt.Tooltip('share:Q', title='%')]
        ).properties(height=300, title=title)

    @staticmethod
    def build_response_time_chart(response_df: pd.DataFrame, highlight: str = None,
                                  title: str = "Response Time by District (min)") -> alt.Chart:
        df = response_df.copy()
        df['selected'] = df['district'] == highlight

        return alt.Chart(df).mark_bar(cornerRadiusTopRight=4, cornerRadiusBottomRight=4).encode(
            x=alt.X('response_time:Q', title='Minutes'),
            y=alt.Y('district:N', sort='-x', title=None),
            color=alt.condition(alt.datum.selected, alt.value('#1f77b4'), alt.value('#aec7e8')),
            tooltip=[alt.Tooltip('district:N'), alt.Tooltip('response_time:Q', title='Minutes')]
        ).properties(width='container', height=300, title=title)
