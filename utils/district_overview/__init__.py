# utils/district_overview/__init__.py
"""
District Overview Module

Stat cards, municipality totals and mock activity trends for the home page.
"""

from .stats import (
    StatCard,
    build_stat_cards,
    combine_district_stats,
    hourly_activity,
    response_time_by_district,
    crime_type_breakdown,
)
from .charts import DistrictCharts
from .fragments import render_stat_cards, render_district_header, activity_trends_fragment

__all__ = [
    'StatCard',
    'build_stat_cards',
    'combine_district_stats',
    'hourly_activity',
    'response_time_by_district',
    'crime_type_breakdown',
    'DistrictCharts',
    'render_stat_cards',
    'render_district_header',
    'activity_trends_fragment',
]
