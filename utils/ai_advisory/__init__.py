# utils/ai_advisory/__init__.py
"""
AI Advisory Module

Canned predictions, patrol route optimizer, actionable insights and a
mock alert feed for the advisory page.
"""

from .predictions import (
    Prediction,
    CANNED_PREDICTIONS,
    RISK_LEVELS,
    get_predictions,
    generate_prediction,
)
from .patrol import PatrolRoute, PATROL_ROUTES, summarize_routes, optimize_routes, deploy_patrol
from .insights import Insight, InsightMetric, INSIGHTS, INSIGHT_CATEGORIES, filter_insights
from .realtime import RealTimeSnapshot, build_snapshot, add_alert

__all__ = [
    'Prediction',
    'CANNED_PREDICTIONS',
    'RISK_LEVELS',
    'get_predictions',
    'generate_prediction',
    'PatrolRoute',
    'PATROL_ROUTES',
    'summarize_routes',
    'optimize_routes',
    'deploy_patrol',
    'Insight',
    'InsightMetric',
    'INSIGHTS',
    'INSIGHT_CATEGORIES',
    'filter_insights',
    'RealTimeSnapshot',
    'build_snapshot',
    'add_alert',
]
