# utils/ai_advisory/insights.py
"""
Actionable insights: fixed recommendation records with a current/target
metric, filterable by category.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

ALL = 'all'

INSIGHT_CATEGORIES = {
    ALL: 'All Insights',
    'patrol': 'Patrol Optimization',
    'community': 'Community Engagement',
    'resources': 'Resource Allocation',
    'prevention': 'Crime Prevention',
}

PRIORITY_COLORS = {
    'low': 'green',
    'medium': 'orange',
    'high': 'red',
    'critical': 'violet',
}

EFFORT_ICONS = {
    'low': '🟢',
    'medium': '🟡',
    'high': '🔴',
}


@dataclass(frozen=True)
class InsightMetric:
    current: float
    target: float
    unit: str

    @property
    def lower_is_better(self) -> bool:
        return self.target < self.current

    @property
    def gap(self) -> float:
        """Remaining distance to target, always >= 0."""
        return abs(self.target - self.current)

    @property
    def progress(self) -> float:
        """current/target for growth goals, target/current for reduction goals; within [0, 1]."""
        if self.lower_is_better:
            ratio = self.target / self.current if self.current else 1.0
        else:
            ratio = self.current / self.target if self.target else 1.0
        return max(0.0, min(1.0, ratio))


@dataclass(frozen=True)
class Insight:
    id: str
    title: str
    description: str
    priority: str
    category: str
    impact: str
    effort: str
    actions: Tuple[str, ...]
    metric: InsightMetric

    @property
    def priority_color(self) -> str:
        return PRIORITY_COLORS.get(self.priority, 'gray')

    @property
    def effort_icon(self) -> str:
        return EFFORT_ICONS.get(self.effort, '⚪')


INSIGHTS = (
    Insight(
        id='1',
        title='Optimize Evening Patrol Routes',
        description='Analysis shows 73% of drug incidents occur between 8-11 PM in sectors 3 and 7. '
                    'Current patrol coverage is suboptimal during these hours.',
        priority='high',
        category='patrol',
        impact='Could reduce evening incidents by 35%',
        effort='medium',
        actions=(
            'Redeploy 2 patrol units to sectors 3 and 7 during 8-11 PM',
            'Implement dynamic routing based on real-time risk scores',
            'Coordinate with community watch groups',
        ),
        metric=InsightMetric(current=45, target=29, unit='incidents/month'),
    ),
    Insight(
        id='2',
        title='Enhance Community Engagement',
        description='Low community tip rate (23 reports/month) compared to similar districts. '
                    'Social media sentiment analysis shows trust issues.',
        priority='medium',
        category='community',
        impact='Increase intelligence gathering by 60%',
        effort='high',
        actions=(
            'Launch anonymous tip mobile app',
            'Organize monthly community meetings',
            'Implement community policing program',
            'Create multilingual outreach materials',
        ),
        metric=InsightMetric(current=23, target=50, unit='tips/month'),
    ),
    Insight(
        id='3',
        title='Deploy Predictive CCTV Monitoring',
        description='AI analysis identifies 4 high-risk intersections with inadequate surveillance '
                    'coverage during peak crime hours.',
        priority='critical',
        category='resources',
        impact='Prevent 40% of street-level drug transactions',
        effort='low',
        actions=(
            'Install 4 additional CCTV cameras at identified locations',
            'Implement AI-powered motion detection alerts',
            'Train operators on new monitoring protocols',
        ),
        metric=InsightMetric(current=8, target=12, unit='cameras'),
    ),
    Insight(
        id='4',
        title='Target Gang Recruitment Prevention',
        description='Social network analysis reveals increased recruitment activity near schools. '
                    'Early intervention could prevent 15 new gang members.',
        priority='high',
        category='prevention',
        impact='Reduce future gang activity by 25%',
        effort='medium',
        actions=(
            'Deploy youth outreach officers to identified schools',
            'Partner with education ministry for prevention programs',
            'Monitor social media for recruitment patterns',
            'Establish safe reporting mechanisms for students',
        ),
        metric=InsightMetric(current=12, target=5, unit='gang activity index'),
    ),
)


def filter_insights(insights: Sequence[Insight], category: str = ALL) -> List[Insight]:
    """
    Insights in a category, in catalog order.

    Raises:
        ValueError: Unknown category
    """
    if category not in INSIGHT_CATEGORIES:
        raise ValueError(f"Unknown insight category: {category}")
    return [i for i in insights if category == ALL or i.category == category]
