# utils/kpi_analytics/metrics.py
"""
KPI Calculations for KPI Analytics

- resolve_trend(): trend direction + category -> icon/color semantics
- KPIMetrics: chart series, category distribution, table rows, summary

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from .constants import (
    LOWER_IS_BETTER_CATEGORIES, TREND_ICONS, TREND_COLORS, CATEGORY_LABELS
)
from .models import KPI

logger = logging.getLogger(__name__)


# =============================================================================
# TREND RESOLVER
# =============================================================================

@dataclass(frozen=True)
class TrendIndicator:
    icon: str
    color_class: str
    sentiment: str  # favorable | unfavorable | neutral

    @property
    def is_favorable(self) -> bool:
        return self.sentiment == 'favorable'

    def markdown(self, text: str) -> str:
        """Streamlit colored-text markdown, e.g. ':green[📉 down]'."""
        return f":{self.color_class}[{self.icon} {text}]"


NEUTRAL_TREND = TrendIndicator(TREND_ICONS['stable'], TREND_COLORS['neutral'], 'neutral')


def resolve_trend(trend: str, category: str, lower_is_better: Optional[bool] = None) -> TrendIndicator:
    """
    Resolve whether a trend direction is good news for a category.

    Args:
        trend: 'up', 'down' or 'stable'
        category: KPI category; decides direction unless overridden
        lower_is_better: Explicit direction for non-KPI metrics

    Returns:
        TrendIndicator; 'stable' and unknown trends are neutral
    """
    if trend not in ('up', 'down'):
        return NEUTRAL_TREND

    if lower_is_better is None:
        lower_is_better = category in LOWER_IS_BETTER_CATEGORIES

    favorable_direction = 'down' if lower_is_better else 'up'
    sentiment = 'favorable' if trend == favorable_direction else 'unfavorable'

    return TrendIndicator(TREND_ICONS[trend], TREND_COLORS[sentiment], sentiment)


# =============================================================================
# AGGREGATION
# =============================================================================

def short_label(name: str, words: int = 2) -> str:
    """First words of a KPI name, used for chart axes."""
    return " ".join(name.split(" ")[:words])


def aggregate(kpis: List[KPI]) -> Dict[str, List[Dict]]:
    """
    Reduce KPIs into chart-ready series.

    Returns:
        {'series': [{name, current, target}], 'distribution': [{category, count}]}
        distribution follows first-occurrence order of each category
    """
    series = [
        {'name': kpi.name, 'current': kpi.current_value, 'target': kpi.target_value}
        for kpi in kpis
    ]

    counts: Dict[str, int] = {}
    for kpi in kpis:
        counts[kpi.category] = counts.get(kpi.category, 0) + 1

    distribution = [{'category': cat, 'count': n} for cat, n in counts.items()]

    return {'series': series, 'distribution': distribution}


class KPIMetrics:
    """
    Derived views over a filtered KPI list.

    Usage:
        metrics = KPIMetrics(filtered_kpis)
        charts = metrics.aggregate()
        table_df = metrics.to_dataframe()
        summary = metrics.summarize()
    """

    def __init__(self, kpis: List[KPI]):
        self.kpis = list(kpis)

    def aggregate(self) -> Dict[str, List[Dict]]:
        return aggregate(self.kpis)

    # =========================================================================
    # TABLE
    # =========================================================================

    def build_table_rows(self) -> List[Dict]:
        """One display row per KPI with trend semantics resolved."""
        rows = []
        for kpi in self.kpis:
            indicator = resolve_trend(kpi.trend, kpi.category)
            rows.append({
                'id': kpi.id,
                'name': kpi.name,
                'problem': kpi.problem,
                'solution': kpi.solution,
                'application': kpi.application,
                'stakeholder_benefits': kpi.stakeholder_benefits,
                'current_value': kpi.current_value,
                'target_value': kpi.target_value,
                'achievement': self.achievement(kpi),
                'trend': kpi.trend,
                'trend_icon': indicator.icon,
                'trend_color': indicator.color_class,
                'trend_sentiment': indicator.sentiment,
                'category': kpi.category,
                'category_label': CATEGORY_LABELS.get(kpi.category, kpi.category),
                'priority': kpi.priority,
                'district_id': kpi.district_id,
            })
        return rows

    def to_dataframe(self) -> pd.DataFrame:
        rows = self.build_table_rows()
        if not rows:
            return pd.DataFrame(columns=[
                'id', 'name', 'problem', 'solution', 'application',
                'stakeholder_benefits', 'current_value', 'target_value',
                'achievement', 'trend', 'trend_icon', 'trend_color',
                'trend_sentiment', 'category', 'category_label', 'priority',
                'district_id'
            ])
        return pd.DataFrame(rows)

    # =========================================================================
    # ACHIEVEMENT
    # =========================================================================

    @staticmethod
    def achievement(kpi: KPI) -> Optional[float]:
        """
        Progress toward target as a ratio (1.0 = target met).

        Lower-is-better KPIs use target/current. None when undefined.
        """
        if kpi.category in LOWER_IS_BETTER_CATEGORIES:
            if kpi.current_value == 0:
                return 1.0
            return kpi.target_value / kpi.current_value

        if kpi.target_value == 0:
            return None
        return kpi.current_value / kpi.target_value

    @staticmethod
    def is_on_target(kpi: KPI) -> bool:
        if kpi.category in LOWER_IS_BETTER_CATEGORIES:
            return kpi.current_value <= kpi.target_value
        return kpi.current_value >= kpi.target_value

    def summarize(self) -> Dict:
        """Header metrics for the analytics page."""
        if not self.kpis:
            return {
                'kpi_count': 0,
                'on_target_count': 0,
                'avg_achievement': None,
                'favorable_trends': 0,
                'critical_count': 0,
            }

        ratios = pd.Series([self.achievement(k) for k in self.kpis], dtype='float64')
        avg = ratios.dropna().clip(upper=1.5).mean()

        return {
            'kpi_count': len(self.kpis),
            'on_target_count': sum(1 for k in self.kpis if self.is_on_target(k)),
            'avg_achievement': None if pd.isna(avg) else float(avg),
            'favorable_trends': sum(
                1 for k in self.kpis if resolve_trend(k.trend, k.category).is_favorable
            ),
            'critical_count': sum(1 for k in self.kpis if k.priority == 'critical'),
        }
