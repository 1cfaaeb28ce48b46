# utils/district_overview/stats.py
"""
District statistics: stat cards, all-district totals and the hourly
activity pattern shown on the overview page.

The hourly pattern is mock data with pseudo-random jitter; pass a seed for
repeatable output.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from ..kpi_analytics.metrics import TrendIndicator, resolve_trend
from ..kpi_analytics.models import District

logger = logging.getLogger(__name__)


# (stat key, title, unit, trend, change, lower_is_better)
STAT_CARD_DEFINITIONS = [
    ('drugIncidents', "Drug Incidents", "/month", 'down', "-12%", True),
    ('responseTime', "Response Time", " min", 'down', "-8%", True),
    ('gangActivity', "Gang Activity", " incidents", 'stable', "0%", True),
    ('communityTips', "Community Tips", " reports", 'up', "+15%", False),
]

HOURLY_BASELINE = pd.DataFrame({
    'time': ['00:00', '04:00', '08:00', '12:00', '16:00', '20:00', '23:59'],
    'incidents': [2, 1, 5, 8, 12, 15, 6],
    'patrols': [3, 2, 4, 5, 6, 8, 4],
    'tips': [1, 0, 3, 4, 7, 5, 2],
})

CRIME_TYPE_SHARES = [
    ('Drug Related', 45, '#EF4444'),
    ('Gang Activity', 25, '#F59E0B'),
    ('Theft', 20, '#3B82F6'),
    ('Violence', 10, '#10B981'),
]


@dataclass(frozen=True)
class StatCard:
    key: str
    title: str
    value: float
    unit: str
    trend: str
    change: str
    indicator: TrendIndicator


def build_stat_cards(stats: Dict[str, float]) -> List[StatCard]:
    """Cards for the counters present in `stats`, in display order."""
    cards = []
    for key, title, unit, trend, change, lower_is_better in STAT_CARD_DEFINITIONS:
        if key not in stats:
            continue
        cards.append(StatCard(
            key=key,
            title=title,
            value=stats[key],
            unit=unit,
            trend=trend,
            change=change,
            indicator=resolve_trend(trend, key, lower_is_better=lower_is_better),
        ))
    return cards


def combine_district_stats(districts: List[District]) -> Dict[str, float]:
    """
    Municipality-wide counters.

    Counts are summed; response time is the population-weighted mean.
    """
    if not districts:
        return {}

    totals: Dict[str, float] = {}
    for district in districts:
        for key, value in district.stats.items():
            if key == 'responseTime':
                continue
            totals[key] = totals.get(key, 0) + value

    weighted = [(d.stats['responseTime'], d.population) for d in districts if 'responseTime' in d.stats]
    if weighted:
        times, weights = zip(*weighted)
        totals['responseTime'] = round(float(np.average(times, weights=weights)), 1)

    return totals


def hourly_activity(
    district: Optional[District],
    reference_incidents: float,
    seed: Optional[int] = None,
    jitter: float = 0.15
) -> pd.DataFrame:
    """
    Hourly incidents/patrols/tips for a district.

    The baseline is scaled by the district's drug incidents relative to
    `reference_incidents` and multiplied by N(1, jitter) noise.
    """
    rng = np.random.default_rng(seed)
    scale = 1.0
    if district is not None and reference_incidents:
        scale = district.stats.get('drugIncidents', reference_incidents) / reference_incidents

    df = HOURLY_BASELINE.copy()
    for col in ('incidents', 'patrols', 'tips'):
        noise = rng.normal(1.0, jitter, size=len(df))
        df[col] = np.clip(np.round(df[col] * scale * noise), 0, None).astype(int)

    return df


def response_time_by_district(districts: List[District]) -> pd.DataFrame:
    return pd.DataFrame([
        {'district': d.name, 'response_time': d.stats.get('responseTime', np.nan)}
        for d in districts
    ])


def crime_type_breakdown() -> pd.DataFrame:
    return pd.DataFrame(CRIME_TYPE_SHARES, columns=['crime_type', 'share', 'color'])
