# utils/kpi_analytics/filters.py
"""
Filter Components for KPI Analytics

- filter_kpis(): pure (catalog, district, category) -> KPIs reduction
- District selector and category chips for the page header

VERSION: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import streamlit as st

from .constants import ALL, CATEGORY_FILTERS, CATEGORY_LABELS, CRIME_LEVEL_ICONS
from .models import KPI, District

logger = logging.getLogger(__name__)


# =============================================================================
# FILTER ENGINE
# =============================================================================

def filter_kpis(catalog: Iterable[KPI], district_id: str = ALL, category_id: str = ALL) -> List[KPI]:
    """
    Reduce a KPI list by district and category.

    "all" disables a predicate; anything else is an exact match. Order is
    preserved and unknown ids simply produce an empty list.
    """
    return [
        kpi for kpi in catalog
        if (district_id == ALL or kpi.district_id == district_id)
        and (category_id == ALL or kpi.category == category_id)
    ]


@dataclass(frozen=True)
class FilterSelection:
    """Current district/category selection."""
    district_id: str = ALL
    category_id: str = ALL

    @property
    def is_active(self) -> bool:
        return self.district_id != ALL or self.category_id != ALL

    def apply(self, catalog: Iterable[KPI]) -> List[KPI]:
        return filter_kpis(catalog, self.district_id, self.category_id)

    def __repr__(self) -> str:
        if not self.is_active:
            return "FilterSelection(inactive)"
        return f"FilterSelection(district={self.district_id}, category={self.category_id})"


def get_filter_summary(selection: FilterSelection, district_name: Optional[str] = None) -> str:
    """Human-readable summary of the current selection."""
    parts = []

    if selection.district_id == ALL:
        parts.append("All districts")
    else:
        parts.append(district_name or selection.district_id)

    if selection.category_id == ALL:
        parts.append("all categories")
    else:
        parts.append(CATEGORY_LABELS.get(selection.category_id, selection.category_id))

    return " • ".join(parts)


# =============================================================================
# WIDGETS
# =============================================================================

def _district_label(district: Optional[District]) -> str:
    if district is None:
        return "🌐 All districts"
    icon = CRIME_LEVEL_ICONS.get(district.crime_level, "⚪")
    return f"{icon} {district.name}"


def render_district_selector(
    districts: List[District],
    selected: str = ALL,
    include_all: bool = True,
    key: str = "district_selector",
    ctx=None
) -> str:
    """
    Render district selectbox.

    Returns:
        Selected district id ("all" when the all option is chosen)
    """
    if ctx is None:
        ctx = st.sidebar

    options = ([ALL] if include_all else []) + [d.id for d in districts]
    index_by_id = {d.id: d for d in districts}
    index = options.index(selected) if selected in options else 0

    return ctx.selectbox(
        "District",
        options=options,
        index=index,
        format_func=lambda d_id: _district_label(index_by_id.get(d_id)),
        key=key,
        help="Crime level: 🟢 low · 🟡 moderate · 🟠 high · 🔴 critical"
    )


def render_category_filter(selected: str = ALL, key: str = "category_filter") -> str:
    """Render category chips as a horizontal radio."""
    options = [c["id"] for c in CATEGORY_FILTERS]
    labels = {c["id"]: f'{c["icon"]} {c["label"]}' for c in CATEGORY_FILTERS}
    index = options.index(selected) if selected in options else 0

    return st.radio(
        "Category",
        options=options,
        index=index,
        format_func=lambda c: labels[c],
        horizontal=True,
        key=key,
        label_visibility="collapsed"
    )
