# utils/kpi_analytics/state.py
"""
Dashboard state held as one immutable value in st.session_state.

Widgets never mutate the state; they produce a new value through the
reducer functions below, which are plain functions and testable without
Streamlit.
"""

from dataclasses import dataclass, replace
from typing import Iterable

import streamlit as st

from .constants import ALL, SESSION_STATE_KEY
from .filters import FilterSelection

VIEWS = ('table', 'charts')


@dataclass(frozen=True)
class DashboardState:
    district_id: str = ALL
    category_id: str = ALL
    active_view: str = 'table'
    show_export: bool = False

    @property
    def selection(self) -> FilterSelection:
        return FilterSelection(self.district_id, self.category_id)


def select_district(state: DashboardState, district_id: str) -> DashboardState:
    return replace(state, district_id=district_id or ALL)


def select_category(state: DashboardState, category_id: str) -> DashboardState:
    return replace(state, category_id=category_id or ALL)


def set_view(state: DashboardState, view: str) -> DashboardState:
    if view not in VIEWS:
        return state
    return replace(state, active_view=view)


def toggle_export(state: DashboardState, show: bool) -> DashboardState:
    return replace(state, show_export=show)


def restore_state(state: DashboardState, district_ids: Iterable[str]) -> DashboardState:
    """Drop a remembered district that no longer exists."""
    if state.district_id != ALL and state.district_id not in set(district_ids):
        return select_district(state, ALL)
    return state


# =============================================================================
# SESSION HELPERS
# =============================================================================

def get_state(default_district: str = ALL) -> DashboardState:
    if SESSION_STATE_KEY not in st.session_state:
        st.session_state[SESSION_STATE_KEY] = DashboardState(district_id=default_district)
    return st.session_state[SESSION_STATE_KEY]


def set_state(state: DashboardState):
    st.session_state[SESSION_STATE_KEY] = state
