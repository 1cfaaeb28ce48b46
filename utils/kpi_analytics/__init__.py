# utils/kpi_analytics/__init__.py
"""
KPI Analytics Module

Catalog → filter → trend/aggregate → chart/export pipeline for the
Alajuelita KPI dashboard.

VERSION: 1.0.0

Components:
- Catalog: Static districts and KPIs with validation
- filter_kpis: District/category filter engine
- resolve_trend / KPIMetrics: Trend semantics, chart series, summaries
- KPIAnalyticsCharts: Altair / Plotly chart builders
- export_data / KPIExport: CSV, JSON and Excel export
- DashboardState: Immutable page state with pure reducers
- Fragments: Interactive UI components

Usage:
    from utils.kpi_analytics import (
        load_catalog,
        filter_kpis,
        KPIMetrics,
        export_data,
    )
"""

# Models
from .models import KPI, District

# Catalog
from .catalog import Catalog, CatalogError, build_catalog, load_catalog, find_orphan_kpis

# Filters
from .filters import (
    filter_kpis,
    FilterSelection,
    get_filter_summary,
    render_district_selector,
    render_category_filter,
)

# Metrics
from .metrics import TrendIndicator, resolve_trend, aggregate, KPIMetrics

# Charts
from .charts import KPIAnalyticsCharts

# Export
from .export import ExportError, ExportPayload, KPIExport, export_data, to_csv, to_json, build_filename

# State
from .state import (
    DashboardState,
    select_district,
    select_category,
    set_view,
    toggle_export,
    restore_state,
    get_state,
    set_state,
)

# Fragments
from .fragments import (
    render_summary_cards,
    kpi_table_fragment,
    kpi_charts_fragment,
    export_fragment,
)

# Constants
from .constants import ALL, KPI_CATEGORIES, CATEGORY_FILTERS, CATEGORY_LABELS, COLORS

__all__ = [
    'KPI',
    'District',
    'Catalog',
    'CatalogError',
    'build_catalog',
    'load_catalog',
    'find_orphan_kpis',
    'filter_kpis',
    'FilterSelection',
    'get_filter_summary',
    'render_district_selector',
    'render_category_filter',
    'TrendIndicator',
    'resolve_trend',
    'aggregate',
    'KPIMetrics',
    'KPIAnalyticsCharts',
    'ExportError',
    'ExportPayload',
    'KPIExport',
    'export_data',
    'to_csv',
    'to_json',
    'build_filename',
    'DashboardState',
    'select_district',
    'select_category',
    'set_view',
    'toggle_export',
    'restore_state',
    'get_state',
    'set_state',
    'render_summary_cards',
    'kpi_table_fragment',
    'kpi_charts_fragment',
    'export_fragment',
    'ALL',
    'KPI_CATEGORIES',
    'CATEGORY_FILTERS',
    'CATEGORY_LABELS',
    'COLORS',
]

__version__ = '1.0.0'
