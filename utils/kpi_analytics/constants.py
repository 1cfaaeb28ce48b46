# utils/kpi_analytics/constants.py
"""
Constants for KPI Analytics Module

VERSION: 1.0.0
"""

# =====================================================================
# CLASSIFICATIONS
# =====================================================================

ALL = 'all'

KPI_CATEGORIES = [
    'safety', 'response', 'community', 'prevention',
    'surveillance', 'financial', 'youth'
]

KPI_TRENDS = ['up', 'down', 'stable']

KPI_PRIORITIES = ['low', 'medium', 'high', 'critical']

CRIME_LEVELS = ['low', 'moderate', 'high', 'critical']

# A falling value is the favorable direction for these categories
LOWER_IS_BETTER_CATEGORIES = frozenset({'safety'})

# Category chips shown above the KPI table
CATEGORY_FILTERS = [
    {"id": ALL, "label": "All Categories", "icon": "🔎"},
    {"id": "safety", "label": "Safety", "icon": "🛡️"},
    {"id": "response", "label": "Response", "icon": "🚓"},
    {"id": "community", "label": "Community", "icon": "👥"},
    {"id": "prevention", "label": "Prevention", "icon": "⚠️"},
]

CATEGORY_LABELS = {
    "safety": "Safety",
    "response": "Response",
    "community": "Community",
    "prevention": "Prevention",
    "surveillance": "Surveillance",
    "financial": "Financial",
    "youth": "Youth",
}

CRIME_LEVEL_ICONS = {
    "low": "🟢",
    "moderate": "🟡",
    "high": "🟠",
    "critical": "🔴",
}

# =====================================================================
# TREND INDICATORS
# =====================================================================

TREND_ICONS = {
    "up": "📈",
    "down": "📉",
    "stable": "➖",
}

# Streamlit markdown color names (":green[...]")
TREND_COLORS = {
    "favorable": "green",
    "unfavorable": "red",
    "neutral": "gray",
}

# =====================================================================
# COLOR SCHEME
# =====================================================================

COLORS = {
    "current": "#3B82F6",              # Blue
    "target": "#10B981",               # Green
    "primary": "#1f77b4",
    "favorable": "#28a745",
    "unfavorable": "#dc3545",
    "neutral": "#6c757d",
}

DISTRIBUTION_COLORS = ['#3B82F6', '#10B981', '#F59E0B', '#EF4444']

CATEGORY_BADGE_COLORS = {
    "safety": "red",
    "response": "blue",
    "community": "green",
    "prevention": "orange",
}

# =====================================================================
# CHART DIMENSIONS
# =====================================================================

CHART_WIDTH = 'container'
CHART_HEIGHT = 320

# =====================================================================
# EXPORT SETTINGS
# =====================================================================

EXPORT_FORMATS = {
    "csv": {"label": "CSV (Excel Compatible)", "mime": "text/csv"},
    "json": {"label": "JSON (Developer Friendly)", "mime": "application/json"},
    "xlsx": {
        "label": "Excel Workbook",
        "mime": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    },
}

CSV_HEADERS = [
    'Name', 'Problem', 'Solution', 'Application', 'Benefits',
    'Current', 'Target', 'Trend', 'Category'
]

EXCEL_STYLES = {
    "header_fill_color": "1f77b4",
    "header_font_color": "FFFFFF",
    "number_format": '#,##0.##',
    "percent_format": '0.0%',
    "favorable_fill_color": "D4EDDA",
    "unfavorable_fill_color": "F8D7DA",
}

# =====================================================================
# CACHE SETTINGS
# =====================================================================

CACHE_TTL_SECONDS = 300

SESSION_STATE_KEY = "kpi_dashboard_state"
