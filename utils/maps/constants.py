# utils/maps/constants.py
"""
Constants for the crime map: layers, heatmap types, marker colors.

VERSION: 1.0.0
"""

from ..kpi_analytics.catalog import DISTRICT_DATA

# =============================================================================
# GEOGRAPHY
# =============================================================================

DEFAULT_DISTRICT_ID = 'alajuelita'

# district id -> (lat, lng)
DISTRICT_CENTERS = {
    d['id']: (d['coordinates']['lat'], d['coordinates']['lng'])
    for d in DISTRICT_DATA
}

# Crime points in these districts get 1.5x intensity
HIGH_CRIME_DISTRICTS = frozenset({'barrio-mexico', 'san-felipe'})

DEFAULT_ZOOM = 12

# =============================================================================
# HEATMAP
# =============================================================================

HEATMAP_TYPES = ['crime', 'patrol', 'surveillance', 'prediction']

HEATMAP_POINTS = 50
HEATMAP_SPREAD = 0.02  # degrees around the district center

HEATMAP_MODES = [
    {"id": "density", "label": "Density", "icon": "👥"},
    {"id": "intensity", "label": "Intensity", "icon": "🌡️"},
]

TIME_RANGES = {
    "1h": {"label": "Last Hour", "hours": 1},
    "24h": {"label": "Last 24 Hours", "hours": 24},
    "7d": {"label": "Last 7 Days", "hours": 24 * 7},
    "30d": {"label": "Last 30 Days", "hours": 24 * 30},
}

# Original heatmap-color stops, low to high
HEATMAP_COLORSCALE = [
    [0.0, 'rgba(33,102,172,0)'],
    [0.2, 'rgb(103,169,207)'],
    [0.4, 'rgb(209,229,240)'],
    [0.6, 'rgb(253,219,199)'],
    [0.8, 'rgb(239,138,98)'],
    [1.0, 'rgb(178,24,43)'],
]

# =============================================================================
# MARKER LAYERS
# =============================================================================

MAP_LAYERS = [
    {"id": "crime", "label": "Crime Incidents", "icon": "⚠️", "count": 15, "spread": 0.02},
    {"id": "patrol", "label": "Patrol Routes", "icon": "🧭", "count": 8, "spread": 0.015},
    {"id": "cctv", "label": "CCTV Coverage", "icon": "📹", "count": 12, "spread": 0.018},
    {"id": "prediction", "label": "AI Predictions", "icon": "🗺️", "count": 6, "spread": 0.012},
]

MARKER_COLORS = {
    'red': '#EF4444',
    'amber': '#F59E0B',
    'green': '#10B981',
    'blue': '#3B82F6',
    'gray': '#6B7280',
}


# =============================================================================
# BASE MAP
# =============================================================================

# Tiles used when no Mapbox token is configured
OPEN_MAP_STYLE = "open-street-map"
MAP_HEIGHT = 520
