# utils/maps/__init__.py
"""
Maps Module

Mock heatmap points, marker layers and tracked vehicle routes rendered
with Plotly map traces.
"""

from .constants import DISTRICT_CENTERS, HEATMAP_TYPES, MAP_LAYERS, TIME_RANGES
from .heatmap import district_center, generate_heatmap_points, filter_time_range, generate_layer_markers
from .routes import VehicleRoute, RoutePoint, PredictedLocation, VEHICLE_ROUTES, get_vehicle_routes, routes_to_frame
from .charts import MapCharts, base_map_style
from .fragments import load_map_zoom, heatmap_fragment, layers_fragment

__all__ = [
    'DISTRICT_CENTERS',
    'HEATMAP_TYPES',
    'MAP_LAYERS',
    'TIME_RANGES',
    'district_center',
    'generate_heatmap_points',
    'filter_time_range',
    'generate_layer_markers',
    'VehicleRoute',
    'RoutePoint',
    'PredictedLocation',
    'VEHICLE_ROUTES',
    'get_vehicle_routes',
    'routes_to_frame',
    'MapCharts',
    'base_map_style',
    'load_map_zoom',
    'heatmap_fragment',
    'layers_fragment',
]
