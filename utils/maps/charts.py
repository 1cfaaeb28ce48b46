# utils/maps/charts.py
"""
Plotly Map Builders

Heatmap (density_mapbox), marker layers and vehicle routes
(Scattermapbox). A Mapbox token switches the base map to the configured
Mapbox style; without one the open-street-map tiles are used.

VERSION: 1.0.0
"""

import logging
from typing import List, Optional, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .constants import DEFAULT_ZOOM, HEATMAP_COLORSCALE, MAP_HEIGHT, MARKER_COLORS, OPEN_MAP_STYLE
from .routes import VehicleRoute

logger = logging.getLogger(__name__)

ROUTE_COLORS = ['#EF4444', '#8B5CF6', '#F59E0B', '#3B82F6']


def base_map_style(token: Optional[str], mapbox_style: Optional[str] = None) -> dict:
    """mapbox layout kwargs for the available tile provider."""
    if token:
        return {'style': mapbox_style or 'streets', 'accesstoken': token}
    return {'style': OPEN_MAP_STYLE}


def _map_layout(fig: go.Figure, center: Tuple[float, float], zoom: int,
                token: Optional[str] = None, mapbox_style: Optional[str] = None,
                height: int = MAP_HEIGHT) -> go.Figure:
    fig.update_layout(
        mapbox=dict(
            center=dict(lat=center[0], lon=center[1]),
            zoom=zoom,
            **base_map_style(token, mapbox_style)
        ),
        height=height,
        margin={"r": 0, "t": 40, "l": 0, "b": 0},
        legend=dict(orientation="h", yanchor="bottom", y=0.01, xanchor="left", x=0.01),
    )
    return fig


class MapCharts:

    @staticmethod
    def build_heatmap(points: pd.DataFrame, center: Tuple[float, float], zoom: int = DEFAULT_ZOOM,
                      token: Optional[str] = None, mapbox_style: Optional[str] = None,
                      mode: str = 'intensity', radius: int = 20, title: str = "Crime Heatmap") -> go.Figure:
        """
        Density heatmap of generated points.

        mode='intensity' weights each point by its intensity,
        mode='density' counts points only.
        """
        fig = px.density_mapbox(
            points,
            lat='lat',
            lon='lng',
            z='intensity' if mode == 'intensity' else None,
            radius=radius,
            hover_data={'severity': True, 'intensity': True, 'lat': False, 'lng': False},
            color_continuous_scale=HEATMAP_COLORSCALE,
            title=title,
        )
        fig.update_coloraxes(showscale=False)
        return _map_layout(fig, center, zoom, token, mapbox_style)

    @staticmethod
    def build_marker_map(markers: pd.DataFrame, center: Tuple[float, float], zoom: int = DEFAULT_ZOOM,
                         token: Optional[str] = None, mapbox_style: Optional[str] = None,
                         title: str = "") -> go.Figure:
        """Markers with per-point color and size (see heatmap.generate_layer_markers)."""
        fig = go.Figure(go.Scattermapbox(
            lat=markers['lat'],
            lon=markers['lng'],
            mode='markers',
            marker=dict(size=markers['size'], color=markers['color'], opacity=0.85),
            text=markers['label'],
            hoverinfo='text',
            name=title or 'Markers',
        ))
        fig.update_layout(title=title)
        return _map_layout(fig, center, zoom, token, mapbox_style)

    @staticmethod
    def add_vehicle_routes(fig: go.Figure, routes: List[VehicleRoute]) -> go.Figure:
        """Solid line for observed points, dotted line to predicted ones."""
        for i, route in enumerate(routes):
            color = ROUTE_COLORS[i % len(ROUTE_COLORS)]
            fig.add_trace(go.Scattermapbox(
                lat=[p.lat for p in route.route],
                lon=[p.lng for p in route.route],
                mode='lines+markers',
                line=dict(width=3, color=color),
                marker=dict(size=7, color=color),
                text=[f"{route.plate} · {p.timestamp[11:16]}" for p in route.route],
                hoverinfo='text',
                name=f"{route.plate} ({route.risk_score:.0%})",
                legendgroup=route.id,
            ))
            if route.predicted:
                last = route.last_seen
                fig.add_trace(go.Scattermapbox(
                    lat=[last.lat] + [p.lat for p in route.predicted],
                    lon=[last.lng] + [p.lng for p in route.predicted],
                    mode='lines+markers',
                    line=dict(width=2, color=MARKER_COLORS['gray']),
                    marker=dict(size=[0] + [6 + p.probability * 10 for p in route.predicted], color=color),
                    text=[""] + [f"{route.plate} · {p.time_window} · {p.probability:.0%}" for p in route.predicted],
                    hoverinfo='text',
                    name=f"{route.plate} predicted",
                    legendgroup=route.id,
                    showlegend=False,
                ))
        return fig

    @staticmethod
    def build_routes_map(routes: List[VehicleRoute], center: Tuple[float, float], zoom: int = DEFAULT_ZOOM,
                         token: Optional[str] = None, mapbox_style: Optional[str] = None,
                         title: str = "Vehicle Routes") -> go.Figure:
        fig = go.Figure()
        fig.update_layout(title=title)
        MapCharts.add_vehicle_routes(fig, routes)
        return _map_layout(fig, center, zoom, token, mapbox_style)
