# utils/maps/fragments.py
"""
Streamlit components for the crime map page.
"""

import logging
from typing import Optional

import streamlit as st

from ..config import config
from ..db import check_db_connection
from ..local_storage import LocalStorage
from ..preferences import load_preferences
from .charts import MapCharts
from .constants import DEFAULT_ZOOM, HEATMAP_MODES, HEATMAP_TYPES, MAP_LAYERS, TIME_RANGES
from .heatmap import district_center, generate_heatmap_points, generate_layer_markers, filter_time_range
from .routes import get_vehicle_routes

logger = logging.getLogger(__name__)


def load_map_zoom(storage: Optional[LocalStorage] = None) -> int:
    """Saved map zoom preference, or the default when storage is unavailable."""
    if storage is None:
        ok, error = check_db_connection()
        if not ok:
            logger.warning(f"Preferences unavailable, using default zoom: {error}")
            return DEFAULT_ZOOM
        storage = LocalStorage()
    return load_preferences(storage).map_default_zoom


def _map_provider():
    map_config = config.get_map_config()
    return config.get_api_key("mapbox"), map_config.style


@st.fragment
def heatmap_fragment(district_id: str, zoom: int, fragment_key: str = "maps_heatmap"):
    """Heatmap with type, time-range and mode controls."""
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        point_type = st.selectbox("Data", HEATMAP_TYPES, format_func=str.title, key=f"{fragment_key}_type")
    with col2:
        time_range = st.selectbox("Time range", list(TIME_RANGES), index=1,
                                  format_func=lambda r: TIME_RANGES[r]['label'], key=f"{fragment_key}_range")
    with col3:
        mode = st.radio("Mode", [m['id'] for m in HEATMAP_MODES], horizontal=True,
                        format_func=lambda m: next(x['label'] for x in HEATMAP_MODES if x['id'] == m),
                        key=f"{fragment_key}_mode")
    with col4:
        intensity = st.slider("Intensity", 0, 100, 50, key=f"{fragment_key}_intensity")

    freeze = st.checkbox("Freeze points", value=True, key=f"{fragment_key}_freeze")
    try:
        points = generate_heatmap_points(district_id, point_type, seed=11 if freeze else None)
        points = filter_time_range(points, time_range)
        token, style = _map_provider()
        fig = MapCharts.build_heatmap(
            points, district_center(district_id), zoom=zoom, token=token, mapbox_style=style,
            mode=mode, radius=10 + intensity // 4,
            title=f"{point_type.title()} heatmap · {TIME_RANGES[time_range]['label']}"
        )
        st.plotly_chart(fig, use_container_width=True)
        st.caption(
            f"{len(points)} points · "
            f"{(points['severity'] == 'high').sum()} high · "
            f"{(points['severity'] == 'medium').sum()} medium · "
            f"{(points['severity'] == 'low').sum()} low"
        )
    except Exception as e:
        logger.error(f"Heatmap render failed: {e}")
        st.error(f"Could not render heatmap: {e}")


@st.fragment
def layers_fragment(district_id: str, zoom: int, fragment_key: str = "maps_layers"):
    """Interactive marker map with one layer at a time plus vehicle routes."""
    col1, col2 = st.columns([3, 1])
    with col1:
        layer = st.radio(
            "Layer",
            [l['id'] for l in MAP_LAYERS],
            format_func=lambda i: next(f"{l['icon']} {l['label']}" for l in MAP_LAYERS if l['id'] == i),
            horizontal=True,
            key=f"{fragment_key}_layer",
        )
    with col2:
        show_routes = st.toggle("🚗 Vehicle routes", value=False, key=f"{fragment_key}_routes")

    try:
        markers = generate_layer_markers(district_id, layer, seed=23)
        token, style = _map_provider()
        label = next(l['label'] for l in MAP_LAYERS if l['id'] == layer)
        fig = MapCharts.build_marker_map(
            markers, district_center(district_id), zoom=zoom, token=token, mapbox_style=style, title=label
        )
        routes = get_vehicle_routes() if show_routes else []
        if routes:
            MapCharts.add_vehicle_routes(fig, routes)
        st.plotly_chart(fig, use_container_width=True)
    except Exception as e:
        logger.error(f"Layer map render failed: {e}")
        st.error(f"Could not render map: {e}")
        return

    if routes:
        st.dataframe(
            [{
                'Plate': r.plate,
                'Vehicle': f"{r.color} {r.model}",
                'Risk': f"{r.risk_score:.0%}",
                'District': r.district_id,
                'Last seen': r.last_seen.timestamp[11:16],
                'Next window': r.predicted[0].time_window if r.predicted else "N/A",
            } for r in routes],
            use_container_width=True,
            hide_index=True,
        )
